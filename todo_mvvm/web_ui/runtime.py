"""NiceGUI runtime orchestration for the todo app.

This module composes the todo viewmodels for the web runtime. It holds the
process-wide list shared by every browser tab and never imports NiceGUI, so
intent handling stays testable without a server.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional
from uuid import UUID

from todo_mvvm.domain.entities import TodoIcon, TodoItem
from todo_mvvm.domain.errors import TodoError
from todo_mvvm.domain.generators import generate_random_todo_item
from todo_mvvm.viewmodels.entry_vm import EntryVM
from todo_mvvm.viewmodels.icon_tints import IconTints
from todo_mvvm.viewmodels.row_format import TodoRow, build_rows, header_label
from todo_mvvm.viewmodels.todo_vm import Listener, TodoSnapshot, TodoVM


LOGGER = logging.getLogger(__name__)


class PageSubscription:
    """Listener registration for one page that survives socket reconnects.

    ``attach`` and ``detach`` are idempotent. Re-attaching after a detach
    pushes the current snapshot once so the page catches up on changes it
    missed while disconnected.
    """

    def __init__(self, runtime: "WebRuntime", listener: Listener) -> None:
        self._runtime = runtime
        self._listener = listener
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._detached = False

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> None:
        if self._unsubscribe is not None:
            return
        self._unsubscribe = self._runtime.subscribe(self._listener)
        if self._detached:
            self._listener(self._runtime.snapshot())

    def detach(self) -> None:
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None
        self._detached = True


class WebRuntime:
    """Owns the shared ``TodoVM`` and translates page events into intents."""

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.todo_vm = TodoVM()
        self.tints = IconTints(rng=rng)
        self.status_message = "Ready"

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    def snapshot(self) -> TodoSnapshot:
        return self.todo_vm.snapshot()

    def rows(self) -> List[TodoRow]:
        return build_rows(self.todo_vm.snapshot(), self.tints)

    def header(self) -> Optional[str]:
        return header_label(self.todo_vm.snapshot())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.todo_vm.subscribe(listener)

    def make_entry_vm(self) -> EntryVM:
        """Create per-page entry form state that feeds the shared list."""
        return EntryVM(on_item_complete=self.add_item)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def add_item(self, item: TodoItem) -> None:
        self.todo_vm.add_item(item)
        self.status_message = f"Added '{item.task}'"

    def add_random_item(self) -> TodoItem:
        item = generate_random_todo_item(self._rng)
        self.add_item(item)
        return item

    def start_edit(self, item_id: str) -> None:
        item = self._find(item_id)
        if item is None:
            LOGGER.debug("Start edit for unknown id %s ignored", item_id)
            self.todo_vm.cancel_edit()
            return
        self.todo_vm.select_for_edit(item)

    def change_edit_task(self, task: str) -> bool:
        current = self.todo_vm.current_edit_item
        if current is None:
            return self._reject_edit(None)
        return self._commit(current.with_task(str(task or "")))

    def change_edit_icon(self, icon: TodoIcon) -> bool:
        current = self.todo_vm.current_edit_item
        if current is None:
            return self._reject_edit(None)
        return self._commit(current.with_icon(icon))

    def finish_edit(self) -> None:
        self.todo_vm.cancel_edit()

    def delete_item(self, item_id: str) -> None:
        item = self._find(item_id)
        if item is None:
            LOGGER.debug("Delete for unknown id %s ignored", item_id)
            self.todo_vm.cancel_edit()
            return
        self.todo_vm.remove_item(item)
        self.status_message = f"Removed '{item.task}'"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _find(self, item_id: str) -> Optional[TodoItem]:
        try:
            wanted = UUID(str(item_id))
        except ValueError:
            return None
        for item in self.todo_vm.items:
            if item.id == wanted:
                return item
        return None

    def _commit(self, item: TodoItem) -> bool:
        try:
            self.todo_vm.commit_edit(item)
        except TodoError as exc:
            return self._reject_edit(exc)
        return True

    def _reject_edit(self, exc: Optional[TodoError]) -> bool:
        message = exc.message if exc is not None else "No item is currently selected for editing."
        LOGGER.warning("Edit rejected: %s", message)
        self.status_message = message
        return False


__all__ = ["PageSubscription", "WebRuntime"]
