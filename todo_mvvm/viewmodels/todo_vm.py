"""Todo list state holder with the single-item edit session.

Call context:
    ``todo_mvvm/app/main.py`` and ``todo_mvvm/web_ui/runtime.py`` own one
    ``TodoVM`` each and forward every user intent (add, delete, tap to edit,
    edit field change, finish editing) to it. Views never write the list.

Edit session:
    ``edit_position`` is ``-1`` while idle, otherwise an index into
    ``items``. Every mutation keeps it valid. Removing any item closes the
    session because indices shift.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Iterator, List, Optional, Tuple

from ..domain.entities import TodoItem
from ..domain.errors import EditContractError

LOGGER = logging.getLogger(__name__)

NOT_EDITING = -1


@dataclass(frozen=True)
class TodoSnapshot:
    """Immutable view of the list handed to listeners and renderers."""

    items: Tuple[TodoItem, ...] = ()
    edit_position: int = NOT_EDITING

    @property
    def current_edit_item(self) -> Optional[TodoItem]:
        if 0 <= self.edit_position < len(self.items):
            return self.items[self.edit_position]
        return None

    @property
    def is_editing(self) -> bool:
        return self.current_edit_item is not None


Listener = Callable[[TodoSnapshot], None]


class TodoVM:
    """Ordered todo items plus the index of the item under edit.

    State transitions:
      - ``select_for_edit`` (id found): Idle/Editing -> Editing(i)
      - ``select_for_edit`` (id absent): -> Idle
      - ``cancel_edit``: -> Idle
      - ``commit_edit`` (matching id): Editing(i) -> Editing(i), item replaced
      - ``remove_item``: -> Idle, whether or not the item existed
      - ``add_item``: state unchanged

    Listeners receive a ``TodoSnapshot`` synchronously after every call that
    changed ``items`` or ``edit_position``.
    """

    def __init__(self, *, on_changed: Optional[Listener] = None) -> None:
        self._items: List[TodoItem] = []
        self._edit_position: int = NOT_EDITING
        self._listeners: List[Listener] = []
        if on_changed is not None:
            self.subscribe(on_changed)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    @property
    def items(self) -> Tuple[TodoItem, ...]:
        return tuple(self._items)

    @property
    def edit_position(self) -> int:
        return self._edit_position

    @property
    def current_edit_item(self) -> Optional[TodoItem]:
        if 0 <= self._edit_position < len(self._items):
            return self._items[self._edit_position]
        return None

    @property
    def is_editing(self) -> bool:
        return self.current_edit_item is not None

    @property
    def entry_enabled(self) -> bool:
        """True when the entry form should be shown instead of the edit header."""
        return self.current_edit_item is None

    def snapshot(self) -> TodoSnapshot:
        return TodoSnapshot(items=tuple(self._items), edit_position=self._edit_position)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(tuple(self._items))

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def add_item(self, item: TodoItem) -> None:
        self._items.append(item)
        LOGGER.debug("Added item %s (%d total)", item.id, len(self._items))
        self._notify()

    def remove_item(self, item: TodoItem) -> None:
        index = self._index_of(item)
        removed = index != NOT_EDITING
        if removed:
            del self._items[index]
            LOGGER.debug("Removed item %s at %d", item.id, index)
        else:
            LOGGER.debug("Remove ignored, item %s not in list", item.id)
        closed = self._set_edit_position(NOT_EDITING)
        if removed or closed:
            self._notify()

    def select_for_edit(self, item: TodoItem) -> None:
        index = self._index_of(item)
        if index == NOT_EDITING:
            LOGGER.debug("Select ignored, item %s not in list; edit closed", item.id)
        if self._set_edit_position(index):
            self._notify()

    def cancel_edit(self) -> None:
        if self._set_edit_position(NOT_EDITING):
            self._notify()

    def commit_edit(self, item: TodoItem) -> None:
        current = self.current_edit_item
        if current is None:
            raise EditContractError("NOT_EDITING", "No item is currently selected for editing.")
        if current.id != item.id:
            raise EditContractError(
                "ID_MISMATCH",
                "You can only change an item with the same id as the item under edit.",
            )
        self._items[self._edit_position] = item
        LOGGER.debug("Committed edit for item %s at %d", item.id, self._edit_position)
        self._notify()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _index_of(self, item: TodoItem) -> int:
        for index, candidate in enumerate(self._items):
            if candidate.id == item.id:
                return index
        return NOT_EDITING

    def _set_edit_position(self, position: int) -> bool:
        """Store ``position`` and report whether it changed."""
        if position == self._edit_position:
            return False
        self._edit_position = position
        return True

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["NOT_EDITING", "Listener", "TodoSnapshot", "TodoVM"]
