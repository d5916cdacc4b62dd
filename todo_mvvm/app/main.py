# todo_mvvm/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.todo_screen_view import TodoScreenView

# ---- ViewModels ----
from ..viewmodels.entry_vm import EntryVM
from ..viewmodels.icon_tints import IconTints
from ..viewmodels.row_format import build_rows, header_label
from ..viewmodels.todo_vm import TodoSnapshot, TodoVM

# ---- Domain ----
from ..domain.entities import TodoIcon, TodoItem
from ..domain.errors import TodoError
from ..domain.generators import generate_random_todo_item
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire the todo screen view to the todo and entry view models."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.win = MainWindowView(
            on_cancel_edit=self._on_edit_done,
            on_add_random=self._on_add_random,
        )

        # ---- ViewModels ----
        self.tints = IconTints()
        self.entry_vm = EntryVM(on_item_complete=self._on_item_complete)
        self.todo_vm = TodoVM(on_changed=self._on_todo_changed)
        self._editor_typing = False

        # ---- Subviews (constructor callbacks; no .configure(...)) ----
        self.screen = TodoScreenView(
            self.win.screen_host,
            on_entry_text_change=self._on_entry_text_change,
            on_entry_icon_change=self._on_entry_icon_change,
            on_entry_submit=self._on_entry_submit,
            on_start_edit=self.todo_vm.select_for_edit,
            on_edit_item_change=self._on_edit_item_change,
            on_edit_done=self._on_edit_done,
            on_remove_item=self._on_remove_item,
            on_add_random=self._on_add_random,
        )
        self.screen.pack(fill="both", expand=True)

        self._render(self.todo_vm.snapshot())

    # ==================================================================
    # ViewModel -> View
    # ==================================================================
    def _on_todo_changed(self, snapshot: TodoSnapshot) -> None:
        if self._editor_typing:
            # The inline editor already shows the typed text; rebuilding it
            # would drop keyboard focus.
            self._render_header(snapshot)
            self.win.set_item_count(len(snapshot.items))
            return
        self._render(snapshot)

    def _render(self, snapshot: TodoSnapshot) -> None:
        self._render_header(snapshot)
        self.screen.render_rows(build_rows(snapshot, self.tints))
        self.win.set_item_count(len(snapshot.items))

    def _render_header(self, snapshot: TodoSnapshot) -> None:
        self.screen.render_header(
            header_label(snapshot),
            entry_text=self.entry_vm.text,
            entry_icon=self.entry_vm.icon,
            icons_visible=self.entry_vm.icons_visible,
        )

    # ==================================================================
    # View -> ViewModel
    # ==================================================================
    def _on_entry_text_change(self, text: str) -> None:
        self.entry_vm.set_text(text)
        self._sync_entry()

    def _on_entry_icon_change(self, icon: TodoIcon) -> None:
        self.entry_vm.set_icon(icon)
        self._sync_entry()

    def _on_entry_submit(self) -> None:
        if self.entry_vm.submit() is None:
            self.win.set_status("Type a task first.")
        self._sync_entry()

    def _on_item_complete(self, item: TodoItem) -> None:
        self.todo_vm.add_item(item)
        self.win.set_status(f"Added '{item.task}'.")

    def _on_add_random(self) -> None:
        self._on_item_complete(generate_random_todo_item())

    def _on_edit_item_change(self, item: TodoItem) -> None:
        current = self.todo_vm.current_edit_item
        typing = current is not None and current.icon is item.icon
        self._editor_typing = typing
        try:
            self.todo_vm.commit_edit(item)
        except TodoError as err:
            self._toast_error(err)
        finally:
            self._editor_typing = False

    def _on_edit_done(self) -> None:
        self.todo_vm.cancel_edit()

    def _on_remove_item(self, item: TodoItem) -> None:
        self.todo_vm.remove_item(item)
        self.win.set_status(f"Removed '{item.task}'.")

    def _sync_entry(self) -> None:
        self.screen.set_entry_state(
            self.entry_vm.text,
            self.entry_vm.icon,
            self.entry_vm.icons_visible,
        )

    # ==================================================================
    # Error handling helpers
    # ==================================================================
    def _toast_error(self, err: Exception, *, context: Optional[str] = None) -> None:
        message = self._format_error_message(err)
        if context:
            message = f"{context}: {message}"
        self.win.set_status(message)

    def _format_error_message(self, err: Exception) -> str:
        if isinstance(err, TodoError):
            self._log.warning("Todo error (%s): %s", err.code, err.message)
            return err.message
        self._log.exception("Unexpected error")
        return str(err)


def main() -> None:
    logging_utils.configure_root()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
