"""ViewModel package for UI state and command surfaces.

Call context:
    ``todo_mvvm/app/main.py`` and ``todo_mvvm/web_ui/runtime.py`` import
    concrete viewmodels from this package to bind view callbacks to state
    transitions.

Dependencies:
    Modules in this package depend on domain types only. Rendering toolkits
    (tkinter, NiceGUI) stay outside.

Responsibilities:
    - Own the todo list and its edit session (``TodoVM``).
    - Hold entry-form state (``EntryVM``).
    - Project snapshots into display rows (``row_format``, ``IconTints``).
"""

from .entry_vm import EntryVM
from .icon_tints import IconTints
from .row_format import EDITING_HEADER, TodoRow, build_rows, header_label
from .todo_vm import NOT_EDITING, TodoSnapshot, TodoVM

__all__ = [
    "EDITING_HEADER",
    "EntryVM",
    "IconTints",
    "NOT_EDITING",
    "TodoRow",
    "TodoSnapshot",
    "TodoVM",
    "build_rows",
    "header_label",
]
