from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.entities import TodoIcon, TodoItem


@dataclass
class EntryVM:
    """Holds the "new item" form state: text, chosen icon. Pure UI-logic.

    The icon row is only offered once some text has been typed. ``submit``
    hands a fresh ``TodoItem`` to ``on_item_complete`` and resets the form.
    """

    on_item_complete: Optional[Callable[[TodoItem], None]] = None

    text: str = ""
    icon: TodoIcon = TodoIcon.DEFAULT

    @property
    def icons_visible(self) -> bool:
        return bool(self.text.strip())

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip())

    def set_text(self, text: Optional[str]) -> None:
        self.text = "" if text is None else str(text)

    def set_icon(self, icon: TodoIcon) -> None:
        if not isinstance(icon, TodoIcon):
            raise TypeError("icon must be a TodoIcon.")
        self.icon = icon

    def reset(self) -> None:
        self.text = ""
        self.icon = TodoIcon.DEFAULT

    def submit(self) -> Optional[TodoItem]:
        if not self.can_submit:
            return None
        item = TodoItem(task=self.text, icon=self.icon)
        if self.on_item_complete:
            self.on_item_complete(item)
        self.reset()
        return item
