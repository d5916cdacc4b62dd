from __future__ import annotations

"""Domain value objects shared by view models and both runtimes."""

from dataclasses import dataclass, field, replace
from enum import Enum
from uuid import UUID, uuid4


class TodoIcon(Enum):
    """Icon tag attached to a todo item.

    Each member carries ``(material_name, glyph, description)``. The web
    runtime renders ``material_name``, the desktop runtime renders ``glyph``.
    ``DEFAULT`` is an alias of ``SQUARE`` and is skipped when iterating.
    """

    SQUARE = ("crop_square", "▢", "Expand")
    DONE = ("done", "✔", "Done")
    EVENT = ("event", "\U0001f4c5", "Event")
    PRIVACY = ("privacy_tip", "\U0001f6e1", "Privacy")
    TRASH = ("restore_from_trash", "\U0001f5d1", "Restore")
    WORK = ("work", "\U0001f4bc", "Work")
    DEFAULT = ("crop_square", "▢", "Expand")

    @property
    def material_name(self) -> str:
        return self.value[0]

    @property
    def glyph(self) -> str:
        return self.value[1]

    @property
    def description(self) -> str:
        return self.value[2]


@dataclass(frozen=True)
class TodoItem:
    """A unit of work with a stable identity, a text label and an icon tag."""

    task: str
    """Free text label shown in the list row."""

    icon: TodoIcon = TodoIcon.DEFAULT
    """Cosmetic tag; never used for identity."""

    id: UUID = field(default_factory=uuid4)
    """Identity used for every edit/remove match. Immutable for the item's lifetime."""

    def __post_init__(self) -> None:
        if not isinstance(self.task, str):
            raise TypeError("TodoItem.task must be a string.")
        if not isinstance(self.icon, TodoIcon):
            raise TypeError("TodoItem.icon must be a TodoIcon.")
        if not isinstance(self.id, UUID):
            raise TypeError("TodoItem.id must be a UUID.")

    def with_task(self, task: str) -> "TodoItem":
        """Return a copy carrying ``task`` and the same id."""
        return replace(self, task=task)

    def with_icon(self, icon: TodoIcon) -> "TodoItem":
        """Return a copy carrying ``icon`` and the same id."""
        return replace(self, icon=icon)

    def __str__(self) -> str:
        return self.task
