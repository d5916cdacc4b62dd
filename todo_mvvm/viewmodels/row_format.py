"""Display-row projection of a ``TodoSnapshot`` for both runtimes.

Call context:
    ``TodoScreenView.render`` (desktop) and the NiceGUI page (web) render the
    rows returned by ``build_rows`` and pick the header from ``header_label``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..domain.entities import TodoItem
from .icon_tints import IconTints
from .todo_vm import TodoSnapshot

EDITING_HEADER = "Editing item"


@dataclass(frozen=True)
class TodoRow:
    """Display row: either a read-only row or the inline editor."""
    item: TodoItem
    editing: bool
    tint: float

    @property
    def row_id(self) -> str:
        return str(self.item.id)


def build_rows(snapshot: TodoSnapshot, tints: IconTints) -> List[TodoRow]:
    """Return one row per item in display order; at most one row is ``editing``."""
    current = snapshot.current_edit_item
    editing_id = current.id if current is not None else None
    tints.retain(item.id for item in snapshot.items)
    return [
        TodoRow(item=item, editing=item.id == editing_id, tint=tints.tint_for(item.id))
        for item in snapshot.items
    ]


def header_label(snapshot: TodoSnapshot) -> Optional[str]:
    """Return ``None`` when the entry form is shown, else the edit header text."""
    return EDITING_HEADER if snapshot.is_editing else None


def tint_to_hex(tint: float, *, foreground: str = "#1f2937", background: str = "#ffffff") -> str:
    """Blend ``foreground`` over ``background`` at alpha ``tint`` (Tk has no alpha)."""
    alpha = min(max(float(tint), 0.0), 1.0)
    fg = [int(foreground[i:i + 2], 16) for i in (1, 3, 5)]
    bg = [int(background[i:i + 2], 16) for i in (1, 3, 5)]
    mixed = [round(f * alpha + b * (1.0 - alpha)) for f, b in zip(fg, bg)]
    return "#" + "".join(f"{channel:02x}" for channel in mixed)


__all__ = ["EDITING_HEADER", "TodoRow", "build_rows", "header_label", "tint_to_hex"]
