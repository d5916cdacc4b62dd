"""Per-item icon tint memory.

Call context:
    Row projection asks for one alpha per item id. The value is drawn once and
    reused on every re-render until the id disappears from the list.
"""

from __future__ import annotations

import random
from typing import Dict, Iterable, Optional
from uuid import UUID

TINT_MIN = 0.3
TINT_MAX = 0.9


class IconTints:
    """Remembers a random icon alpha in ``[TINT_MIN, TINT_MAX]`` per item id."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._tints: Dict[UUID, float] = {}

    def tint_for(self, item_id: UUID) -> float:
        tint = self._tints.get(item_id)
        if tint is None:
            tint = min(max(self._rng.random(), TINT_MIN), TINT_MAX)
            self._tints[item_id] = tint
        return tint

    def retain(self, item_ids: Iterable[UUID]) -> None:
        """Forget tints for ids that are no longer displayed."""
        keep = set(item_ids)
        for item_id in list(self._tints):
            if item_id not in keep:
                del self._tints[item_id]

    def __len__(self) -> int:
        return len(self._tints)


__all__ = ["IconTints", "TINT_MAX", "TINT_MIN"]
