"""Random test-data generator backing the "Add random item" button."""
from __future__ import annotations

import random
from typing import Optional, Tuple

from .entities import TodoIcon, TodoItem

RANDOM_MESSAGES: Tuple[str, ...] = (
    "Learn compose",
    "Learn state",
    "Build dynamic UIs",
    "Learn Unidirectional Data Flow",
    "Integrate LiveData",
    "Integrate ViewModel",
    "Remember to savedState!",
    "Build stateless composables",
    "Use state from stateless composables",
)


def generate_random_todo_item(rng: Optional[random.Random] = None) -> TodoItem:
    """Build a ``TodoItem`` with a random message, a random icon and a fresh id."""
    source = rng or random
    message = source.choice(RANDOM_MESSAGES)
    icon = source.choice(list(TodoIcon))
    return TodoItem(task=message, icon=icon)


__all__ = ["RANDOM_MESSAGES", "generate_random_todo_item"]
