"""Domain package exports for value objects, errors and generators."""

from .entities import TodoIcon, TodoItem
from .errors import EditContractError, TodoError
from .generators import RANDOM_MESSAGES, generate_random_todo_item

__all__ = [
    "EditContractError",
    "RANDOM_MESSAGES",
    "TodoError",
    "TodoIcon",
    "TodoItem",
    "generate_random_todo_item",
]
