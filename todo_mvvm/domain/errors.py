"""Domain-level error types shared by view models and runtimes.

Runtimes catch ``TodoError`` at the event-handler boundary and surface
``message`` to the user; ``code`` stays stable for tests and logs.
"""
from __future__ import annotations


class TodoError(Exception):
    """Base class for todo domain errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class EditContractError(TodoError):
    """Raised when an edit is committed for an item that is not under edit.

    Codes:
      - ``NOT_EDITING``: no item is currently selected for editing
      - ``ID_MISMATCH``: the committed item has a different id than the
        item under edit
    """


__all__ = ["EditContractError", "TodoError"]
