from __future__ import annotations

import random
from uuid import UUID

import pytest

from todo_mvvm.domain.entities import TodoIcon, TodoItem
from todo_mvvm.domain.generators import RANDOM_MESSAGES, generate_random_todo_item


def test_item_defaults_to_default_icon_and_fresh_uuid() -> None:
    first = TodoItem(task="A")
    second = TodoItem(task="A")
    assert first.icon is TodoIcon.DEFAULT
    assert isinstance(first.id, UUID)
    assert first.id != second.id


def test_copies_keep_identity() -> None:
    item = TodoItem(task="A", icon=TodoIcon.DONE)
    renamed = item.with_task("B")
    retagged = item.with_icon(TodoIcon.WORK)
    assert renamed.id == item.id and renamed.task == "B" and renamed.icon is TodoIcon.DONE
    assert retagged.id == item.id and retagged.icon is TodoIcon.WORK
    assert item.task == "A"


def test_item_rejects_bad_field_types() -> None:
    with pytest.raises(TypeError):
        TodoItem(task=3)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TodoItem(task="A", icon="work")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        TodoItem(task="A", id="not-a-uuid")  # type: ignore[arg-type]


def test_default_icon_is_square_alias() -> None:
    assert TodoIcon.DEFAULT is TodoIcon.SQUARE
    assert TodoIcon.DEFAULT not in list(TodoIcon)[1:]
    assert len(list(TodoIcon)) == 6
    assert TodoIcon.WORK.material_name == "work"
    assert TodoIcon.DONE.description == "Done"


def test_random_item_uses_known_messages_and_icons() -> None:
    rng = random.Random(42)
    for _ in range(50):
        item = generate_random_todo_item(rng)
        assert item.task in RANDOM_MESSAGES
        assert item.icon in list(TodoIcon)


def test_random_item_without_rng() -> None:
    item = generate_random_todo_item()
    assert item.task in RANDOM_MESSAGES
