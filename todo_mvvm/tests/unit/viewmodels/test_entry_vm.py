from __future__ import annotations

import pytest

from todo_mvvm.domain.entities import TodoIcon
from todo_mvvm.viewmodels.entry_vm import EntryVM


def test_blank_text_hides_icons_and_blocks_submit() -> None:
    completed = []
    vm = EntryVM(on_item_complete=completed.append)
    vm.set_text("   ")

    assert vm.icons_visible is False
    assert vm.can_submit is False
    assert vm.submit() is None
    assert completed == []
    assert vm.text == "   "


def test_submit_emits_item_and_resets_form() -> None:
    completed = []
    vm = EntryVM(on_item_complete=completed.append)
    vm.set_text("Water plants")
    vm.set_icon(TodoIcon.EVENT)
    assert vm.icons_visible is True

    item = vm.submit()

    assert completed == [item]
    assert item.task == "Water plants"
    assert item.icon is TodoIcon.EVENT
    assert vm.text == ""
    assert vm.icon is TodoIcon.DEFAULT


def test_submit_twice_creates_distinct_ids() -> None:
    vm = EntryVM()
    vm.set_text("A")
    first = vm.submit()
    vm.set_text("A")
    second = vm.submit()
    assert first.id != second.id


def test_set_text_none_clears() -> None:
    vm = EntryVM()
    vm.set_text("x")
    vm.set_text(None)
    assert vm.text == ""


def test_set_icon_rejects_non_icon() -> None:
    vm = EntryVM()
    with pytest.raises(TypeError):
        vm.set_icon("work")  # type: ignore[arg-type]
