from __future__ import annotations

import random

import pytest

from todo_mvvm.domain.entities import TodoIcon, TodoItem
from todo_mvvm.domain.errors import EditContractError
from todo_mvvm.viewmodels.todo_vm import NOT_EDITING, TodoSnapshot, TodoVM


def _tasks(vm: TodoVM) -> list:
    return [item.task for item in vm.items]


def test_new_vm_is_idle_and_empty() -> None:
    vm = TodoVM()
    assert vm.items == ()
    assert vm.edit_position == NOT_EDITING
    assert vm.current_edit_item is None
    assert vm.entry_enabled is True
    assert len(vm) == 0


def test_add_select_commit_remove_scenario() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")

    vm.add_item(item)
    assert _tasks(vm) == ["A"]
    assert vm.edit_position == NOT_EDITING

    vm.select_for_edit(TodoItem(task="ignored", id=item.id))
    assert vm.current_edit_item == item
    assert vm.entry_enabled is False

    vm.commit_edit(item.with_task("A!"))
    assert _tasks(vm) == ["A!"]
    assert vm.edit_position == 0
    assert vm.current_edit_item.task == "A!"

    vm.remove_item(item)
    assert vm.items == ()
    assert vm.edit_position == NOT_EDITING


def test_removing_another_item_closes_the_edit_session() -> None:
    vm = TodoVM()
    first = TodoItem(task="A")
    second = TodoItem(task="B")
    vm.add_item(first)
    vm.add_item(second)

    vm.select_for_edit(second)
    assert vm.edit_position == 1

    vm.remove_item(first)
    assert vm.items == (second,)
    assert vm.edit_position == NOT_EDITING
    assert vm.current_edit_item is None


def test_select_absent_item_matches_cancel_edit() -> None:
    vm = TodoVM()
    present = TodoItem(task="A")
    vm.add_item(present)
    vm.select_for_edit(present)

    vm.select_for_edit(TodoItem(task="A"))

    cancelled = TodoVM()
    cancelled.add_item(present)
    cancelled.select_for_edit(present)
    cancelled.cancel_edit()
    assert vm.snapshot() == cancelled.snapshot()


def test_matching_is_by_id_not_by_value() -> None:
    vm = TodoVM()
    first = TodoItem(task="same", icon=TodoIcon.WORK)
    twin = TodoItem(task="same", icon=TodoIcon.WORK)
    vm.add_item(first)
    vm.add_item(twin)

    vm.select_for_edit(twin)
    assert vm.edit_position == 1

    vm.remove_item(TodoItem(task="other", id=twin.id))
    assert vm.items == (first,)


def test_remove_absent_item_is_noop_on_items() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")
    vm.add_item(item)
    vm.remove_item(TodoItem(task="A"))
    assert vm.items == (item,)


def test_add_then_remove_restores_prior_items() -> None:
    vm = TodoVM()
    keep = TodoItem(task="keep")
    vm.add_item(keep)
    vm.select_for_edit(keep)
    before = vm.items

    extra = TodoItem(task="extra")
    vm.add_item(extra)
    assert vm.edit_position == 0
    vm.remove_item(extra)

    assert vm.items == before
    assert vm.edit_position == NOT_EDITING


def test_cancel_edit_is_idempotent() -> None:
    vm = TodoVM()
    vm.cancel_edit()
    vm.cancel_edit()
    assert vm.edit_position == NOT_EDITING


def test_commit_without_selection_raises_not_editing() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")
    vm.add_item(item)
    with pytest.raises(EditContractError) as excinfo:
        vm.commit_edit(item.with_task("B"))
    assert excinfo.value.code == "NOT_EDITING"
    assert _tasks(vm) == ["A"]


def test_commit_with_mismatched_id_raises_and_leaves_items() -> None:
    vm = TodoVM()
    first = TodoItem(task="A")
    second = TodoItem(task="B")
    vm.add_item(first)
    vm.add_item(second)
    vm.select_for_edit(first)

    with pytest.raises(EditContractError) as excinfo:
        vm.commit_edit(second.with_task("hijacked"))

    assert excinfo.value.code == "ID_MISMATCH"
    assert vm.items == (first, second)
    assert vm.edit_position == 0


def test_items_is_a_snapshot_not_the_backing_list() -> None:
    vm = TodoVM()
    vm.add_item(TodoItem(task="A"))
    items = vm.items
    assert isinstance(items, tuple)
    vm.add_item(TodoItem(task="B"))
    assert len(items) == 1
    assert len(vm) == 2


def test_listeners_receive_snapshots_in_order() -> None:
    calls = []
    vm = TodoVM(on_changed=lambda snap: calls.append(("ctor", snap)))
    vm.subscribe(lambda snap: calls.append(("sub", snap)))
    item = TodoItem(task="A")

    vm.add_item(item)

    assert [name for name, _ in calls] == ["ctor", "sub"]
    snapshot = calls[0][1]
    assert isinstance(snapshot, TodoSnapshot)
    assert snapshot.items == (item,)
    assert snapshot.current_edit_item is None


def test_listener_sees_state_before_call_returns() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")
    vm.add_item(item)
    seen = []
    vm.subscribe(lambda snap: seen.append(snap.current_edit_item))

    vm.select_for_edit(item)

    assert seen == [item]


def test_noop_operations_do_not_notify() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")
    vm.add_item(item)
    vm.select_for_edit(item)
    calls = []
    vm.subscribe(calls.append)

    vm.select_for_edit(item)
    assert calls == []

    vm.cancel_edit()
    assert len(calls) == 1
    vm.cancel_edit()
    vm.remove_item(TodoItem(task="missing"))
    vm.select_for_edit(TodoItem(task="missing"))
    assert len(calls) == 1


def test_remove_absent_while_editing_notifies_session_close() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")
    vm.add_item(item)
    vm.select_for_edit(item)
    calls = []
    vm.subscribe(calls.append)

    vm.remove_item(TodoItem(task="missing"))

    assert len(calls) == 1
    assert calls[0].edit_position == NOT_EDITING
    assert calls[0].items == (item,)


def test_commit_edit_notifies_even_for_an_equal_copy() -> None:
    vm = TodoVM()
    item = TodoItem(task="A")
    vm.add_item(item)
    vm.select_for_edit(item)
    calls = []
    vm.subscribe(calls.append)

    vm.commit_edit(item.with_task("A"))
    assert len(calls) == 1
    assert calls[0].items == (item,)

    vm.commit_edit(item.with_task("A!"))
    assert len(calls) == 2
    assert calls[1].current_edit_item.task == "A!"


def test_unsubscribe_stops_notifications() -> None:
    vm = TodoVM()
    calls = []
    unsubscribe = vm.subscribe(calls.append)
    vm.add_item(TodoItem(task="A"))
    unsubscribe()
    unsubscribe()
    vm.add_item(TodoItem(task="B"))
    assert len(calls) == 1


def test_edit_position_never_stale_under_random_operations() -> None:
    rng = random.Random(1234)
    vm = TodoVM()
    pool = [TodoItem(task=f"task-{n}") for n in range(8)]

    for _ in range(2000):
        op = rng.choice(["add", "remove", "select", "cancel", "commit"])
        candidate = rng.choice(pool)
        if op == "add":
            if all(existing.id != candidate.id for existing in vm.items):
                vm.add_item(candidate)
        elif op == "remove":
            vm.remove_item(candidate)
        elif op == "select":
            vm.select_for_edit(candidate)
        elif op == "cancel":
            vm.cancel_edit()
        else:
            current = vm.current_edit_item
            if current is None:
                with pytest.raises(EditContractError):
                    vm.commit_edit(candidate)
            elif current.id == candidate.id:
                vm.commit_edit(current.with_task(current.task + "!"))
            else:
                before = vm.items
                with pytest.raises(EditContractError):
                    vm.commit_edit(candidate)
                assert vm.items == before

        position = vm.edit_position
        assert position == NOT_EDITING or 0 <= position < len(vm.items)
        ids = [item.id for item in vm.items]
        assert len(ids) == len(set(ids))
