from __future__ import annotations

import pytest

from todos.domain.todo.entities import Todo, TodoList, TodoListCollection
from todos.domain.todo.exceptions import ValidationError
from todos.domain.todo.validation import LIST_TITLE_UNIQUE


def _list_with(*todos: tuple[str, bool]) -> TodoList:
    todo_list = TodoList(id=1, title="Work")
    for title, done in todos:
        todo = todo_list.new_todo(title)
        if done:
            todo.mark_done()
    return todo_list


@pytest.mark.parametrize("title", ["a", "Work", " padded ", "x" * 100])
def test_create_accepts_valid_titles(title: str) -> None:
    todo_list = TodoList.create(title, [], 1)

    assert todo_list.title == title.strip()
    assert todo_list.todos == []


@pytest.mark.parametrize("title", ["", "  ", "x" * 101])
def test_create_rejects_invalid_titles(title: str) -> None:
    with pytest.raises(ValidationError):
        TodoList.create(title, [], 1)


def test_create_rejects_exact_duplicate_but_not_other_case(collection: TodoListCollection) -> None:
    collection.add_list("Work")

    second = collection.add_list("work")
    assert second.title == "work"

    with pytest.raises(ValidationError) as excinfo:
        collection.add_list("Work")
    assert LIST_TITLE_UNIQUE in excinfo.value.messages
    assert collection.titles() == ["Work", "work"]


def test_set_title_may_keep_its_own_title(collection: TodoListCollection) -> None:
    work = collection.add_list("Work")

    work.set_title("Work", collection.lists)

    assert work.title == "Work"


def test_set_title_rejects_sibling_title_without_partial_change(collection: TodoListCollection) -> None:
    collection.add_list("Home")
    work = collection.add_list("Work")

    with pytest.raises(ValidationError):
        work.set_title("Home", collection.lists)

    assert work.title == "Work"


def test_titles_stay_distinct_after_renames(collection: TodoListCollection) -> None:
    first = collection.add_list("One")
    second = collection.add_list("Two")

    first.set_title("Three", collection.lists)
    with pytest.raises(ValidationError):
        second.set_title("Three", collection.lists)
    second.set_title("One", collection.lists)

    titles = collection.titles()
    assert len(titles) == len(set(titles))


def test_add_appends_and_find_by_id() -> None:
    todo_list = _list_with(("a", False), ("b", False))
    extra = Todo.create("c", 10)

    todo_list.add(extra)

    assert [todo.title for todo in todo_list] == ["a", "b", "c"]
    assert todo_list.find_by_id(10) is extra
    assert todo_list.find_by_id(99) is None
    assert todo_list.next_todo_id == 11


def test_add_rejects_duplicate_id() -> None:
    todo_list = _list_with(("a", False))

    with pytest.raises(ValueError):
        todo_list.add(Todo.create("again", 1))


def test_find_index_of_uses_identity() -> None:
    todo_list = _list_with(("a", False), ("b", False))
    lookalike = Todo(id=2, title="b")

    assert todo_list.find_index_of(todo_list.todos[1]) == 1
    assert todo_list.find_index_of(lookalike) is None


def test_remove_at_keeps_order_and_ids() -> None:
    todo_list = _list_with(("a", False), ("b", False), ("c", False))

    removed = todo_list.remove_at(1)

    assert removed.title == "b"
    assert [(todo.id, todo.title) for todo in todo_list] == [(1, "a"), (3, "c")]


def test_removed_ids_are_never_reused() -> None:
    todo_list = _list_with(("a", False), ("b", False))

    todo_list.remove_at(1)
    new = todo_list.new_todo("c")

    assert new.id == 3


@pytest.mark.parametrize(("size", "index"), [(0, 0), (3, 3), (3, -1)])
def test_remove_at_out_of_range(size: int, index: int) -> None:
    todo_list = _list_with(*[(f"todo {n}", False) for n in range(size)])
    before = [todo.id for todo in todo_list]

    with pytest.raises(IndexError):
        todo_list.remove_at(index)

    assert [todo.id for todo in todo_list] == before


def test_mark_all_done_is_idempotent() -> None:
    todo_list = _list_with(("a", False), ("b", True), ("c", False))

    todo_list.mark_all_done()
    assert all(todo.is_done() for todo in todo_list)
    assert todo_list.is_done() is True

    todo_list.mark_all_done()
    assert [todo.is_done() for todo in todo_list] == [True, True, True]


def test_done_helpers() -> None:
    empty = TodoList(id=1, title="Empty")
    partial = _list_with(("a", True), ("b", False))

    assert empty.is_done() is False
    assert empty.has_open_todos() is False
    assert partial.count_done() == 1
    assert partial.has_open_todos() is True
    assert partial.first().title == "a"
    assert partial.last().title == "b"
    assert empty.first() is None


def test_collection_lookup_and_removal(collection: TodoListCollection) -> None:
    work = collection.add_list("Work")
    home = collection.add_list("Home")

    assert collection.find_by_id(home.id) is home
    assert collection.find_index_of(work.id) == 0
    assert collection.remove_by_id(work.id) is work
    assert collection.remove_by_id(work.id) is None
    assert collection.find_by_id(999) is None

    again = collection.add_list("Work")
    assert again.id == 3


def test_direct_construction_enforces_title_bounds() -> None:
    with pytest.raises(ValidationError):
        Todo(id=50, title="x" * 101)
    with pytest.raises(ValidationError):
        TodoList(id=9, title="y" * 101)

    assert Todo(id=1, title="x" * 100).title == "x" * 100
    assert TodoList(id=1, title="y" * 100).title == "y" * 100
