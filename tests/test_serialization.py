from __future__ import annotations

import pytest

from todos.application.todo.serialization import (
    dump_collection,
    dump_todo_list,
    make_collection,
    make_todo,
    make_todo_list,
)
from todos.domain.todo.exceptions import MalformedRecordError

WORK_RECORD = {
    "id": 4,
    "title": "Work",
    "todos": [
        {"id": 7, "title": "Buy milk", "done": False},
        {"id": 2, "title": "apples", "done": True},
    ],
}


def test_make_todo_list_preserves_ids_titles_and_order() -> None:
    todo_list = make_todo_list(WORK_RECORD)

    assert todo_list.id == 4
    assert todo_list.title == "Work"
    assert [(todo.id, todo.title, todo.done) for todo in todo_list] == [
        (7, "Buy milk", False),
        (2, "apples", True),
    ]
    assert todo_list.next_todo_id == 8


def test_make_todo_list_keeps_stored_id_counter() -> None:
    todo_list = make_todo_list({**WORK_RECORD, "next_todo_id": 20})

    assert todo_list.new_todo("later").id == 20


def test_dump_todo_list_feeds_back_into_make_todo_list() -> None:
    dumped = dump_todo_list(make_todo_list(WORK_RECORD))

    assert dumped == {**WORK_RECORD, "next_todo_id": 8}


@pytest.mark.parametrize(
    "record",
    [
        {"title": "No id", "todos": []},
        {"id": "1", "title": "String id", "todos": []},
        {"id": 1, "title": "", "todos": []},
        {"id": 1, "title": "Bad todo", "todos": [{"id": 1, "title": "x"}]},
        {"id": 1, "title": "Bad done", "todos": [{"id": 1, "title": "x", "done": "yes"}]},
        {"id": 1, "title": "Dupes", "todos": [
            {"id": 1, "title": "x", "done": False},
            {"id": 1, "title": "y", "done": False},
        ]},
        {"id": 1, "title": "Long todo", "todos": [{"id": 1, "title": "z" * 101, "done": False}]},
        "not a mapping",
    ],
)
def test_make_todo_list_rejects_malformed_records(record) -> None:
    with pytest.raises(MalformedRecordError):
        make_todo_list(record)


def test_make_todo_rejects_blank_title() -> None:
    with pytest.raises(MalformedRecordError):
        make_todo({"id": 1, "title": "  ", "done": False})


def test_make_collection_from_empty_payload() -> None:
    assert len(make_collection(None)) == 0
    assert make_collection({}).next_list_id == 1


def test_make_collection_restores_lists_and_counter() -> None:
    payload = {
        "next_list_id": 9,
        "todo_lists": [WORK_RECORD, {"id": 5, "title": "Home", "todos": []}],
    }

    collection = make_collection(payload)

    assert [todo_list.title for todo_list in collection] == ["Work", "Home"]
    assert collection.add_list("New").id == 9


def test_make_collection_without_counter_continues_after_highest_id() -> None:
    collection = make_collection({"todo_lists": [WORK_RECORD]})

    assert collection.next_list_id == 5


@pytest.mark.parametrize(
    "lists",
    [
        [WORK_RECORD, {"id": 4, "title": "Other", "todos": []}],
        [WORK_RECORD, {"id": 5, "title": "Work", "todos": []}],
    ],
)
def test_make_collection_rejects_duplicates(lists) -> None:
    with pytest.raises(MalformedRecordError):
        make_collection({"todo_lists": lists})


def test_dump_collection_is_plain_data() -> None:
    collection = make_collection({"todo_lists": [WORK_RECORD]})

    dumped = dump_collection(collection)

    assert dumped["next_list_id"] == 5
    assert dumped["todo_lists"][0]["todos"][1] == {"id": 2, "title": "apples", "done": True}
