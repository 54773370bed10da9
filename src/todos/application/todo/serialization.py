"""Rebuild entities from session records and turn them back into records."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as RecordValidationError

from todos.application.contracts.todo_records import (
    TodoListCollectionRecord,
    TodoListRecord,
    TodoRecord,
)
from todos.domain.todo.entities import Todo, TodoList, TodoListCollection
from todos.domain.todo.exceptions.todo_exceptions import MalformedRecordError
from todos.domain.todo.validation import validate_todo_list_title, validate_todo_title


def _parse(model: type, record: Any, label: str):
    if isinstance(record, model):
        return record
    try:
        return model.model_validate(record)
    except RecordValidationError as exc:
        raise MalformedRecordError(f"invalid {label} record: {exc}") from exc


def _make_todo(record: TodoRecord) -> Todo:
    result = validate_todo_title(record.title)
    if not result.ok:
        raise MalformedRecordError(f"todo {record.id}: {' '.join(result.messages)}")
    return Todo(id=record.id, title=record.title, done=record.done)


def make_todo(record: Mapping[str, Any] | TodoRecord) -> Todo:
    return _make_todo(_parse(TodoRecord, record, "todo"))


def _make_todo_list(record: TodoListRecord) -> TodoList:
    result = validate_todo_list_title(record.title)
    if not result.ok:
        raise MalformedRecordError(f"todo list {record.id}: {' '.join(result.messages)}")
    todo_list = TodoList(id=record.id, title=record.title)
    for todo_record in record.todos:
        todo = _make_todo(todo_record)
        try:
            todo_list.add(todo)
        except ValueError as exc:
            raise MalformedRecordError(str(exc)) from exc
    if record.next_todo_id is not None:
        todo_list.next_todo_id = max(todo_list.next_todo_id, record.next_todo_id)
    return todo_list


def make_todo_list(record: Mapping[str, Any] | TodoListRecord) -> TodoList:
    """Rebuild a ``TodoList`` with its todos in stored order.

    Raises ``MalformedRecordError`` when the record does not match
    ``{"id": int, "title": str, "todos": [{"id", "title", "done"}, ...]}``.
    """
    return _make_todo_list(_parse(TodoListRecord, record, "todo list"))


def make_collection(payload: Mapping[str, Any] | None) -> TodoListCollection:
    if not payload:
        return TodoListCollection()
    record = _parse(TodoListCollectionRecord, payload, "session")

    collection = TodoListCollection()
    seen_titles: set[str] = set()
    for list_record in record.todo_lists:
        todo_list = _make_todo_list(list_record)
        if collection.find_by_id(todo_list.id) is not None:
            raise MalformedRecordError(f"duplicate todo list id {todo_list.id}")
        if todo_list.title in seen_titles:
            raise MalformedRecordError(f"duplicate todo list title {todo_list.title!r}")
        seen_titles.add(todo_list.title)
        collection.lists.append(todo_list)

    highest = max((todo_list.id for todo_list in collection.lists), default=0)
    collection.next_list_id = max(highest + 1, record.next_list_id or 1)
    return collection


def dump_todo(todo: Todo) -> dict[str, Any]:
    return TodoRecord(id=todo.id, title=todo.title, done=todo.done).model_dump()


def dump_todo_list(todo_list: TodoList) -> dict[str, Any]:
    return {
        "id": todo_list.id,
        "title": todo_list.title,
        "todos": [dump_todo(todo) for todo in todo_list.todos],
        "next_todo_id": todo_list.next_todo_id,
    }


def dump_collection(collection: TodoListCollection) -> dict[str, Any]:
    return {
        "next_list_id": collection.next_list_id,
        "todo_lists": [dump_todo_list(todo_list) for todo_list in collection.lists],
    }
