from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from todos.domain.todo.entities import Todo, TodoList


def todo_to_viewmodel(todo: Todo) -> dict[str, Any]:
    return {"id": todo.id, "title": todo.title, "done": todo.is_done()}


def todos_to_viewmodels(todos: Iterable[Todo]) -> list[dict[str, Any]]:
    return [todo_to_viewmodel(todo) for todo in todos]


def todo_list_to_viewmodel(todo_list: TodoList) -> dict[str, Any]:
    return {
        "id": todo_list.id,
        "title": todo_list.title,
        "size": todo_list.size(),
        "done_count": todo_list.count_done(),
        "is_done": todo_list.is_done(),
    }


def todo_lists_to_viewmodels(todo_lists: Iterable[TodoList]) -> list[dict[str, Any]]:
    return [todo_list_to_viewmodel(todo_list) for todo_list in todo_lists]
