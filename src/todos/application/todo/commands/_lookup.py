from __future__ import annotations

from todos.application.todo.errors import TodoListNotFoundError, TodoNotFoundError
from todos.domain.todo.entities import Todo, TodoList, TodoListCollection


def require_todo_list(collection: TodoListCollection, todo_list_id: int) -> TodoList:
    todo_list = collection.find_by_id(todo_list_id)
    if todo_list is None:
        raise TodoListNotFoundError(todo_list_id)
    return todo_list


def require_todo(todo_list: TodoList, todo_id: int) -> Todo:
    todo = todo_list.find_by_id(todo_id)
    if todo is None:
        raise TodoNotFoundError(todo_list.id, todo_id)
    return todo
