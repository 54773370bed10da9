"""Display ordering for lists and todos.

Both functions return new lists and leave storage order untouched.
``sorted`` is stable, so titles that compare equal keep their storage order.
"""

from __future__ import annotations

from typing import Iterable

from todos.domain.todo.entities.todo import Todo
from todos.domain.todo.entities.todo_list import TodoList


def _title_key(title: str) -> str:
    return title.lower()


def sort_todo_lists(todo_lists: Iterable[TodoList]) -> list[TodoList]:
    # lists with open todos first; done and empty lists last
    return sorted(
        todo_lists,
        key=lambda todo_list: (not todo_list.has_open_todos(), _title_key(todo_list.title)),
    )


def sort_todos(todo_list: TodoList) -> list[Todo]:
    return sorted(todo_list.todos, key=lambda todo: (todo.is_done(), _title_key(todo.title)))
