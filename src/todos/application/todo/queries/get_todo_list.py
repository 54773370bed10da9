from __future__ import annotations

from dataclasses import dataclass

from todos.application.todo.commands._lookup import require_todo_list
from todos.domain.todo.entities import Todo, TodoList, TodoListCollection
from todos.domain.todo.sorting import sort_todos


@dataclass(frozen=True)
class TodoListView:
    todo_list: TodoList
    todos: list[Todo]


class GetTodoListQuery:
    def execute(self, collection: TodoListCollection, todo_list_id: int) -> TodoListView:
        todo_list = require_todo_list(collection, todo_list_id)
        return TodoListView(todo_list=todo_list, todos=sort_todos(todo_list))
