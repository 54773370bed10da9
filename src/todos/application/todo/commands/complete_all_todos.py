from __future__ import annotations

from todos.application.contracts.todo_dtos import CompleteAllTodosRequest
from todos.application.todo.commands._lookup import require_todo_list
from todos.domain.todo.entities import TodoList, TodoListCollection


class CompleteAllTodosCommand:
    def execute(self, collection: TodoListCollection, request: CompleteAllTodosRequest) -> TodoList:
        todo_list = require_todo_list(collection, request.todo_list_id)
        todo_list.mark_all_done()
        return todo_list
