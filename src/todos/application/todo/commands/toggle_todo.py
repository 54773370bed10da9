from __future__ import annotations

from todos.application.contracts.todo_dtos import TodoRequest
from todos.application.todo.commands._lookup import require_todo, require_todo_list
from todos.domain.todo.entities import Todo, TodoListCollection


class ToggleTodoCommand:
    """Flip a todo between done and not done."""

    def execute(self, collection: TodoListCollection, request: TodoRequest) -> Todo:
        todo_list = require_todo_list(collection, request.todo_list_id)
        todo = require_todo(todo_list, request.todo_id)
        if todo.is_done():
            todo.mark_undone()
        else:
            todo.mark_done()
        return todo
