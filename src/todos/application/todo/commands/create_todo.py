from __future__ import annotations

import logging

from todos.application.contracts.todo_dtos import CreateTodoRequest
from todos.application.todo.commands._lookup import require_todo_list
from todos.domain.todo.entities import Todo, TodoListCollection

logger = logging.getLogger(__name__)


class CreateTodoCommand:
    def execute(self, collection: TodoListCollection, request: CreateTodoRequest) -> Todo:
        todo_list = require_todo_list(collection, request.todo_list_id)
        todo = todo_list.new_todo(request.title)
        logger.info("todo.created list=%s id=%s", todo_list.id, todo.id)
        return todo
