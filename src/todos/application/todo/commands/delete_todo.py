from __future__ import annotations

import logging

from todos.application.contracts.todo_dtos import TodoRequest
from todos.application.todo.commands._lookup import require_todo, require_todo_list
from todos.domain.todo.entities import Todo, TodoListCollection

logger = logging.getLogger(__name__)


class DeleteTodoCommand:
    def execute(self, collection: TodoListCollection, request: TodoRequest) -> Todo:
        todo_list = require_todo_list(collection, request.todo_list_id)
        todo = require_todo(todo_list, request.todo_id)
        index = todo_list.find_index_of(todo)
        removed = todo_list.remove_at(index)
        logger.info("todo.deleted list=%s id=%s", todo_list.id, removed.id)
        return removed
