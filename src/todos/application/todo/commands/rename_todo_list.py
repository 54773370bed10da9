from __future__ import annotations

import logging

from todos.application.contracts.todo_dtos import RenameTodoListRequest
from todos.application.todo.commands._lookup import require_todo_list
from todos.domain.todo.entities import TodoList, TodoListCollection

logger = logging.getLogger(__name__)


class RenameTodoListCommand:
    def execute(self, collection: TodoListCollection, request: RenameTodoListRequest) -> TodoList:
        todo_list = require_todo_list(collection, request.todo_list_id)
        todo_list.set_title(request.title, collection.lists)
        logger.info("todo_list.renamed id=%s", todo_list.id)
        return todo_list
