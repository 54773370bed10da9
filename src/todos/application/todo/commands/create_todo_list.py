from __future__ import annotations

import logging

from todos.application.contracts.todo_dtos import CreateTodoListRequest
from todos.domain.todo.entities import TodoList, TodoListCollection

logger = logging.getLogger(__name__)


class CreateTodoListCommand:
    def execute(self, collection: TodoListCollection, request: CreateTodoListRequest) -> TodoList:
        todo_list = collection.add_list(request.title)
        logger.info("todo_list.created id=%s", todo_list.id)
        return todo_list
