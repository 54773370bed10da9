from __future__ import annotations

import logging

from todos.application.contracts.todo_dtos import DeleteTodoListRequest
from todos.application.todo.errors import TodoListNotFoundError
from todos.domain.todo.entities import TodoList, TodoListCollection

logger = logging.getLogger(__name__)


class DeleteTodoListCommand:
    def execute(self, collection: TodoListCollection, request: DeleteTodoListRequest) -> TodoList:
        removed = collection.remove_by_id(request.todo_list_id)
        if removed is None:
            raise TodoListNotFoundError(request.todo_list_id)
        logger.info("todo_list.deleted id=%s todos=%s", removed.id, removed.size())
        return removed
