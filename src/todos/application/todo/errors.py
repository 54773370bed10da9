from __future__ import annotations


class NotFoundError(LookupError):
    """An id taken from a request did not resolve."""


class TodoListNotFoundError(NotFoundError):
    def __init__(self, todo_list_id: int) -> None:
        self.todo_list_id = todo_list_id
        super().__init__(f"Todo list {todo_list_id} not found")


class TodoNotFoundError(NotFoundError):
    def __init__(self, todo_list_id: int, todo_id: int) -> None:
        self.todo_list_id = todo_list_id
        self.todo_id = todo_id
        super().__init__(f"Todo {todo_id} not found in list {todo_list_id}")
