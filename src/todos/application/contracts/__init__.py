from .todo_dtos import (
    CompleteAllTodosRequest,
    CreateTodoListRequest,
    CreateTodoRequest,
    DeleteTodoListRequest,
    RenameTodoListRequest,
    TodoRequest,
)
from .todo_records import TodoListCollectionRecord, TodoListRecord, TodoRecord

__all__ = [
    "CompleteAllTodosRequest",
    "CreateTodoListRequest",
    "CreateTodoRequest",
    "DeleteTodoListRequest",
    "RenameTodoListRequest",
    "TodoListCollectionRecord",
    "TodoListRecord",
    "TodoRecord",
    "TodoRequest",
]
