from .todo_list_repository import TodoListRepository

__all__ = ["TodoListRepository"]
