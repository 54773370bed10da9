from .in_memory_todo_list_repository import InMemoryTodoListRepository

__all__ = ["InMemoryTodoListRepository"]
