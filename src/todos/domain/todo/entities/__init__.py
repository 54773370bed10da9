from .todo import Todo
from .todo_list import TodoList
from .todo_list_collection import TodoListCollection

__all__ = ["Todo", "TodoList", "TodoListCollection"]
