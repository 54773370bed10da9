from .complete_all_todos import CompleteAllTodosCommand
from .create_todo import CreateTodoCommand
from .create_todo_list import CreateTodoListCommand
from .delete_todo import DeleteTodoCommand
from .delete_todo_list import DeleteTodoListCommand
from .rename_todo_list import RenameTodoListCommand
from .toggle_todo import ToggleTodoCommand

__all__ = [
    "CompleteAllTodosCommand",
    "CreateTodoCommand",
    "CreateTodoListCommand",
    "DeleteTodoCommand",
    "DeleteTodoListCommand",
    "RenameTodoListCommand",
    "ToggleTodoCommand",
]
