from .get_todo_list import GetTodoListQuery, TodoListView
from .list_todo_lists import ListTodoListsQuery

__all__ = ["GetTodoListQuery", "ListTodoListsQuery", "TodoListView"]
