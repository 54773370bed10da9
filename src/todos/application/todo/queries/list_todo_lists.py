from __future__ import annotations

from todos.domain.todo.entities import TodoList, TodoListCollection
from todos.domain.todo.sorting import sort_todo_lists


class ListTodoListsQuery:
    def execute(self, collection: TodoListCollection) -> list[TodoList]:
        return sort_todo_lists(collection.lists)
