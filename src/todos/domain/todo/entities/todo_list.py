from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from todos.domain.todo.entities.todo import Todo
from todos.domain.todo.validation import normalize_title, validate_todo_list_title


@dataclass(eq=False)
class TodoList:
    """A titled list of todos kept in insertion (storage) order.

    ``next_todo_id`` only ever grows, so ids of removed todos are never
    handed out again.
    """

    id: int
    title: str
    todos: list[Todo] = field(default_factory=list)
    next_todo_id: int = 1

    def __post_init__(self) -> None:
        validate_todo_list_title(self.title).raise_for_errors()
        self.title = normalize_title(self.title)
        highest = max((todo.id for todo in self.todos), default=0)
        self.next_todo_id = max(self.next_todo_id, highest + 1)

    @classmethod
    def create(cls, title: str, siblings: Iterable["TodoList"], list_id: int) -> "TodoList":
        existing = [sibling.title for sibling in siblings]
        validate_todo_list_title(title, existing).raise_for_errors()
        return cls(id=list_id, title=title)

    def set_title(self, new_title: str, siblings: Iterable["TodoList"]) -> None:
        existing = [sibling.title for sibling in siblings if sibling is not self]
        validate_todo_list_title(new_title, existing).raise_for_errors()
        self.title = normalize_title(new_title)

    def add(self, todo: Todo) -> None:
        if not isinstance(todo, Todo):
            raise TypeError("can only add Todo objects")
        if self.find_by_id(todo.id) is not None:
            raise ValueError(f"todo id {todo.id} already exists in list {self.id}")
        self.todos.append(todo)
        self.next_todo_id = max(self.next_todo_id, todo.id + 1)

    def new_todo(self, title: str) -> Todo:
        todo = Todo.create(title, self.next_todo_id)
        self.add(todo)
        return todo

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        return next((todo for todo in self.todos if todo.id == todo_id), None)

    def find_index_of(self, todo: Todo) -> Optional[int]:
        for index, candidate in enumerate(self.todos):
            if candidate is todo:
                return index
        return None

    def remove_at(self, index: int) -> Todo:
        if not 0 <= index < len(self.todos):
            raise IndexError(f"index {index} out of range for list of size {len(self.todos)}")
        return self.todos.pop(index)

    def mark_all_done(self) -> None:
        for todo in self.todos:
            todo.mark_done()

    def size(self) -> int:
        return len(self.todos)

    def first(self) -> Optional[Todo]:
        return self.todos[0] if self.todos else None

    def last(self) -> Optional[Todo]:
        return self.todos[-1] if self.todos else None

    def count_done(self) -> int:
        return sum(1 for todo in self.todos if todo.is_done())

    def has_open_todos(self) -> bool:
        return any(not todo.is_done() for todo in self.todos)

    def is_done(self) -> bool:
        return self.size() > 0 and not self.has_open_todos()

    def __len__(self) -> int:
        return len(self.todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.todos)
