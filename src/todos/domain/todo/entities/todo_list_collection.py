from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from todos.domain.todo.entities.todo_list import TodoList


@dataclass(eq=False)
class TodoListCollection:
    """All todo lists of one client session, in creation order."""

    lists: list[TodoList] = field(default_factory=list)
    next_list_id: int = 1

    def __post_init__(self) -> None:
        highest = max((todo_list.id for todo_list in self.lists), default=0)
        self.next_list_id = max(self.next_list_id, highest + 1)

    def add_list(self, title: str) -> TodoList:
        todo_list = TodoList.create(title, self.lists, self.next_list_id)
        self.lists.append(todo_list)
        self.next_list_id += 1
        return todo_list

    def find_by_id(self, list_id: int) -> Optional[TodoList]:
        return next((todo_list for todo_list in self.lists if todo_list.id == list_id), None)

    def find_index_of(self, list_id: int) -> Optional[int]:
        for index, todo_list in enumerate(self.lists):
            if todo_list.id == list_id:
                return index
        return None

    def remove_by_id(self, list_id: int) -> Optional[TodoList]:
        index = self.find_index_of(list_id)
        if index is None:
            return None
        return self.lists.pop(index)

    def titles(self) -> list[str]:
        return [todo_list.title for todo_list in self.lists]

    def __len__(self) -> int:
        return len(self.lists)

    def __iter__(self) -> Iterator[TodoList]:
        return iter(self.lists)
