from __future__ import annotations

from dataclasses import dataclass

from todos.domain.todo.validation import normalize_title, validate_todo_title


@dataclass(eq=False)
class Todo:
    id: int
    title: str
    done: bool = False

    def __post_init__(self) -> None:
        validate_todo_title(self.title).raise_for_errors()
        self.title = normalize_title(self.title)

    @classmethod
    def create(cls, title: str, todo_id: int) -> "Todo":
        return cls(id=todo_id, title=title)

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    def is_done(self) -> bool:
        return self.done

