from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateTodoListRequest:
    title: str


@dataclass(frozen=True)
class RenameTodoListRequest:
    todo_list_id: int
    title: str


@dataclass(frozen=True)
class DeleteTodoListRequest:
    todo_list_id: int


@dataclass(frozen=True)
class CreateTodoRequest:
    todo_list_id: int
    title: str


@dataclass(frozen=True)
class TodoRequest:
    todo_list_id: int
    todo_id: int


@dataclass(frozen=True)
class CompleteAllTodosRequest:
    todo_list_id: int
