from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todos.domain.todo.entities import TodoListCollection
from todos.infrastructure.data.repositories.in_memory_todo_list_repository import (
    InMemoryTodoListRepository,
)
from todos.presentation.controllers.todo_controller import TodoController

SESSION_ID = "session-1"


@pytest.fixture()
def session_id() -> str:
    return SESSION_ID


@pytest.fixture()
def in_memory_repo() -> InMemoryTodoListRepository:
    return InMemoryTodoListRepository()


@pytest.fixture()
def collection() -> TodoListCollection:
    return TodoListCollection()


@pytest.fixture()
def controller(in_memory_repo: InMemoryTodoListRepository) -> TodoController:
    return TodoController(in_memory_repo)
