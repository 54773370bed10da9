from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from todos.domain.todo.repositories.todo_list_repository import TodoListRepository
from todos.infrastructure.data.repositories.in_memory_todo_list_repository import (
    InMemoryTodoListRepository,
)
from todos.presentation.controllers.todo_controller import TodoController


@dataclass(frozen=True)
class AppContainer:
    repository: TodoListRepository
    controller: TodoController


def create_app_container(repository: Optional[TodoListRepository] = None) -> AppContainer:
    """Wire the controller to a session repository.

    Without an explicit repository the NiceGUI browser storage is used; it
    is imported lazily so tests can build a container without NiceGUI.
    """
    if repository is None:
        from todos.infrastructure.data.repositories.nicegui_session_repository import (
            NiceGuiSessionRepository,
        )

        repository = NiceGuiSessionRepository()
    return AppContainer(repository=repository, controller=TodoController(repository))


def create_in_memory_container() -> AppContainer:
    return create_app_container(InMemoryTodoListRepository())
