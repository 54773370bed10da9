"""Route-level handlers.

Every method loads the session's lists, runs one command or query and
saves the lists back. The result says which status a web layer should
use, where to redirect and which flash messages to show. Ids arrive as
raw path segments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from todos.application.contracts.todo_dtos import (
    CompleteAllTodosRequest,
    CreateTodoListRequest,
    CreateTodoRequest,
    DeleteTodoListRequest,
    RenameTodoListRequest,
    TodoRequest,
)
from todos.application.todo.commands import (
    CompleteAllTodosCommand,
    CreateTodoCommand,
    CreateTodoListCommand,
    DeleteTodoCommand,
    DeleteTodoListCommand,
    RenameTodoListCommand,
    ToggleTodoCommand,
)
from todos.application.todo.errors import NotFoundError
from todos.application.todo.queries import GetTodoListQuery, ListTodoListsQuery
from todos.application.todo.store import session_collection
from todos.domain.todo.entities import TodoListCollection
from todos.domain.todo.exceptions.todo_exceptions import ValidationError
from todos.domain.todo.repositories.todo_list_repository import TodoListRepository
from todos.presentation.ui.viewmodels.todo_viewmodel import (
    todo_list_to_viewmodel,
    todo_lists_to_viewmodels,
    todos_to_viewmodels,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found."


@dataclass(frozen=True)
class Flash:
    category: str
    message: str


@dataclass
class ControllerResponse:
    status: int
    redirect: Optional[str] = None
    flashes: list[Flash] = field(default_factory=list)
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status < 400


def _parse_id(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def _not_found(error: Optional[NotFoundError] = None) -> ControllerResponse:
    if error is not None:
        logger.info("request.not_found %s", error)
    return ControllerResponse(status=404, flashes=[Flash("error", NOT_FOUND_MESSAGE)])


def _invalid(error: ValidationError, **payload: Any) -> ControllerResponse:
    logger.info("request.invalid messages=%s", list(error.messages))
    return ControllerResponse(
        status=422,
        flashes=[Flash("error", message) for message in error.messages],
        payload=payload,
    )


def _list_path(todo_list_id: int) -> str:
    return f"/lists/{todo_list_id}"


class TodoController:
    def __init__(self, repository: TodoListRepository) -> None:
        self._repository = repository
        self._create_list = CreateTodoListCommand()
        self._rename_list = RenameTodoListCommand()
        self._delete_list = DeleteTodoListCommand()
        self._create_todo = CreateTodoCommand()
        self._toggle_todo = ToggleTodoCommand()
        self._delete_todo = DeleteTodoCommand()
        self._complete_all = CompleteAllTodosCommand()
        self._list_query = ListTodoListsQuery()
        self._get_query = GetTodoListQuery()

    def _run(
        self, session_id: str, handler: Callable[[TodoListCollection], ControllerResponse]
    ) -> ControllerResponse:
        try:
            with session_collection(self._repository, session_id) as collection:
                return handler(collection)
        except NotFoundError as exc:
            return _not_found(exc)

    def overview(self, session_id: str) -> ControllerResponse:
        def handle(collection: TodoListCollection) -> ControllerResponse:
            todo_lists = self._list_query.execute(collection)
            return ControllerResponse(
                status=200, payload={"todo_lists": todo_lists_to_viewmodels(todo_lists)}
            )

        return self._run(session_id, handle)

    def create_list(self, session_id: str, title: str) -> ControllerResponse:
        def handle(collection: TodoListCollection) -> ControllerResponse:
            self._create_list.execute(collection, CreateTodoListRequest(title=title))
            return ControllerResponse(
                status=302,
                redirect="/lists",
                flashes=[Flash("success", "The todo list has been created.")],
            )

        try:
            return self._run(session_id, handle)
        except ValidationError as exc:
            return _invalid(exc, todo_list_title=title)

    def view_list(self, session_id: str, raw_list_id: Any) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        if todo_list_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            view = self._get_query.execute(collection, todo_list_id)
            return ControllerResponse(
                status=200,
                payload={
                    "todo_list": todo_list_to_viewmodel(view.todo_list),
                    "todos": todos_to_viewmodels(view.todos),
                },
            )

        return self._run(session_id, handle)

    def edit_list(self, session_id: str, raw_list_id: Any) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        if todo_list_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            view = self._get_query.execute(collection, todo_list_id)
            return ControllerResponse(
                status=200, payload={"todo_list": todo_list_to_viewmodel(view.todo_list)}
            )

        return self._run(session_id, handle)

    def rename_list(self, session_id: str, raw_list_id: Any, title: str) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        if todo_list_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            self._rename_list.execute(
                collection, RenameTodoListRequest(todo_list_id=todo_list_id, title=title)
            )
            return ControllerResponse(
                status=302,
                redirect=_list_path(todo_list_id),
                flashes=[Flash("success", "Todo list updated.")],
            )

        try:
            return self._run(session_id, handle)
        except ValidationError as exc:
            return _invalid(exc, todo_list_title=title)

    def delete_list(self, session_id: str, raw_list_id: Any) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        if todo_list_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            self._delete_list.execute(collection, DeleteTodoListRequest(todo_list_id=todo_list_id))
            return ControllerResponse(
                status=302, redirect="/lists", flashes=[Flash("success", "Todo list deleted.")]
            )

        return self._run(session_id, handle)

    def create_todo(self, session_id: str, raw_list_id: Any, title: str) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        if todo_list_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            self._create_todo.execute(
                collection, CreateTodoRequest(todo_list_id=todo_list_id, title=title)
            )
            return ControllerResponse(
                status=302,
                redirect=_list_path(todo_list_id),
                flashes=[Flash("success", "The todo has been created.")],
            )

        try:
            return self._run(session_id, handle)
        except ValidationError as exc:
            return _invalid(exc, todo_title=title)

    def toggle_todo(self, session_id: str, raw_list_id: Any, raw_todo_id: Any) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        todo_id = _parse_id(raw_todo_id)
        if todo_list_id is None or todo_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            todo = self._toggle_todo.execute(
                collection, TodoRequest(todo_list_id=todo_list_id, todo_id=todo_id)
            )
            if todo.is_done():
                message = f"{todo.title} marked as done!"
            else:
                message = f"{todo.title} marked as NOT done!"
            return ControllerResponse(
                status=302, redirect=_list_path(todo_list_id), flashes=[Flash("success", message)]
            )

        return self._run(session_id, handle)

    def delete_todo(self, session_id: str, raw_list_id: Any, raw_todo_id: Any) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        todo_id = _parse_id(raw_todo_id)
        if todo_list_id is None or todo_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            self._delete_todo.execute(
                collection, TodoRequest(todo_list_id=todo_list_id, todo_id=todo_id)
            )
            return ControllerResponse(
                status=302,
                redirect=_list_path(todo_list_id),
                flashes=[Flash("success", "The todo has been deleted.")],
            )

        return self._run(session_id, handle)

    def complete_all(self, session_id: str, raw_list_id: Any) -> ControllerResponse:
        todo_list_id = _parse_id(raw_list_id)
        if todo_list_id is None:
            return _not_found()

        def handle(collection: TodoListCollection) -> ControllerResponse:
            self._complete_all.execute(
                collection, CompleteAllTodosRequest(todo_list_id=todo_list_id)
            )
            return ControllerResponse(
                status=302,
                redirect=_list_path(todo_list_id),
                flashes=[Flash("success", "All todos have been marked as done.")],
            )

        return self._run(session_id, handle)
