from __future__ import annotations

from todos.application.todo.store import session_collection
from todos.infrastructure.data.repositories.nicegui_session_repository import (
    NiceGuiSessionRepository,
)


def _repository(storage: dict) -> NiceGuiSessionRepository:
    return NiceGuiSessionRepository(storage_factory=lambda: storage)


def test_payload_lives_under_the_session_key(session_id) -> None:
    storage: dict = {}
    repository = _repository(storage)

    with session_collection(repository, session_id) as collection:
        collection.add_list("Work")

    assert storage["todo_lists"]["todo_lists"][0]["title"] == "Work"
    assert repository.load(session_id)["next_list_id"] == 2


def test_non_dict_payload_is_ignored(session_id) -> None:
    repository = _repository({"todo_lists": ["legacy"]})

    assert repository.load(session_id) is None


def test_clear_removes_only_the_todo_payload(session_id) -> None:
    storage = {"todo_lists": {"todo_lists": []}, "flash": []}
    repository = _repository(storage)

    repository.clear(session_id)

    assert storage == {"flash": []}
