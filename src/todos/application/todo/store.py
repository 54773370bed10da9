from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from todos.application.todo.serialization import dump_collection, make_collection
from todos.domain.todo.entities import TodoListCollection
from todos.domain.todo.exceptions.todo_exceptions import MalformedRecordError
from todos.domain.todo.repositories.todo_list_repository import TodoListRepository

logger = logging.getLogger(__name__)


def _load(repository: TodoListRepository, session_id: str) -> tuple[TodoListCollection, bool]:
    """Return the session's collection and whether the stored payload was unreadable."""
    payload = repository.load(session_id)
    try:
        return make_collection(payload), False
    except MalformedRecordError:
        logger.warning("session.payload_malformed session=%s, serving empty", session_id, exc_info=True)
        return TodoListCollection(), True


def load_todo_lists(repository: TodoListRepository, session_id: str) -> TodoListCollection:
    collection, _ = _load(repository, session_id)
    return collection


def save_todo_lists(
    repository: TodoListRepository, session_id: str, collection: TodoListCollection
) -> None:
    repository.save(session_id, dump_collection(collection))


@contextmanager
def session_collection(
    repository: TodoListRepository, session_id: str
) -> Iterator[TodoListCollection]:
    """Load the session's lists, hand them out, save them back.

    Nothing is written when the block raises, so a failed request leaves
    the stored session as it was. An unreadable payload is never
    overwritten either; the request works on an empty collection that is
    discarded afterwards.
    """
    collection, recovered = _load(repository, session_id)
    yield collection
    if recovered:
        logger.warning("session.save_skipped session=%s payload left untouched", session_id)
        return
    save_todo_lists(repository, session_id, collection)
