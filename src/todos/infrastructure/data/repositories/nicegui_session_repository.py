from __future__ import annotations

import copy
import logging
from typing import Any, Callable, MutableMapping, Optional

from nicegui import app

from todos.domain.todo.repositories.todo_list_repository import TodoListRepository

logger = logging.getLogger(__name__)

_SESSION_KEY = "todo_lists"


def _user_storage() -> MutableMapping[str, Any]:
    return app.storage.user


class NiceGuiSessionRepository(TodoListRepository):
    """Stores the payload in NiceGUI's per-browser ``app.storage.user``.

    ``app.storage.user`` is already bound to the browser session of the
    current request, so ``session_id`` only shows up in log lines.
    """

    def __init__(
        self,
        storage_factory: Callable[[], MutableMapping[str, Any]] = _user_storage,
        key: str = _SESSION_KEY,
    ) -> None:
        self._storage_factory = storage_factory
        self._key = key

    def load(self, session_id: str) -> Optional[dict[str, Any]]:
        payload = self._storage_factory().get(self._key)
        if payload is None:
            return None
        if not isinstance(payload, dict):
            logger.warning("session.payload_not_a_dict session=%s type=%s", session_id, type(payload).__name__)
            return None
        return copy.deepcopy(payload)

    def save(self, session_id: str, payload: dict[str, Any]) -> None:
        self._storage_factory()[self._key] = copy.deepcopy(payload)
        logger.debug("session.saved session=%s lists=%s", session_id, len(payload.get("todo_lists", [])))

    def clear(self, session_id: str) -> None:
        self._storage_factory().pop(self._key, None)
