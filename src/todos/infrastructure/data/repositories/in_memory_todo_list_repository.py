from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from todos.domain.todo.repositories.todo_list_repository import TodoListRepository


class InMemoryTodoListRepository(TodoListRepository):
    """Session payloads kept in a dict keyed by session id.

    Payloads are deep-copied in and out so callers never share state with
    the store, the same way a serializing backend behaves.
    """

    def __init__(self, initial_sessions: Optional[Dict[str, dict[str, Any]]] = None) -> None:
        self._sessions: Dict[str, dict[str, Any]] = {}
        if initial_sessions:
            for session_id, payload in initial_sessions.items():
                self.save(session_id, payload)

    def load(self, session_id: str) -> Optional[dict[str, Any]]:
        payload = self._sessions.get(session_id)
        return copy.deepcopy(payload) if payload is not None else None

    def save(self, session_id: str, payload: dict[str, Any]) -> None:
        self._sessions[session_id] = copy.deepcopy(payload)

    def clear(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
