from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class TodoListRepository(Protocol):
    """Per-session store for the serialized todo list collection.

    Implementations hold plain JSON-compatible payloads; turning them into
    entities is the caller's job.
    """

    def load(self, session_id: str) -> Optional[dict[str, Any]]:
        ...

    def save(self, session_id: str, payload: dict[str, Any]) -> None:
        ...

    def clear(self, session_id: str) -> None:
        ...
