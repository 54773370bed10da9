from __future__ import annotations

from typing import Iterable


class ValidationError(ValueError):
    """Raised when a title fails one or more rules.

    ``messages`` holds every failing rule's message in rule order.
    """

    def __init__(self, messages: Iterable[str] | str) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages: tuple[str, ...] = tuple(messages)
        super().__init__(" ".join(self.messages))


class MalformedRecordError(ValueError):
    """A stored record does not match the expected shape."""
