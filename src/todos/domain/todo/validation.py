"""Title rules for todo lists and todos.

Each rule is a plain predicate. The ``validate_*`` helpers run every rule
for one submission and collect all failing messages instead of stopping at
the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from todos.domain.todo.exceptions.todo_exceptions import ValidationError

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 100

LIST_TITLE_REQUIRED = "The list title is required."
LIST_TITLE_LENGTH = "List title must be between 1 and 100 characters."
LIST_TITLE_UNIQUE = "List title must be unique."
TODO_TITLE_REQUIRED = "The todo title is required."
TODO_TITLE_LENGTH = "Todo title must be between 1 and 100 characters."


@dataclass(frozen=True)
class ValidationResult:
    messages: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.messages

    def raise_for_errors(self) -> None:
        if self.messages:
            raise ValidationError(self.messages)


def normalize_title(title: str | None) -> str:
    return (title or "").strip()


def title_is_present(title: str | None) -> bool:
    return len(normalize_title(title)) >= TITLE_MIN_LENGTH


def title_is_within_bounds(title: str | None) -> bool:
    return len(normalize_title(title)) <= TITLE_MAX_LENGTH


def title_is_unique(title: str | None, existing_titles: Iterable[str]) -> bool:
    # exact, case-sensitive match
    candidate = normalize_title(title)
    return all(candidate != existing for existing in existing_titles)


def validate_todo_list_title(
    title: str | None, existing_titles: Iterable[str] = ()
) -> ValidationResult:
    """Check a list title against presence, length and uniqueness.

    ``existing_titles`` are the titles of the *other* lists in the session
    collection. On rename the caller leaves the list being renamed out, so
    a list can keep its own title.
    """
    messages: list[str] = []
    if not title_is_present(title):
        messages.append(LIST_TITLE_REQUIRED)
    if not title_is_within_bounds(title):
        messages.append(LIST_TITLE_LENGTH)
    if not title_is_unique(title, existing_titles):
        messages.append(LIST_TITLE_UNIQUE)
    return ValidationResult(tuple(messages))


def validate_todo_title(title: str | None) -> ValidationResult:
    messages: list[str] = []
    if not title_is_present(title):
        messages.append(TODO_TITLE_REQUIRED)
    if not title_is_within_bounds(title):
        messages.append(TODO_TITLE_LENGTH)
    return ValidationResult(tuple(messages))
