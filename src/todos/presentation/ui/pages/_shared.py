from __future__ import annotations

from typing import Iterable

from nicegui import app, ui

from todos.presentation.controllers.todo_controller import ControllerResponse, Flash
from todos.presentation.ui.styles import FLASH_COLORS, STYLE_PAGE_TITLE, STYLE_TEXT_MUTED

_FLASH_KEY = "flash"


def current_session_id() -> str:
    return str(app.storage.browser.get("id", "anonymous"))


def notify(flashes: Iterable[Flash]) -> None:
    for flash in flashes:
        ui.notify(flash.message, color=FLASH_COLORS.get(flash.category, "info"))


def push_flashes(flashes: Iterable[Flash]) -> None:
    pending = list(app.storage.user.get(_FLASH_KEY, []))
    pending.extend({"category": flash.category, "message": flash.message} for flash in flashes)
    app.storage.user[_FLASH_KEY] = pending


def show_pending_flashes() -> None:
    pending = app.storage.user.pop(_FLASH_KEY, None) or []
    notify(Flash(item["category"], item["message"]) for item in pending)


def follow(response: ControllerResponse) -> bool:
    """Apply a controller response; returns True when the page navigated away."""
    if response.redirect:
        push_flashes(response.flashes)
        ui.navigate.to(response.redirect)
        return True
    notify(response.flashes)
    return False


def render_not_found() -> None:
    ui.label("Not found.").classes(STYLE_PAGE_TITLE)
    ui.link("Back to all lists", "/lists").classes(STYLE_TEXT_MUTED)
