"""Run the Todos NiceGUI app."""

from __future__ import annotations

import logging
import time

from fastapi import Request
from nicegui import app, ui

from todos.composition_root import create_app_container
from todos.env import get_settings
from todos.logging_setup import setup_logging
from todos.presentation.ui.pages import (
    render_edit_list,
    render_list_detail,
    render_lists,
    render_new_list,
)
from todos.presentation.ui.pages._shared import show_pending_flashes
from todos.presentation.ui.styles import APP_HEAD_HTML, STYLE_CONTAINER

logger = logging.getLogger("todos.http")

_CONTAINER = create_app_container()
_CONTROLLER = _CONTAINER.controller


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    client = request.client.host if request.client else "-"
    logger.info(
        '%s "%s %s" %s %.1fms',
        client,
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def layout_wrapper(content_func) -> None:
    ui.add_head_html(APP_HEAD_HTML)
    with ui.header().classes("bg-white border-b border-slate-200 text-slate-900"):
        ui.link("Todos", "/lists").classes("text-lg font-bold text-slate-900 no-underline")
    with ui.column().classes(STYLE_CONTAINER):
        content_func()
    show_pending_flashes()


@ui.page("/")
def index() -> None:
    ui.navigate.to("/lists")


@ui.page("/lists")
def lists_page() -> None:
    layout_wrapper(lambda: render_lists(_CONTROLLER))


@ui.page("/lists/new")
def new_list_page() -> None:
    layout_wrapper(lambda: render_new_list(_CONTROLLER))


@ui.page("/lists/{todo_list_id}")
def list_page(todo_list_id: str) -> None:
    layout_wrapper(lambda: render_list_detail(_CONTROLLER, todo_list_id))


@ui.page("/lists/{todo_list_id}/edit")
def edit_list_page(todo_list_id: str) -> None:
    layout_wrapper(lambda: render_edit_list(_CONTROLLER, todo_list_id))


def run() -> None:
    settings = get_settings()
    setup_logging(settings)
    logger.info("Todos is listening on port %s of %s!", settings.port, settings.host)
    ui.run(
        title="Todos",
        host=settings.host,
        port=settings.port,
        storage_secret=settings.storage_secret,
        session_middleware_kwargs={"max_age": settings.session_max_age, "https_only": False},
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
