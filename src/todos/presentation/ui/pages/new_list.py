from __future__ import annotations

from nicegui import ui

from todos.presentation.controllers.todo_controller import TodoController
from todos.presentation.ui.pages._shared import current_session_id, follow
from todos.presentation.ui.styles import (
    STYLE_BTN_PRIMARY,
    STYLE_BTN_SECONDARY,
    STYLE_CARD,
    STYLE_INPUT,
    STYLE_PAGE_TITLE,
)


def render_new_list(controller: TodoController) -> None:
    ui.label("Create a new Todo List").classes(STYLE_PAGE_TITLE)

    with ui.card().classes(f"{STYLE_CARD} p-4 gap-3 w-full"):
        title_input = ui.input("List title", placeholder="Something to do").classes(STYLE_INPUT)

        def handle_save() -> None:
            follow(controller.create_list(current_session_id(), title_input.value or ""))

        title_input.on("keydown.enter", handle_save)
        with ui.row().classes("gap-2"):
            ui.button("Save", on_click=handle_save).classes(STYLE_BTN_PRIMARY)
            ui.button("Cancel", on_click=lambda: ui.navigate.to("/lists")).props("flat").classes(
                STYLE_BTN_SECONDARY
            )
