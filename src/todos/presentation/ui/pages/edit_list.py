from __future__ import annotations

from nicegui import ui

from todos.presentation.controllers.todo_controller import TodoController
from todos.presentation.ui.pages._shared import current_session_id, follow, render_not_found
from todos.presentation.ui.styles import (
    STYLE_BTN_DANGER,
    STYLE_BTN_PRIMARY,
    STYLE_BTN_SECONDARY,
    STYLE_CARD,
    STYLE_INPUT,
    STYLE_PAGE_TITLE,
)


def render_edit_list(controller: TodoController, todo_list_id: str) -> None:
    session_id = current_session_id()
    response = controller.edit_list(session_id, todo_list_id)
    if response.status == 404:
        render_not_found()
        return

    todo_list = response.payload["todo_list"]
    ui.label(f"Editing '{todo_list['title']}'").classes(STYLE_PAGE_TITLE)

    with ui.card().classes(f"{STYLE_CARD} p-4 gap-3 w-full"):
        title_input = ui.input("List title", value=todo_list["title"]).classes(STYLE_INPUT)

        def handle_save() -> None:
            follow(controller.rename_list(session_id, todo_list_id, title_input.value or ""))

        title_input.on("keydown.enter", handle_save)
        with ui.row().classes("gap-2"):
            ui.button("Save", on_click=handle_save).classes(STYLE_BTN_PRIMARY)
            ui.button(
                "Cancel", on_click=lambda: ui.navigate.to(f"/lists/{todo_list_id}")
            ).props("flat").classes(STYLE_BTN_SECONDARY)

    with ui.dialog() as confirm, ui.card().classes(f"{STYLE_CARD} p-4 gap-3"):
        ui.label("Are you sure? This cannot be undone!")
        with ui.row().classes("gap-2"):
            ui.button(
                "Delete List",
                on_click=lambda: follow(controller.delete_list(session_id, todo_list_id)),
            ).classes(STYLE_BTN_DANGER)
            ui.button("Keep", on_click=confirm.close).props("flat").classes(STYLE_BTN_SECONDARY)

    ui.button("Delete List", icon="delete", on_click=confirm.open).classes(STYLE_BTN_DANGER)
