from __future__ import annotations

from nicegui import ui

from todos.presentation.controllers.todo_controller import TodoController
from todos.presentation.ui.pages._shared import current_session_id, follow, render_not_found
from todos.presentation.ui.styles import (
    STYLE_BTN_PRIMARY,
    STYLE_BTN_SECONDARY,
    STYLE_CARD,
    STYLE_INPUT,
    STYLE_PAGE_TITLE,
    STYLE_TABLE_ROW,
    STYLE_TEXT_DONE,
    STYLE_TEXT_MUTED,
)


def render_list_detail(controller: TodoController, todo_list_id: str) -> None:
    session_id = current_session_id()
    response = controller.view_list(session_id, todo_list_id)
    if response.status == 404:
        render_not_found()
        return

    todo_list = response.payload["todo_list"]
    todos = response.payload["todos"]

    with ui.row().classes("w-full items-center justify-between"):
        ui.label(todo_list["title"]).classes(STYLE_PAGE_TITLE)
        with ui.row().classes("gap-2"):
            ui.button(
                "Edit List", icon="edit", on_click=lambda: ui.navigate.to(f"/lists/{todo_list_id}/edit")
            ).props("flat").classes(STYLE_BTN_SECONDARY)
            if todos and not todo_list["is_done"]:
                ui.button(
                    "Complete All",
                    icon="done_all",
                    on_click=lambda: follow(controller.complete_all(session_id, todo_list_id)),
                ).classes(STYLE_BTN_PRIMARY)

    with ui.card().classes(f"{STYLE_CARD} p-0 w-full overflow-hidden"):
        if not todos:
            with ui.row().classes(STYLE_TABLE_ROW):
                ui.label("There are no todos on this list.").classes(STYLE_TEXT_MUTED)
        for todo in todos:
            with ui.row().classes(f"{STYLE_TABLE_ROW} items-center"):
                ui.checkbox(
                    value=todo["done"],
                    on_change=lambda _, t=todo["id"]: follow(
                        controller.toggle_todo(session_id, todo_list_id, t)
                    ),
                )
                ui.label(todo["title"]).classes(
                    f"flex-1 {STYLE_TEXT_DONE if todo['done'] else 'text-slate-900'}"
                )
                ui.button(
                    icon="delete",
                    on_click=lambda _, t=todo["id"]: follow(
                        controller.delete_todo(session_id, todo_list_id, t)
                    ),
                ).props("flat round dense color=grey")

    with ui.card().classes(f"{STYLE_CARD} p-4 gap-3 w-full"):
        title_input = ui.input("New todo", placeholder="Something to do").classes(STYLE_INPUT)

        def handle_add() -> None:
            follow(controller.create_todo(session_id, todo_list_id, title_input.value or ""))

        title_input.on("keydown.enter", handle_add)
        ui.button("Add", on_click=handle_add).classes(STYLE_BTN_PRIMARY)

    ui.link("All Lists", "/lists").classes(STYLE_TEXT_MUTED)
