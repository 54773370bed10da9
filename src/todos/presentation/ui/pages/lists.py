from __future__ import annotations

from nicegui import ui

from todos.presentation.controllers.todo_controller import TodoController
from todos.presentation.ui.pages._shared import current_session_id
from todos.presentation.ui.styles import (
    STYLE_BADGE_GRAY,
    STYLE_BADGE_GREEN,
    STYLE_BTN_PRIMARY,
    STYLE_CARD,
    STYLE_CARD_HOVER,
    STYLE_PAGE_TITLE,
    STYLE_TABLE_ROW,
    STYLE_TEXT_DONE,
    STYLE_TEXT_MUTED,
)


def render_lists(controller: TodoController) -> None:
    response = controller.overview(current_session_id())
    todo_lists = response.payload["todo_lists"]

    with ui.row().classes("w-full items-center justify-between"):
        ui.label("Todo Lists").classes(STYLE_PAGE_TITLE)
        ui.button("New List", icon="add", on_click=lambda: ui.navigate.to("/lists/new")).classes(
            STYLE_BTN_PRIMARY
        )

    with ui.card().classes(f"{STYLE_CARD} p-0 w-full overflow-hidden"):
        if not todo_lists:
            with ui.row().classes(STYLE_TABLE_ROW):
                ui.label("You don't have any todo lists.").classes(STYLE_TEXT_MUTED)
            return
        for todo_list in todo_lists:
            target = f"/lists/{todo_list['id']}"
            with ui.row().classes(f"{STYLE_TABLE_ROW} {STYLE_CARD_HOVER} cursor-pointer items-center").on(
                "click", lambda _, t=target: ui.navigate.to(t)
            ):
                title_style = STYLE_TEXT_DONE if todo_list["is_done"] else "font-medium text-slate-900"
                ui.label(todo_list["title"]).classes(f"flex-1 {title_style}")
                badge = STYLE_BADGE_GREEN if todo_list["is_done"] else STYLE_BADGE_GRAY
                ui.label(f"{todo_list['done_count']} / {todo_list['size']}").classes(badge)
