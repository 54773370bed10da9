from __future__ import annotations

from todos.composition_root import create_app_container, create_in_memory_container
from todos.infrastructure.data.repositories.in_memory_todo_list_repository import (
    InMemoryTodoListRepository,
)


def test_todo_flow_create_list_add_todos_and_view() -> None:
    container = create_in_memory_container()
    controller = container.controller

    controller.create_list("s1", "Groceries")
    list_id = controller.overview("s1").payload["todo_lists"][0]["id"]
    for title in ["milk", "Bread", "apples"]:
        controller.create_todo("s1", list_id, title)
    controller.toggle_todo("s1", list_id, 2)

    view = controller.view_list("s1", list_id).payload

    assert [todo["title"] for todo in view["todos"]] == ["apples", "milk", "Bread"]
    assert view["todo_list"]["done_count"] == 1
    assert view["todo_list"]["size"] == 3


def test_todo_flow_persists_through_the_repository() -> None:
    repository = InMemoryTodoListRepository()
    first = create_app_container(repository)
    first.controller.create_list("s1", "Work")

    second = create_app_container(repository)

    assert second.repository is repository
    assert [item["title"] for item in second.controller.overview("s1").payload["todo_lists"]] == ["Work"]
    assert second.controller.overview("s2").payload["todo_lists"] == []
