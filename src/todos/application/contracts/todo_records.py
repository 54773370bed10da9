"""Shape of the todo data kept in a client session."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr


class TodoRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictInt
    title: StrictStr
    done: StrictBool


class TodoListRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictInt
    title: StrictStr
    todos: List[TodoRecord] = []
    next_todo_id: Optional[StrictInt] = None


class TodoListCollectionRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    todo_lists: List[TodoListRecord] = []
    next_list_id: Optional[StrictInt] = None
