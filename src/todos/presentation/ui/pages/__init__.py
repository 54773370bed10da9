from __future__ import annotations

from .edit_list import render_edit_list
from .list_detail import render_list_detail
from .lists import render_lists
from .new_list import render_new_list

__all__ = ["render_edit_list", "render_list_detail", "render_lists", "render_new_list"]
