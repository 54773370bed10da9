"""Design tokens (light slate) shared by the pages."""

from __future__ import annotations

APP_HEAD_HTML = """
<style>
  body, .q-body, .nicegui-content { background: #f8fafc !important; color: #0f172a !important; }
  .q-card, .q-btn, .q-notification { box-shadow: none !important; }
</style>
"""

STYLE_CONTAINER = "w-full max-w-3xl mx-auto px-6 py-6 gap-6"
STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"
STYLE_CARD_HOVER = "transition-colors hover:bg-slate-50 hover:border-slate-300"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_TEXT_MUTED = "text-sm text-slate-600"
STYLE_TEXT_DONE = "text-sm text-slate-400 line-through"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all"
)
STYLE_BTN_SECONDARY = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 active:scale-[0.99] rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all"
)
STYLE_BTN_DANGER = (
    "bg-rose-600 text-white hover:bg-rose-700 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all"
)

STYLE_INPUT = "w-full text-sm"
STYLE_TABLE_ROW = "w-full px-3 py-2 text-sm text-slate-800 border-b border-slate-200/70"

STYLE_BADGE_GREEN = "bg-emerald-50 text-emerald-700 border border-emerald-200 px-2 py-0.5 rounded-full text-xs font-medium"
STYLE_BADGE_GRAY = "bg-slate-100 text-slate-700 border border-slate-200 px-2 py-0.5 rounded-full text-xs font-medium"

FLASH_COLORS = {"success": "positive", "error": "negative", "info": "info"}
