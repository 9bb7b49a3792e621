from typing import Callable

from nicegui import ui

from canvas_core.session import PageView
from canvas_ui import ui_labels as L


def create_page_form(page: PageView, on_answer: Callable[[str, str], None]):
    """Renders the questions of the active page."""
    with ui.column().classes('w-full gap-1'):
        ui.label(page.counter).classes('text-sm text-gray-500')
        ui.label(page.title).classes('text-xl font-bold')

    with ui.column().classes('w-full gap-6'):
        for field in page.fields:
            with ui.column().classes('w-full gap-2'):
                with ui.row().classes('items-center gap-2'):
                    ui.label(field.area).classes('canvas-area-pill')
                    ui.label(field.question).classes('text-base font-semibold')
                ui.textarea(
                    value=field.answer,
                    placeholder=L.FIELD_PLACEHOLDER,
                    on_change=lambda e, fid=field.field_id: on_answer(fid, e.value or ''),
                ).props(
                    f'outlined autogrow rows={field.rows} '
                    f'for="{field.field_id}" aria-describedby="{field.help_id}"'
                ).classes('w-full')
                ui.label(field.help).classes('text-xs text-gray-500').props(f'id="{field.help_id}"')
