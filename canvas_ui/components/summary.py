from typing import List

from nicegui import ui

from canvas_core.session import SummaryBlock
from canvas_ui import ui_labels as L


def create_summary(blocks: List[SummaryBlock], counter: str):
    """Read-only overview of every answer, grouped by page."""
    with ui.column().classes('w-full gap-1'):
        ui.label(counter).classes('text-sm text-gray-500')
        ui.label(L.SUMMARY_TITLE).classes('text-xl font-bold')
        ui.label(L.SUMMARY_HINT).classes('text-sm text-gray-600')

    with ui.element('div').classes('w-full grid gap-4 md:grid-cols-2'):
        for block in blocks:
            with ui.card().classes('w-full'):
                ui.label(block.title).classes('text-lg font-semibold')
                for row in block.rows:
                    with ui.column().classes('w-full gap-1 py-1'):
                        with ui.row().classes('items-center gap-2'):
                            ui.label(row.area).classes('canvas-area-pill')
                            ui.label(row.question).classes('text-sm font-medium')
                        if row.answered:
                            ui.label(row.answer).classes('text-sm whitespace-pre-wrap')
                        else:
                            ui.label(L.SUMMARY_EMPTY).classes('text-sm canvas-summary-empty')
