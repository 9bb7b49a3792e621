from typing import Optional

from nicegui import ui

from canvas_ui import ui_labels as L


class DropOverlay:
    """Full-window overlay shown while a file is dragged over the app."""

    def __init__(self):
        self.element: Optional[ui.element] = None

    def create(self) -> ui.element:
        with ui.element('div').classes('canvas-drop-overlay') as self.element:
            with ui.column().classes('items-center gap-2'):
                ui.icon('upload_file', size='xl')
                ui.label(L.DROP_TITLE).classes('text-xl font-semibold')
                ui.label(L.DROP_HINT).classes('text-sm opacity-80')
        self.element.set_visibility(False)
        return self.element

    def set_active(self, active: bool):
        if self.element is not None:
            self.element.set_visibility(active)
