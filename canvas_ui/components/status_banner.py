"""
Status Banner Component
Shows the notifier's current message, nothing when there is none.
"""

from typing import Optional

from nicegui import ui

from canvas_core.log_utils import log
from canvas_core.status_notifier import StatusMessage
from canvas_ui import ui_labels as L


class StatusBanner:
    """Banner bound to a StatusNotifier."""

    def __init__(self):
        self.container: Optional[ui.element] = None
        self._client = None

    def create(self) -> ui.element:
        self.container = ui.element('div').classes('w-full')
        self._client = ui.context.client
        return self.container

    def render(self, message: Optional[StatusMessage]):
        if self.container is None:
            return
        self.container.clear()
        if message is None:
            return
        bg, border, text = L.STATUS_COLORS[message.kind.value]
        with self.container:
            with ui.row().classes(f'w-full items-center gap-2 rounded-lg border px-4 py-2 {bg} {border} {text}'):
                ui.icon('error' if message.is_error else 'check_circle')
                ui.label(message.text)

    def update(self, message: Optional[StatusMessage]):
        """Notifier callback; may fire from a timer outside the page build."""
        if self._client:
            try:
                with self._client:
                    self.render(message)
            except RuntimeError as e:
                log(f"[StatusBanner] Refresh error: {e}")
