"""
Wizard View - the single page of the canvas.

Builds the chrome once and re-renders the content card on every step
change. Answer edits do not re-render (the textarea keeps focus); the
summary reads the store whenever it is shown.
"""

from typing import Optional

from nicegui import ui

from canvas_core.config_manager import AppConfig
from canvas_core.drop_zone import BufferedFile, DropZoneController
from canvas_core.log_utils import log
from canvas_core.models import FormDefinition
from canvas_core.session import CanvasSession, ExportResult
from canvas_core.status_notifier import StatusNotifier
from canvas_ui.browser_surface import BrowserEventSurface
from canvas_ui.components import (
    DropOverlay,
    StatusBanner,
    create_breadcrumbs,
    create_header,
    create_nav_footer,
    create_page_form,
    create_summary,
    inject_canvas_styles,
)


async def file_from_upload(e) -> BufferedFile:
    """Adapts a NiceGUI upload event to a BufferedFile."""
    upload = getattr(e, 'file', None)
    try:
        if upload is not None:  # NiceGUI 3.x
            return BufferedFile(name=upload.name, content=await upload.read())
        return BufferedFile(name=e.name, content=e.content.read())
    except OSError as ex:
        name = getattr(upload, 'name', None) or getattr(e, 'name', '')
        return BufferedFile(name=name, error=str(ex))


class WizardView:
    """Wizard page bound to one CanvasSession."""

    def __init__(self, form: FormDefinition, config: AppConfig):
        self.config = config
        self._client = ui.context.client

        # Timers live under their own host so re-renders never delete them
        self._timer_host: Optional[ui.element] = None
        self.session = CanvasSession(
            form,
            notifier=StatusNotifier(self._schedule, timeout=config.status_timeout_seconds),
            export_filename=config.export_filename,
        )

        # UI refs
        self.upload: Optional[ui.upload] = None
        self.content: Optional[ui.element] = None
        self.banner = StatusBanner()
        self.overlay = DropOverlay()
        self.drop_zone: Optional[DropZoneController] = None
        # One surface per view: its ui.on hook lives as long as the client
        self._surface: Optional[BrowserEventSurface] = None

    def _schedule(self, delay: float, callback):
        with self._timer_host:
            return ui.timer(delay, callback, once=True)

    def create_ui(self):
        print("[UI] create_ui() started", flush=True)
        inject_canvas_styles()
        self._timer_host = ui.element('div').classes('hidden')

        create_header(self, self.config.title)

        with ui.column().classes('w-full max-w-5xl mx-auto p-4 gap-4'):
            self.content = ui.column().classes('w-full gap-4')

        self.overlay.create()

        self.session.steps.on_change(lambda _step: self.refresh())
        self.session.notifier.on_change(self.banner.update)
        self.refresh()

        # Window listeners need a connected client; a reconnect re-installs them
        ui.timer(0.1, self.attach_drop_zone, once=True)
        self._client.on_connect(self.attach_drop_zone)
        self._client.on_disconnect(self.teardown)
        print("[UI] create_ui() DONE", flush=True)

    def refresh(self):
        """Re-renders breadcrumbs, content card and footer."""
        if self.content is None:
            return
        self.content.clear()
        nav = self.session.nav_state()
        with self.content:
            create_breadcrumbs(nav.breadcrumbs, self.session.go_to)

            with ui.card().classes('w-full p-6 gap-4'):
                self.banner.create()
                self.banner.render(self.session.notifier.current)

                page = self.session.page_view()
                if page is not None:
                    create_page_form(page, self.session.set_answer)
                else:
                    create_summary(self.session.summary_view(), nav.counter)

            create_nav_footer(self, nav)

    # === DRAG & DROP ===

    def attach_drop_zone(self):
        if self.drop_zone is not None:
            return
        if self._surface is None:
            self._surface = BrowserEventSurface(self._client)
        self.drop_zone = DropZoneController(self._surface, self.session.ingest_file)
        self.drop_zone.on_change(self.overlay.set_active)
        self.drop_zone.attach()

    def teardown(self):
        if self.drop_zone is not None:
            self.drop_zone.detach()
            self.drop_zone = None
        self.session.notifier.clear()
        log("[UI] Drop zone released")

    # === HANDLERS ===

    def handle_back(self):
        self.session.back()

    def handle_next(self):
        result = self.session.next()
        if result is not None:
            self._download(result)

    def handle_export(self):
        result = self.session.export()
        if result is not None:
            self._download(result)

    async def handle_upload(self, e):
        file = await file_from_upload(e)
        try:
            await self.session.ingest_file(file)
        finally:
            if self.upload is not None:
                self.upload.reset()

    def _download(self, result: ExportResult):
        content_download = getattr(ui.download, 'content', None)
        if callable(content_download):  # NiceGUI 3.x
            content_download(result.content, result.filename, 'application/json')
        else:
            ui.download(result.content, result.filename, 'application/json')
