"""
Busup Venture Canvas - NiceGUI Edition
Wizard over the canvas pages with JSON export/import and window-wide file drop.
"""

import os
import sys
import threading
import time

from nicegui import app, ui

from canvas_core.config_manager import ConfigManager
from canvas_core.errors import FormDefinitionError
from canvas_core.log_utils import log
from canvas_core.models import FormDefinition
from canvas_ui.views.wizard_view import WizardView


def main():
    config_manager = ConfigManager()
    config = config_manager.config

    try:
        form = FormDefinition.load(config.pages_file)
    except FormDefinitionError as e:
        log(f"[STARTUP] Cannot load form pages: {e}")
        sys.exit(1)
    log(f"[STARTUP] Loaded {form.page_count} page(s) from {config.pages_file}")

    @ui.page('/')
    def index():
        """Main page: one session per browser tab."""
        view = WizardView(form, config)
        view.create_ui()

    def cleanup():
        log("[APP] Shutting down...")

    app.on_shutdown(cleanup)

    def _is_port_open(port: int) -> bool:
        import socket
        try:
            with socket.create_connection(("127.0.0.1", port), timeout=0.2):
                return True
        except OSError:
            return False

    port = config.port
    if _is_port_open(port) and os.environ.get("CANVAS_ALLOW_MULTI") != "1":
        log(f"[APP] Port {port} already in use - using existing instance.")
        return

    if config.auto_open:
        def _open_page():
            import webbrowser
            time.sleep(1.0)
            try:
                webbrowser.open(f"http://127.0.0.1:{port}", new=1, autoraise=True)
            except webbrowser.Error as e:
                log(f"[APP] Cannot open browser: {e}")
        threading.Thread(target=_open_page, daemon=True).start()

    ui.run(
        title=config.title,
        port=port,
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
