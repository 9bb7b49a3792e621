"""
Browser Event Surface - window-level drag/drop listeners for one client.

preventDefault() has to happen synchronously in the browser, so the
injected script does it for file drags and only reports to Python what
happened. Dropped files are read in the browser (first file only) and
arrive with their text.
"""

from typing import Dict, List

from nicegui import ui

from canvas_core.drop_zone import BufferedFile, DragEvent, DragHandler
from canvas_core.log_utils import log

EVENT_NAME = 'canvas_drag'

_INSTALL_JS = '''
(() => {
    if (window.__canvasDropZone) window.__canvasDropZone.detach();
    let active = false;
    const hasFiles = (e) => Array.from(e.dataTransfer?.types ?? []).includes('Files');
    const emit = (detail) => emitEvent('%(event)s', detail);

    const onOver = (e) => {
        if (!hasFiles(e)) return;
        e.preventDefault();
        e.dataTransfer.dropEffect = 'copy';
        if (active) return;
        active = true;
        emit({type: e.type, hasFiles: true});
    };
    const onLeave = (e) => {
        if (e.relatedTarget !== null) return;
        active = false;
        emit({type: 'dragleave', hasFiles: hasFiles(e), relatedTargetNull: true});
    };
    const onDrop = async (e) => {
        active = false;
        const files = e.dataTransfer?.files;
        if (!files || files.length === 0) {
            emit({type: 'drop', hasFiles: false});
            return;
        }
        e.preventDefault();
        const file = files[0];
        try {
            emit({type: 'drop', hasFiles: true, files: [{name: file.name, text: await file.text()}]});
        } catch (err) {
            emit({type: 'drop', hasFiles: true, files: [{name: file.name, error: String(err)}]});
        }
    };

    window.addEventListener('dragenter', onOver);
    window.addEventListener('dragover', onOver);
    window.addEventListener('dragleave', onLeave);
    window.addEventListener('drop', onDrop);
    window.__canvasDropZone = {
        detach() {
            window.removeEventListener('dragenter', onOver);
            window.removeEventListener('dragover', onOver);
            window.removeEventListener('dragleave', onLeave);
            window.removeEventListener('drop', onDrop);
            delete window.__canvasDropZone;
        },
    };
})();
''' % {'event': EVENT_NAME}

_DETACH_JS = 'window.__canvasDropZone && window.__canvasDropZone.detach();'


def drag_event_from_args(args: dict) -> DragEvent:
    """Builds a DragEvent from the payload emitted by the injected script."""
    files = []
    for entry in args.get('files') or []:
        name = str(entry.get('name', ''))
        if 'text' in entry and isinstance(entry['text'], str):
            files.append(BufferedFile(name=name, content=entry['text'].encode('utf-8')))
        else:
            files.append(BufferedFile(name=name, error=str(entry.get('error', 'read failed'))))
    return DragEvent(
        type=str(args.get('type', '')),
        has_files=bool(args.get('hasFiles')),
        related_target_is_null=bool(args.get('relatedTargetNull')),
        files=files,
    )


class BrowserEventSurface:
    """EventSurface backed by the browser window of the current client."""

    def __init__(self, client=None):
        self._client = client or ui.context.client
        self._listeners: Dict[str, List[DragHandler]] = {}
        self._installed = False
        self._event_hooked = False

    def add_listener(self, event_type: str, handler: DragHandler) -> None:
        self._listeners.setdefault(event_type, []).append(handler)
        if not self._installed:
            self._install()

    def remove_listener(self, event_type: str, handler: DragHandler) -> None:
        handlers = self._listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        if not any(self._listeners.values()) and self._installed:
            self._uninstall()

    def _install(self):
        if not self._event_hooked:
            with self._client:
                ui.on(EVENT_NAME, self._dispatch)
            self._event_hooked = True
        self._client.run_javascript(_INSTALL_JS)
        self._installed = True

    def _uninstall(self):
        self._installed = False
        try:
            self._client.run_javascript(_DETACH_JS)
        except RuntimeError as e:
            # Client already gone, its window listeners went with it
            log(f"[DROP] Skipping browser detach: {e}")

    def _dispatch(self, e):
        args = e.args if isinstance(e.args, dict) else {}
        event = drag_event_from_args(args)
        for handler in list(self._listeners.get(event.type, [])):
            handler(event)
