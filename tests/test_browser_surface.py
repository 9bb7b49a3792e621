import asyncio
from types import SimpleNamespace

import pytest

pytest.importorskip("nicegui")

from canvas_core.drop_zone import DropZoneController
from canvas_core.errors import UnreadableFile
from canvas_ui import browser_surface
from canvas_ui.browser_surface import (
    _DETACH_JS,
    _INSTALL_JS,
    EVENT_NAME,
    BrowserEventSurface,
    drag_event_from_args,
)


def test_drop_payload_with_text():
    event = drag_event_from_args({
        "type": "drop",
        "hasFiles": True,
        "files": [{"name": "busup-canvas.json", "text": '{"answers": {}}'}],
    })
    assert event.type == "drop"
    assert event.has_files
    assert event.files[0].name == "busup-canvas.json"
    assert asyncio.run(event.files[0].read_text()) == '{"answers": {}}'


def test_drop_payload_with_read_error():
    event = drag_event_from_args({
        "type": "drop",
        "hasFiles": True,
        "files": [{"name": "x.json", "error": "NotReadableError"}],
    })
    with pytest.raises(UnreadableFile):
        asyncio.run(event.files[0].read_text())


def test_leave_payload():
    event = drag_event_from_args({"type": "dragleave", "relatedTargetNull": True})
    assert event.related_target_is_null
    assert not event.has_files
    assert event.files == []


class FakeClient:
    def __init__(self, fail_js=False):
        self.scripts = []
        self.fail_js = fail_js
        self.entered = 0

    def run_javascript(self, code):
        if self.fail_js:
            raise RuntimeError("client disconnected")
        self.scripts.append(code)

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def hooks(monkeypatch):
    calls = []
    monkeypatch.setattr(browser_surface.ui, "on", lambda name, handler: calls.append((name, handler)))
    return calls


def test_script_installed_once_for_many_listeners(hooks):

    client = FakeClient()
    surface = BrowserEventSurface(client)
    surface.add_listener("dragover", lambda e: None)
    surface.add_listener("drop", lambda e: None)
    surface.add_listener("dragleave", lambda e: None)

    assert client.scripts == [_INSTALL_JS]
    assert [name for name, _ in hooks] == [EVENT_NAME]
    assert client.entered == 1


def test_script_detached_after_last_listener_only(hooks):

    client = FakeClient()
    surface = BrowserEventSurface(client)
    over, drop = (lambda e: None), (lambda e: None)
    surface.add_listener("dragover", over)
    surface.add_listener("drop", drop)

    surface.remove_listener("dragover", over)
    assert _DETACH_JS not in client.scripts
    surface.remove_listener("drop", drop)
    assert client.scripts[-1] == _DETACH_JS
    surface.remove_listener("drop", drop)
    assert client.scripts.count(_DETACH_JS) == 1


def test_reattach_reinstalls_script_without_second_hook(hooks):

    async def on_file(file):
        pass

    client = FakeClient()
    surface = BrowserEventSurface(client)
    for _ in range(3):
        controller = DropZoneController(surface, on_file)
        controller.attach()
        controller.detach()

    assert client.scripts.count(_INSTALL_JS) == 3
    assert len(hooks) == 1


def test_dispatch_routes_by_event_type(hooks):

    surface = BrowserEventSurface(FakeClient())
    seen = []
    surface.add_listener("drop", lambda e: seen.append(("drop", e)))
    surface.add_listener("dragover", lambda e: seen.append(("over", e)))

    _, dispatch = hooks[0]
    dispatch(SimpleNamespace(args={"type": "drop", "hasFiles": True,
                                   "files": [{"name": "a.json", "text": "{}"}]}))

    assert [kind for kind, _ in seen] == ["drop"]
    assert seen[0][1].files[0].name == "a.json"

    dispatch(SimpleNamespace(args=None))
    assert len(seen) == 1


def test_detach_on_gone_client_is_quiet(hooks):

    client = FakeClient()
    surface = BrowserEventSurface(client)
    handler = lambda e: None
    surface.add_listener("drop", handler)
    client.fail_js = True

    surface.remove_listener("drop", handler)
    assert not surface._installed
