from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

# Keep test runs out of the real logs/ directory
os.environ.setdefault("CANVAS_LOG_DIR", tempfile.mkdtemp(prefix="canvas-logs-"))

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

import pytest

from canvas_core.models import FormDefinition


class FakeHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Collects scheduled callbacks instead of running them."""

    def __init__(self):
        self.handles: list[FakeHandle] = []

    def __call__(self, delay, callback):
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire_pending(self):
        for handle in self.pending:
            handle.cancelled = True
            handle.callback()


class FakeSurface:
    """EventSurface keeping listeners in a dict."""

    def __init__(self):
        self.listeners: dict[str, list] = {}

    def add_listener(self, event_type, handler):
        self.listeners.setdefault(event_type, []).append(handler)

    def remove_listener(self, event_type, handler):
        self.listeners[event_type].remove(handler)

    def count(self) -> int:
        return sum(len(v) for v in self.listeners.values())

    def emit(self, event):
        results = [handler(event) for handler in list(self.listeners.get(event.type, []))]
        return results[-1] if results else None


def make_form(*pages) -> FormDefinition:
    """pages: (title, [question, ...]) tuples."""
    return FormDefinition.from_dict({
        'pages': [
            {
                'title': title,
                'items': [{'area': 'Area', 'question': q, 'help': 'Ayuda'} for q in questions],
            }
            for title, questions in pages
        ]
    })


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def two_page_form() -> FormDefinition:
    return make_form(("Inicio", ["Nombre"]), ("Metas", ["Meta"]))


@pytest.fixture
def three_page_form() -> FormDefinition:
    return make_form(("Uno", ["A"]), ("Dos", ["B"]), ("Tres", ["C"]))
