"""
Drop Zone Controller - the whole application is a drop target.

Listens on an ambient event surface (the browser window), tracks the
"drag active" flag for the overlay and forwards the first dropped file
to the import path.

Listener registration is a scoped resource:

    with DropZoneController(surface, on_file) as drop_zone:
        ...

detach() runs on every exit path and can be called more than once.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Protocol, Set

from canvas_core.errors import UnreadableFile
from canvas_core.log_utils import tagged

_log = tagged("DROP")

DRAG_EVENTS = ('dragenter', 'dragover', 'dragleave', 'drop')


class DroppedFile(Protocol):
    """File handed over by the surface. Reading may suspend."""
    name: str

    async def read_text(self) -> str:
        ...


@dataclass
class BufferedFile:
    """File whose content (or read failure) is already known."""
    name: str
    content: Optional[bytes] = None
    error: Optional[str] = None

    async def read_text(self) -> str:
        if self.error is not None or self.content is None:
            raise UnreadableFile(self.error or f"no content for {self.name!r}")
        try:
            return self.content.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise UnreadableFile(f"{self.name!r} is not UTF-8 text") from e


@dataclass
class DragEvent:
    """Drag/drop event as seen by the controller."""
    type: str
    has_files: bool = False
    related_target_is_null: bool = False
    files: List[DroppedFile] = field(default_factory=list)
    default_prevented: bool = False

    def prevent_default(self):
        self.default_prevented = True


DragHandler = Callable[[DragEvent], object]


class EventSurface(Protocol):
    """Ambient event source (whole window)."""

    def add_listener(self, event_type: str, handler: DragHandler) -> None:
        ...

    def remove_listener(self, event_type: str, handler: DragHandler) -> None:
        ...


class DropZoneController:
    """Tracks drag state and forwards dropped files."""

    def __init__(
        self,
        surface: EventSurface,
        on_file: Callable[[DroppedFile], Awaitable[None]],
    ):
        self.surface = surface
        self.on_file = on_file
        self.drag_active = False
        self._attached = False
        self._on_change: Optional[Callable[[bool], None]] = None
        # Strong refs: the loop only keeps weak ones to running tasks
        self._tasks: Set[asyncio.Task] = set()
        self._handlers = {
            'dragenter': self.handle_drag_over,
            'dragover': self.handle_drag_over,
            'dragleave': self.handle_drag_leave,
            'drop': self.handle_drop,
        }

    def on_change(self, callback: Callable[[bool], None]):
        """Registers a callback fired when drag_active flips."""
        self._on_change = callback

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def pending_tasks(self) -> Set[asyncio.Task]:
        return set(self._tasks)

    # === LIFECYCLE ===

    def attach(self) -> 'DropZoneController':
        if self._attached:
            return self
        registered = []
        try:
            for event_type in DRAG_EVENTS:
                self.surface.add_listener(event_type, self._handlers[event_type])
                registered.append(event_type)
        except Exception:
            for event_type in registered:
                self.surface.remove_listener(event_type, self._handlers[event_type])
            raise
        self._attached = True
        _log("Listeners attached")
        return self

    def detach(self):
        if not self._attached:
            return
        self._attached = False
        for event_type in DRAG_EVENTS:
            try:
                self.surface.remove_listener(event_type, self._handlers[event_type])
            except Exception as e:
                _log(f"Failed to remove {event_type} listener: {e}")
        for task in list(self._tasks):
            task.cancel()
        self._set_active(False)
        _log("Listeners detached")

    def __enter__(self) -> 'DropZoneController':
        return self.attach()

    def __exit__(self, exc_type, exc, tb):
        self.detach()
        return False

    # === EVENTS ===

    def handle_drag_over(self, event: DragEvent):
        if not event.has_files:
            return
        event.prevent_default()
        self._set_active(True)

    def handle_drag_leave(self, event: DragEvent):
        # Only when the pointer left the window, not when crossing children
        if event.related_target_is_null:
            self._set_active(False)

    def handle_drop(self, event: DragEvent) -> Optional[asyncio.Task]:
        if not event.has_files or not event.files:
            self._set_active(False)
            return None
        event.prevent_default()
        self._set_active(False)
        first = event.files[0]
        _log(f"File dropped: {first.name}")
        task = asyncio.ensure_future(self.on_file(first))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Future):
        self._tasks.discard(task)
        if task.cancelled():
            _log("Dropped file import cancelled")
            return
        exc = task.exception()
        if exc is not None:
            _log(f"Dropped file import failed: {exc!r}")

    def _set_active(self, active: bool):
        if self.drag_active == active:
            return
        self.drag_active = active
        if self._on_change:
            try:
                self._on_change(active)
            except Exception as e:
                _log(f"Change callback error: {e}")
