"""
Step Controller - linear state machine over the wizard steps.

States: 0 .. page_count. The last one is the summary; it can still go
back. go_to() is the only transition, next/back/breadcrumbs reduce to it.
"""

import math
from typing import Callable, List, Optional, Sequence, Tuple

from canvas_core.log_utils import log
from canvas_core.models.enums import BreadcrumbState

LABEL_NEXT = "Siguiente"
LABEL_VIEW_SUMMARY = "Ver resumen"
LABEL_DOWNLOAD = "Descargar resumen"


class StepController:
    """Owns the current step and derives the navigation state."""

    def __init__(self, page_count: int, current: int = 0):
        if page_count < 0:
            raise ValueError("page_count cannot be negative")
        self.page_count = page_count
        self._current = 0
        self._on_change: Optional[Callable[[int], None]] = None
        self._current = self.clamp(current)

    def on_change(self, callback: Callable[[int], None]):
        """Registers a callback fired with the new step after each transition."""
        self._on_change = callback

    @property
    def current(self) -> int:
        return self._current

    @property
    def summary_index(self) -> int:
        return self.page_count

    @property
    def is_summary(self) -> bool:
        return self._current == self.summary_index

    @property
    def can_go_back(self) -> bool:
        return self._current > 0

    def clamp(self, step) -> int:
        """Coerces any number into [0, page_count]. NaN and inf become 0."""
        if isinstance(step, float) and not math.isfinite(step):
            step = 0
        return max(0, min(int(step), self.summary_index))

    def go_to(self, step) -> int:
        self._current = self.clamp(step)
        if self._on_change:
            try:
                self._on_change(self._current)
            except Exception as e:
                log(f"[StepController] Change callback error: {e}")
        return self._current

    def next(self) -> bool:
        """
        Moves forward one step.

        Returns True when already at the summary: the caller is expected
        to export instead of moving.
        """
        if self.is_summary:
            return True
        self.go_to(self._current + 1)
        return False

    def back(self) -> int:
        return self.go_to(self._current - 1)

    @property
    def progress_percent(self) -> float:
        if self.page_count == 0:
            return 100.0
        return self._current / self.page_count * 100

    @property
    def primary_label(self) -> str:
        if self.is_summary:
            return LABEL_DOWNLOAD
        if self._current == self.summary_index - 1:
            return LABEL_VIEW_SUMMARY
        return LABEL_NEXT

    @property
    def page_counter(self) -> str:
        return f"Paso {self._current + 1} de {self.page_count + 1}"

    def breadcrumb_state(self, index: int) -> BreadcrumbState:
        if index == self._current:
            return BreadcrumbState.ACTIVE
        if index < self._current:
            return BreadcrumbState.COMPLETE
        return BreadcrumbState.PENDING

    def breadcrumbs(self, labels: Sequence[str]) -> List[Tuple[int, str, BreadcrumbState]]:
        return [(index, label, self.breadcrumb_state(index)) for index, label in enumerate(labels)]
