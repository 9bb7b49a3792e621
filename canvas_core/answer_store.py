"""
Answer Store - field id -> answer text.

A missing key means an empty answer. Only strings are ever stored.
"""

from typing import Callable, Dict, Mapping, Optional

from canvas_core.log_utils import log


class AnswerStore:
    """Mutable answer map of one session."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._answers: Dict[str, str] = {}
        self._on_change: Optional[Callable[[], None]] = None
        if initial:
            self._answers = self._checked(initial)

    def on_change(self, callback: Callable[[], None]):
        """Registers a callback fired after every mutation."""
        self._on_change = callback

    def get(self, field_id: str) -> str:
        return self._answers.get(field_id, "")

    def set(self, field_id: str, value: str):
        """Upserts one answer. Empty strings are kept as-is."""
        if not isinstance(value, str):
            raise TypeError(f"answer for {field_id!r} must be str, got {type(value).__name__}")
        self._answers[field_id] = value
        self._notify()

    def replace_all(self, answers: Mapping[str, str]):
        """Swaps the whole map in one step (used by import)."""
        self._answers = self._checked(answers)
        self._notify()

    def has_answer(self, field_id: str) -> bool:
        return bool(self.get(field_id).strip())

    def snapshot(self) -> Dict[str, str]:
        return dict(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._answers

    @staticmethod
    def _checked(answers: Mapping[str, str]) -> Dict[str, str]:
        bad = [key for key, value in answers.items() if not isinstance(value, str)]
        if bad:
            raise TypeError(f"non-string answers for: {', '.join(map(str, bad))}")
        return dict(answers)

    def _notify(self):
        if self._on_change:
            try:
                self._on_change()
            except Exception as e:
                log(f"[AnswerStore] Change callback error: {e}")
