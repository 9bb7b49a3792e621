"""Enums used by the models."""

from enum import Enum


class StatusKind(str, Enum):
    """Kind of a status banner message."""
    SUCCESS = "success"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class BreadcrumbState(str, Enum):
    """Visual state of a breadcrumb relative to the current step."""
    ACTIVE = "active"
    COMPLETE = "complete"
    PENDING = "pending"

    def __str__(self) -> str:
        return self.value
