"""Data models of the canvas."""

from .enums import StatusKind, BreadcrumbState
from .form import FormItem, FormPage, FormDefinition, SUMMARY_LABEL

__all__ = [
    'StatusKind',
    'BreadcrumbState',
    'FormItem',
    'FormPage',
    'FormDefinition',
    'SUMMARY_LABEL',
]
