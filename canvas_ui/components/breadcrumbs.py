from typing import Callable, List, Tuple

from nicegui import ui

from canvas_core.models import BreadcrumbState
from canvas_ui import ui_labels as L


def create_breadcrumbs(
    crumbs: List[Tuple[int, str, BreadcrumbState]],
    on_select: Callable[[int], None],
):
    """Step breadcrumbs; every crumb is clickable."""
    with ui.row().classes('canvas-breadcrumbs w-full flex-nowrap gap-2 py-2').props(
        f'aria-label="{L.NAV_ARIA}"'
    ):
        for index, label, state in crumbs:
            with ui.button(on_click=lambda i=index: on_select(i)).props('flat no-caps').classes(
                f'rounded-full px-3 {L.BREADCRUMB_CLASSES[state.value]}'
            ):
                with ui.row().classes('items-center gap-2 flex-nowrap'):
                    ui.label(str(index + 1)).classes('canvas-breadcrumb-index')
                    ui.label(label).classes('whitespace-nowrap')
