from nicegui import ui

from canvas_core.session import NavState
from canvas_ui import ui_labels as L


def create_nav_footer(view, nav: NavState):
    """Back button, progress track and the context-sensitive primary button."""
    with ui.row().classes('w-full items-center gap-4 flex-nowrap'):
        back = ui.button(L.BTN_BACK, icon='arrow_back', on_click=view.handle_back).props('flat')
        back.set_enabled(nav.can_go_back)

        ui.linear_progress(
            value=nav.progress_percent / 100, show_value=False
        ).props('rounded size=10px').classes('flex-1')

        ui.button(nav.primary_label, on_click=view.handle_next).props('unelevated color=primary')
