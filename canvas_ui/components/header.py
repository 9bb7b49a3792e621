from nicegui import ui

from canvas_ui import ui_labels as L


def create_header(view, title: str):
    """
    Creates the page header with export and load actions.

    Args:
        view: WizardView instance (provides the action handlers)
        title: Application title
    """
    with ui.header().classes('bg-blue-700 text-white'):
        with ui.row().classes('w-full items-center justify-between px-4 py-2'):
            with ui.column().classes('gap-0'):
                ui.label(L.EYEBROW).classes('canvas-eyebrow')
                ui.label(title).classes('text-2xl font-bold tracking-tight')
                ui.label(L.SUBHEAD).classes('text-sm opacity-80')

            with ui.row().classes('items-center gap-2'):
                ui.button(L.BTN_EXPORT, icon='download', on_click=view.handle_export).props(
                    'flat dense'
                ).classes('text-white')

                # Auto-upload file picker, cleared after every selection
                view.upload = ui.upload(
                    label=L.BTN_LOAD,
                    auto_upload=True,
                    max_files=1,
                    on_upload=view.handle_upload,
                ).props('accept=".json,application/json" flat dense hide-upload-btn').classes(
                    'max-w-xs'
                )
