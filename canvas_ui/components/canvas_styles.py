from nicegui import ui

_CANVAS_STYLES_INJECTED = False


def inject_canvas_styles():
    """Injects the canvas CSS once per process."""
    global _CANVAS_STYLES_INJECTED
    if _CANVAS_STYLES_INJECTED:
        return
    _CANVAS_STYLES_INJECTED = True

    ui.add_head_html('''
    <style>
    .canvas-eyebrow {
        text-transform: uppercase;
        letter-spacing: 0.12em;
        font-size: 0.75rem;
        opacity: 0.8;
    }

    /* Breadcrumbs scroll horizontally on narrow screens */
    .canvas-breadcrumbs {
        overflow-x: auto;
        scrollbar-width: thin;
    }

    .canvas-breadcrumb-index {
        display: inline-flex;
        align-items: center;
        justify-content: center;
        width: 1.5rem;
        height: 1.5rem;
        border-radius: 9999px;
        background: rgba(0, 0, 0, 0.08);
        font-weight: 600;
    }

    .canvas-area-pill {
        display: inline-block;
        padding: 0.1rem 0.6rem;
        border-radius: 9999px;
        background: #dbeafe;
        color: #1e40af;
        font-size: 0.75rem;
        font-weight: 600;
    }

    .canvas-drop-overlay {
        position: fixed;
        inset: 0;
        z-index: 6000;
        display: flex;
        align-items: center;
        justify-content: center;
        background: rgba(29, 78, 216, 0.85);
        color: white;
        text-align: center;
        pointer-events: none;
    }

    .canvas-summary-empty {
        color: #9ca3af;
        font-style: italic;
    }
    </style>
    ''')
