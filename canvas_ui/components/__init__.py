# Canvas Components
from canvas_ui.components.canvas_styles import inject_canvas_styles
from canvas_ui.components.header import create_header
from canvas_ui.components.breadcrumbs import create_breadcrumbs
from canvas_ui.components.page_form import create_page_form
from canvas_ui.components.summary import create_summary
from canvas_ui.components.nav_footer import create_nav_footer
from canvas_ui.components.status_banner import StatusBanner
from canvas_ui.components.drop_overlay import DropOverlay

__all__ = [
    'inject_canvas_styles',
    'create_header',
    'create_breadcrumbs',
    'create_page_form',
    'create_summary',
    'create_nav_footer',
    'StatusBanner',
    'DropOverlay',
]
