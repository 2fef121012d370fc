"""
ui.filters - Jinja filters available to every template.
"""

from ui import ui_bp
from ui.display import format_number


@ui_bp.app_template_filter("num")
def num_filter(value):
    return format_number(value)


@ui_bp.app_template_filter("lcsc")
def lcsc_filter(value):
    """Render the integer key the way JLCPCB prints it: C12345."""
    return f"C{value}" if value is not None else ""
