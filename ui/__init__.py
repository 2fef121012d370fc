"""
ui - Server-rendered HTML helpers.

Registers the Jinja filters used by the templates and the site root.
"""

from flask import Blueprint

ui_bp = Blueprint("ui", __name__)

# Import route modules so their @ui_bp decorators execute
from ui import filters            # noqa: F401, E402
from ui import routes_index       # noqa: F401, E402
