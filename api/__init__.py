"""
api - Regulator listing endpoints.

All route modules register on a single Flask Blueprint.  Each route
answers JSON or HTML depending on api.negotiation.resolve_variant().
"""

from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules so their @api_bp decorators execute
from api import routes_voltage_regulators   # noqa: F401, E402
from api import errors                      # noqa: F401, E402
