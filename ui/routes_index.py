"""
ui.routes_index - Site root.
"""

from flask import redirect, url_for

from ui import ui_bp


@ui_bp.route("/")
def index():
    return redirect(url_for("api.list_voltage_regulators"))
