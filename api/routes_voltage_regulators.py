"""
api.routes_voltage_regulators - /voltage_regulators/list endpoint.
"""

import logging

from flask import request, jsonify, render_template

from api import api_bp
from api.negotiation import ResponseVariant, resolve_variant
from api.params import RegulatorListParams
from db import get_session
from services.regulator_query import RegulatorService
from ui.display import TABLE_COLUMNS, display_row
import config

logger = logging.getLogger(__name__)


@api_bp.route("/voltage_regulators/list")
def list_voltage_regulators():
    """
    GET /voltage_regulators/list?package=&output_type=&is_ldo=&output_voltage=

    Up to 100 regulators by descending stock.  JSON for API clients,
    otherwise the search page with its filter form.
    """
    variant = resolve_variant(request)
    params = RegulatorListParams.from_args(request.args)
    filters = params.to_filter()

    session = get_session()
    try:
        packages = RegulatorService.packages(session)
        regulators = RegulatorService.search(session, filters)
    finally:
        session.close()

    logger.debug(f"{variant.value} listing: {len(regulators)} regulators, "
                 f"{len(packages)} packages")

    if variant is ResponseVariant.JSON:
        return jsonify({
            "regulators": [r.to_dict() for r in regulators],
        })

    return render_template(
        "voltage_regulators/list.html",
        title=config.PAGE_TITLE,
        params=params,
        packages=packages,
        columns=TABLE_COLUMNS,
        rows=[display_row(r) for r in regulators],
    )


# JSON alias; url_for("api.list_voltage_regulators") stays on the HTML path
api_bp.add_url_rule(
    "/voltage_regulators/list.json",
    "list_voltage_regulators_json",
    list_voltage_regulators,
)
