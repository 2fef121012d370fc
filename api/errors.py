"""
api.errors - Error handlers answering in the negotiated variant.

Validation failures come from pydantic (400).  Database errors are not
caught anywhere in the routes; they surface here as a plain 500.
"""

import logging

from flask import jsonify, render_template, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from api import api_bp
from api.negotiation import ResponseVariant, resolve_variant
import config

logger = logging.getLogger(__name__)


def _error_response(code: int, message: str, **extra):
    if resolve_variant(request) is ResponseVariant.JSON:
        return jsonify({"error": message, **extra}), code
    return render_template("error.html", title=config.PAGE_TITLE,
                           code=code, message=message, **extra), code


@api_bp.errorhandler(ValidationError)
def api_invalid_params(exc: ValidationError):
    issues = [
        {"param": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    logger.info(f"Rejected query {request.query_string.decode(errors='replace')!r}: "
                f"{len(issues)} issue(s)")
    return _error_response(400, "invalid query parameters", issues=issues)


@api_bp.app_errorhandler(404)
def api_not_found(_e: HTTPException):
    return _error_response(404, "not found")


@api_bp.app_errorhandler(500)
def api_server_error(_e):
    return _error_response(500, "internal server error")
