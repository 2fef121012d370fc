"""
api.negotiation - Decide once per request whether to answer JSON or HTML.
"""

from __future__ import annotations

import enum

from flask import Request


class ResponseVariant(enum.Enum):
    JSON = "json"
    HTML = "html"


def resolve_variant(req: Request) -> ResponseVariant:
    """
    JSON for API clients: a ``.json`` path, a JSON request body, or an
    Accept header ranking application/json above text/html.
    Everything else, including requests without Accept, gets HTML.
    """
    if req.path.endswith(".json"):
        return ResponseVariant.JSON
    if req.mimetype == "application/json":
        return ResponseVariant.JSON
    best = req.accept_mimetypes.best_match(["text/html", "application/json"])
    if best == "application/json":
        return ResponseVariant.JSON
    return ResponseVariant.HTML
