"""
services - Business-logic layer sitting between the routes and the DB.
"""

from services.regulator_query import RegulatorFilter, RegulatorService   # noqa: F401
