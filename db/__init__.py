"""
db - Database layer.

Public API:
    init_db()          → create engine + tables
    get_session()      → new Session
    VoltageRegulator   → ORM model for the voltage_regulator table
"""

from db.engine import init_db, get_session          # noqa: F401
from db.models import Base, VoltageRegulator        # noqa: F401
