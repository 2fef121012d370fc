"""
db.engine - One process-wide engine for the regulator catalog.

The listing only reads; the seed importer is the sole writer.  Any
SQLAlchemy URL works, SQLite files get WAL so a running server keeps
reading while a seed import commits.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from db.models import Base

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def _enable_wal(dbapi_conn, _rec):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA journal_mode=WAL")
    cur.execute("PRAGMA busy_timeout=5000")
    cur.close()


def init_db(db_url: str) -> Engine:
    """(Re)bind the module to db_url and make sure voltage_regulator exists."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    engine = create_engine(db_url)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_wal)

    Base.metadata.create_all(engine)
    _engine = engine
    _SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)
    logger.debug(f"Catalog bound to {engine.url.render_as_string(hide_password=True)}")
    return engine


def get_session() -> Session:
    """Return a new session.  Caller is responsible for .close()."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialised - call init_db() first")
    return _SessionLocal()
