#!/usr/bin/env python3
"""
JLCREG - JLCPCB Voltage Regulator Search
========================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging

from flask import Flask
from sqlalchemy import func, select

import config
from db import init_db, get_session, VoltageRegulator
from api import api_bp
from ui import ui_bp


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(
        __name__,
        template_folder=str(config.BASE_DIR / "templates"),
    )
    app.secret_key = config.SECRET

    # ── Initialise database ─────────────────────────────────────────
    init_db(db_url or config.DB_URL)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)
    app.register_blueprint(ui_bp)

    return app


def _seed_if_empty():
    """Auto-import seed CSV when the regulator table is empty."""
    session = get_session()
    try:
        count = session.scalar(select(func.count()).select_from(VoltageRegulator))
    finally:
        session.close()

    if count:
        print(f"\n  Database has {count} regulators.")
        return

    if not config.CSV_SEED_PATH.exists():
        print(f"\n  No seed CSV at {config.CSV_SEED_PATH} - starting empty.")
        return

    print(f"\n  Database empty → auto-importing {config.CSV_SEED_PATH.name} …")
    from import_engine import run_import

    with open(config.CSV_SEED_PATH, "rb") as fh:
        report = run_import(fh.read())

    print(f"  Done: {report.summary()}")
    if report.rejected:
        print("  First rejected lines (max 10):")
        for rej in report.rejected[:10]:
            print(f"    Line {rej.line}: {rej.reason}")


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 56)
    print(f"  {config.PAGE_TITLE}")
    print("=" * 56)

    app = create_app()
    print(f"  Database: {config.DB_URL}")
    _seed_if_empty()

    print(f"\n  http://{config.HOST}:{config.PORT}/voltage_regulators/list")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
