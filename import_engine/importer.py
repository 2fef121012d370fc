"""
import_engine.importer - Load a regulator CSV into the database.

All accepted rows are committed together; a database error rolls the
whole batch back and marks the report aborted.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from db.engine import get_session
from import_engine.csv_parser import HeaderError, open_rows
from import_engine.row_processor import RowProcessor, RowError
from import_engine.report import ImportReport

logger = logging.getLogger(__name__)


def run_import(
    file_content: str | bytes,
    *,
    replace_existing: bool = False,
) -> ImportReport:
    """
    Import a CSV blob into the voltage_regulator table.

    replace_existing overwrites rows whose LCSC number is already stored;
    otherwise such rows are rejected.
    """
    report = ImportReport()
    try:
        rows = open_rows(file_content)
    except HeaderError as exc:
        report.abort(str(exc))
        return report

    session = get_session()
    processor = RowProcessor()

    try:
        for line, row in rows:
            report.total_rows += 1
            try:
                session.add(processor.process(session, row, replace_existing))
                session.flush()
                report.imported += 1
            except RowError as exc:
                logger.warning(f"Line {line} rejected: {exc}")
                report.reject(line, str(exc))
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error(f"Import rolled back: {exc}")
        report.abort(f"Fatal import error: {exc}")
    finally:
        session.close()

    logger.info(f"Import {report.summary()}")
    return report
