"""
import_engine - CSV seed pipeline for the voltage_regulator table.

Public API:
    run_import(file_content, replace_existing=False) → ImportReport
"""

from import_engine.importer import run_import        # noqa: F401
from import_engine.report import ImportReport        # noqa: F401
