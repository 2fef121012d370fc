"""
import_engine.csv_parser - Open a regulator CSV and check its header.

Headers are matched case-insensitively; columns outside field_map.COLUMNS
are ignored.  A header without the required columns rejects the whole file.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Iterator

from import_engine.field_map import COLUMNS, REQUIRED_COLUMNS

logger = logging.getLogger(__name__)


class HeaderError(Exception):
    """The file cannot be imported at all."""
    pass


def open_rows(raw: str | bytes) -> Iterator[tuple[int, dict]]:
    """
    Validate the header of raw CSV content and return an iterator of
    (line_number, row) pairs; line 1 is the header.
    """
    if isinstance(raw, bytes):
        text = raw.decode("utf-8-sig", errors="replace")
    else:
        text = raw.removeprefix("\ufeff")

    if not text.strip():
        raise HeaderError("CSV has no header row or is empty")

    reader = csv.DictReader(io.StringIO(text))
    headers = [h.strip().lower() for h in reader.fieldnames or ()]

    missing = REQUIRED_COLUMNS - set(headers)
    if missing:
        raise HeaderError(f"Header lacks column(s): {', '.join(sorted(missing))}")

    ignored = sorted(set(headers) - COLUMNS.keys())
    if ignored:
        logger.info(f"Ignoring CSV column(s): {', '.join(ignored)}")

    reader.fieldnames = headers
    return enumerate(reader, start=2)
