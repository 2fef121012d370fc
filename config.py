"""
JLCREG - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR       = Path(__file__).resolve().parent
CSV_SEED_PATH  = Path(os.environ.get("JLCREG_CSV_SEED", BASE_DIR / "voltage_regulators.csv"))

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("JLCREG_DB", f"sqlite:///{BASE_DIR / 'jlcreg.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("JLCREG_HOST", "0.0.0.0")
PORT   = int(os.environ.get("JLCREG_PORT", "5000"))
DEBUG  = os.environ.get("JLCREG_DEBUG", "0") == "1"
SECRET = os.environ.get("JLCREG_SECRET", "jlcreg-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("JLCREG_LOG_LEVEL", "INFO").upper()

# ── Listing ────────────────────────────────────────────────────────────
LIST_LIMIT = 100
PAGE_TITLE = "JLCPCB Voltage Regulator Search"
