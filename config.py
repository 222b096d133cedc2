"""
LabWhere - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR    = Path(__file__).resolve().parent
ENVIRONMENT = os.environ.get("LABWHERE_ENV", "development")
DB_DIR      = Path(os.environ.get("LABWHERE_DB_DIR", BASE_DIR))

# ── Database ───────────────────────────────────────────────────────────
# One SQLite file per environment unless a full URL is given
DB_URL = os.environ.get("LABWHERE_DB", f"sqlite:///{DB_DIR / f'{ENVIRONMENT}.db'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST  = os.environ.get("LABWHERE_HOST", "127.0.0.1")
PORT  = int(os.environ.get("LABWHERE_PORT", "3000"))
DEBUG = os.environ.get("LABWHERE_DEBUG", "0") == "1"

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL  = os.environ.get("LABWHERE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# ── Locations ──────────────────────────────────────────────────────────
# Generate lw-<name>-<id> barcodes for locations created without one
AUTO_LOCATION_BARCODES = os.environ.get("LABWHERE_AUTO_BARCODES", "1") == "1"
UNKNOWN_LOCATION_NAME    = "UNKNOWN"
UNKNOWN_LOCATION_BARCODE = "lw-unknown"
UNKNOWN_LOCATION_TYPE    = "Unknown"

# ── Pagination ─────────────────────────────────────────────────────────
API_MAX_LIMIT     = 1000
API_DEFAULT_LIMIT = 100
