# backend/config.py
import os, logging
from typing import Optional

def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default

RECORD_COUNT = _int_env("DSDB_RECORD_COUNT", 10000)
DISPLAY_LIMIT = _int_env("DSDB_DISPLAY_LIMIT", 100)
SEED = _int_env("DSDB_SEED", None)          # unset -> fresh randomness per activation
LOG_LEVEL = getattr(logging, os.getenv("DSDB_LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FILE = os.getenv("DSDB_LOG_FILE") or None
