# backend/logging_config.py
import logging, sys
from typing import Optional

def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'backend' logger namespace: stdout handler plus an optional file handler.
    Safe to call on every Streamlit rerun / uvicorn reload.
    """
    logger = logging.getLogger("backend")
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    fmt = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level); console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setLevel(level); fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized.")
    return logger
