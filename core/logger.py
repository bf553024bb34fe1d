# core/logger.py
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.config import LOG_FILE, LOG_LEVEL

def setup_logger(log_file: str = LOG_FILE, max_bytes: int = 5_000_000, backup_count: int = 3,
                 level: str = LOG_LEVEL) -> logging.Logger:
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))
    # streamlit reruns the script on every interaction
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger
    Path(log_file).parent.mkdir(exist_ok=True, parents=True)
    handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
