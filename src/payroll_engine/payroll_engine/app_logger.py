import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER_NAME = "payroll_engine"


def _level(name: Optional[str]) -> int:
    return getattr(logging, str(name or "INFO").upper(), logging.INFO)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger once; env PAYROLL_LOG_LEVEL wins over ``level``."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_level(os.getenv("PAYROLL_LOG_LEVEL") or level))

    # Avoid duplicate console handlers when create_app() runs more than once;
    # FileHandler and capture handlers subclass StreamHandler, so match the exact type
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)

    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Child of the package logger; accepts a module ``__name__``."""
    base = logging.getLogger(ROOT_LOGGER_NAME)
    if not name:
        return base
    # "src.payroll_engine.payroll_engine.fines.policy" -> "fines.policy"
    marker = ROOT_LOGGER_NAME + "."
    if marker in name:
        name = name.rsplit(marker, 1)[1]
    return base.getChild(name)
