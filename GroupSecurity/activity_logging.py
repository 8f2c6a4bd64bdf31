"""
ACTIVITY TRACKING
=================
Rotating-file loggers shared by the group security modules.

FLOW:
- get_security_logger() returns a configured logger per concern.
- Submission review and throttling write through it.

WHY:
- Provides traceability for abuse investigations.

HOW:
- Writes key=value log lines to <LOG_DIR>/<file>.log with rotation.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from GroupSecurity.security_config import SECURITY_SETTINGS


_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def get_security_logger(name: str = "security.activity", filename: str = "security.log") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_dir = SECURITY_SETTINGS["LOG_DIR"]
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(log_dir, filename),
        maxBytes=SECURITY_SETTINGS["LOG_MAX_BYTES"],
        backupCount=SECURITY_SETTINGS["LOG_BACKUP_COUNT"],
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger.setLevel(getattr(logging, SECURITY_SETTINGS["LOG_LEVEL"], logging.INFO))
    logger.addHandler(handler)
    return logger
