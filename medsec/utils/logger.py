"""
Logging Utilities
Centralized logging configuration for the threat engine
"""

import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any

from medsec.core.config import settings

class CustomFormatter(logging.Formatter):
    def __init__(self):
        super().__init__()
        self.default_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.error_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

    def format(self, record):
        if record.levelno >= logging.ERROR:
            return self.error_formatter.format(record)
        else:
            return self.default_formatter.format(record)

def setup_logging(
    name: str = "medsec",
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_bytes: int = 10485760,
    backup_count: int = 5
) -> logging.Logger:
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger

def log_system_event(
    logger: logging.Logger,
    event_type: str,
    message: str,
    level: str = "INFO",
    extra_data: Optional[Dict[str, Any]] = None
):
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_message = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event_type": event_type,
        "message": message,
        "extra_data": extra_data or {}
    }

    logger.log(log_level, log_message)

def configure_application_logging(app_settings=None) -> logging.Logger:
    app_settings = app_settings or settings
    log_file = None
    if app_settings.log_to_file:
        log_file = str(app_settings.logs_dir / "application.log")

    return setup_logging(
        name="medsec",
        log_level=app_settings.log_level,
        log_file=log_file,
        max_bytes=10485760,
        backup_count=10
    )
