# backend/agrimarket/core/logger.py

import logging
import json
import os
from logging.handlers import RotatingFileHandler
from datetime import datetime

from agrimarket.core.config import settings

SERVICE_NAME = "agrimarket-backend"

# extras copied onto the JSON line when a log call passes them
EXTRA_FIELDS = (
    "request_id",
    "user_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "traceback",
)


def json_formatter(record):
    log = {
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "level": record.levelname,
        "service": SERVICE_NAME,
        "logger": record.name,
        "message": record.getMessage(),
    }

    for field in EXTRA_FIELDS:
        if hasattr(record, field):
            log[field] = getattr(record, field)

    if record.exc_info and "traceback" not in log:
        log["exception"] = logging.Formatter().formatException(record.exc_info)

    return json.dumps(log, default=str)


class JSONFormatter(logging.Formatter):
    def format(self, record):
        return json_formatter(record)


def configure_logger(name: str = "agrimarket", level: str = None, log_dir: str = None) -> logging.Logger:
    """
    Attach the JSON console handler (and the rotating file handler when a
    log directory is configured). Safe to call more than once.
    """
    level = level or settings.LOG_LEVEL
    log_dir = settings.LOG_DIR if log_dir is None else log_dir

    log = logging.getLogger(name)
    log.setLevel(level)

    if log.handlers:
        return log

    json_f = JSONFormatter()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(json_f)
    log.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "app.json.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(json_f)
        log.addHandler(file_handler)

    return log


logger = configure_logger()
