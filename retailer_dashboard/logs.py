"""Structured JSON logging shared by the dashboard modules."""

from __future__ import annotations

import json
import logging

from retailer_dashboard.config import log_level


class JsonLogFormatter(logging.Formatter):
    """Simple JSON log formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        if hasattr(record, "extra") and isinstance(record.extra, dict):
            payload.update(record.extra)
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    level = getattr(logging, log_level(), logging.INFO)
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    return logger
