"""
Logging configuration for keyqueue loggers.
"""

import logging
import logging.config
from typing import Any, Dict, Optional


class QueueKeyFilter(logging.Filter):
    """Supply a queue_key attribute for records logged without one."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Default the queue key so the formatter never fails on it."""
        if not hasattr(record, "queue_key"):
            record.queue_key = "-"
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the keyqueue namespace."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "queue_key_filter": {
                "()": QueueKeyFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - [%(queue_key)s] %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["queue_key_filter"]
            }
        },
        "loggers": {
            "keyqueue": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        }
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the keyqueue logging configuration, defaulting to the configured level."""
    if level is None:
        from keyqueue.config import get_config

        config = get_config()
        level = "DEBUG" if config.debug else config.log_level
    logging.config.dictConfig(get_logging_config(level.upper()))
