"""JSON logs on stdout for the savings_qualifier package"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

PACKAGE_LOGGER = "savings_qualifier"


class QualifierJsonFormatter(JsonFormatter):
    """Adds timestamp, level and app name to every record"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["app"] = "gfiber-savings-qualifier"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach the JSON handler once; Streamlit reruns the script on every click.

    Only the package logger gets the handler; the root logger is left to Streamlit.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    if not any(isinstance(h.formatter, QualifierJsonFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(QualifierJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
        logger.addHandler(handler)
    return logger
