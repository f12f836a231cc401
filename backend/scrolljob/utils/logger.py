import json
import logging
import sys
from typing import Optional
from scrolljob.config import settings

class ContextFormatter(logging.Formatter):
    """Appends the structured `context` passed via `extra` as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            line = f"{line} {json.dumps(context, default=str, ensure_ascii=False)}"
        return line

def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Logger setup utility"""
    logger = logging.getLogger(name)

    if not logger.handlers:  # avoid duplicate handlers
        logger.setLevel(level or logging.getLevelName(settings.LOG_LEVEL.upper()))

        console_handler = logging.StreamHandler(sys.stdout)

        formatter = ContextFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger

# Default loggers
app_logger = setup_logger("app")
auth_logger = setup_logger("auth")
db_logger = setup_logger("db")
