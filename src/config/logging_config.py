import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar
from src.config.settings import Config

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default="NO Correlation ID"
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "NO Correlation ID"
        return super().format(record)


_configured = False


def setup_logging(level: str = "INFO", log_file: str | None = None):
    global _configured
    root = logging.getLogger()
    # Set root to WARNING to avoid noise from uvicorn, prisma, etc.
    root.setLevel(logging.WARNING)

    if not _configured:
        formatter = SafeFormatter(Config.LOG_FORMAT)
        logger_handler = logging.StreamHandler(sys.stdout)
        logger_handler.setFormatter(formatter)
        logger_handler.addFilter(CorrelationIdFilter())
        root.addHandler(logger_handler)

        # Set up file logging if log_file provided with rotation
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setFormatter(formatter)
            file_handler.addFilter(CorrelationIdFilter())
            root.addHandler(file_handler)
        _configured = True

    # Everything under src logs at the configured level
    logging.getLogger("src").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("src").info(f"Logging is set up: level={level}, log_file={log_file or '-'}")

    return root
