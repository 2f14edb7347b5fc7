"""
Unified logging configuration for the serverless task functions.
Provides singleton pattern to ensure single configuration per container.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from serverless_tasks.config.settings import LambdaSettings, get_settings

LOGGER_NAMESPACE = "serverless-tasks"


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging (CloudWatch friendly)."""

    def __init__(self, service_name: str = LOGGER_NAMESPACE, environment: str = "production"):
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "service": self.service_name,
            "environment": self.environment
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Human-readable formatter for development."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.COLORS.get(record.levelname, '')
        reset_color = self.COLORS['RESET']
        colored_level = f"{level_color}{record.levelname}{reset_color}"

        line = f"{self.formatTime(record)} - {record.name} - {colored_level} - {record.getMessage()}"

        if hasattr(record, 'extra_fields'):
            extra_str = " | ".join(f"{k}={v}" for k, v in record.extra_fields.items())
            line += f" | {extra_str}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line


class LoggingManager:
    """Singleton manager for logging configuration."""

    _instance: Optional['LoggingManager'] = None
    _configured: bool = False

    def __new__(cls) -> 'LoggingManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def configure(self, settings: Optional[LambdaSettings] = None) -> None:
        """Apply logging configuration once; later calls are ignored."""
        if self._configured:
            return

        settings = settings or get_settings()
        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

        if settings.is_production:
            formatter = JSONFormatter(settings.service_name, settings.environment)
        else:
            formatter = DevelopmentFormatter()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        app_logger = logging.getLogger(LOGGER_NAMESPACE)
        app_logger.setLevel(log_level)
        app_logger.addHandler(console_handler)
        app_logger.propagate = False

        self._configure_third_party_loggers()

        self._configured = True

        app_logger.debug("Logging configuration initialized", extra={
            'extra_fields': {
                "environment": settings.environment,
                "log_level": logging.getLevelName(log_level),
                "formatter": "json" if settings.is_production else "development"
            }
        })

    def reset(self) -> None:
        """Drop installed handlers so the next call reconfigures (tests)."""
        app_logger = logging.getLogger(LOGGER_NAMESPACE)
        for handler in list(app_logger.handlers):
            app_logger.removeHandler(handler)
        app_logger.propagate = True
        self._configured = False

    def _configure_third_party_loggers(self) -> None:
        """Configure third-party library loggers to reduce noise."""
        for logger_name in ("boto3", "botocore", "urllib3", "s3transfer"):
            logger = logging.getLogger(logger_name)
            if logger.level < logging.WARNING:
                logger.setLevel(logging.WARNING)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a configured logger instance under the service namespace."""
        self.configure()

        if not name.startswith(LOGGER_NAMESPACE):
            name = f"{LOGGER_NAMESPACE}.{name}"

        return logging.getLogger(name)


# Singleton instance
logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ or component name)

    Returns:
        Configured logger instance under the serverless-tasks namespace

    Example:
        logger = get_logger("S3ObjectStore")
        # Results in logger named: "serverless-tasks.S3ObjectStore"
    """
    return logging_manager.get_logger(name)
