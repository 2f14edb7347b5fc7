"""
Logging decorators for AWS collaborator operations.
Provides structured, context-rich, and secure logging around adapter calls.
"""
import functools
import inspect
import logging
import time
import traceback
import uuid
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Set

from serverless_tasks.config.settings import get_settings
from .log_config import get_logger


# Default sensitive fields blacklist
DEFAULT_SENSITIVE_FIELDS: Set[str] = {
    'password', 'secret', 'token', 'api_key', 'access_key',
    'credentials', 'session_token', 'private_key', 'auth'
}


def _sanitize_sensitive_data(data: Any, blacklist: Set[str]) -> Any:
    """
    Recursively sanitize sensitive data from logs.
    Replaces values of keys matching sensitive fields with [REDACTED].

    Args:
        data: Data to sanitize (dict, list, dataclass, etc.)
        blacklist: Set of sensitive field names

    Returns:
        Sanitized data with sensitive fields masked
    """
    if is_dataclass(data) and not isinstance(data, type):
        return _sanitize_sensitive_data(asdict(data), blacklist)
    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            if any(sensitive in str(key).lower() for sensitive in blacklist):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = _sanitize_sensitive_data(value, blacklist)
        return sanitized
    elif isinstance(data, (list, tuple)):
        return [_sanitize_sensitive_data(item, blacklist) for item in data]
    elif isinstance(data, bytes):
        return f"[BINARY_DATA_{len(data)}_BYTES]"
    else:
        return data


def _build_operation_context(
    operation: str,
    method_name: str,
    component_name: str
) -> Dict[str, Any]:
    """Build base context for operation logging."""
    settings = get_settings()
    return {
        "component": component_name,
        "operation": operation,
        "method": method_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "service": settings.service_name,
        "aws_region": settings.aws_region,
        "operation_id": f"op_{uuid.uuid4().hex[:8]}"
    }


def log_infrastructure_operation(
    operation: str,
    level: str = "INFO",
    include_args: bool = False,
    include_result: bool = True,
    include_performance: bool = True,
    sensitive_fields: Optional[Set[str]] = None
) -> Callable:
    """
    Decorator for adapter methods that call managed AWS services.

    Logs the start, completion or failure of the wrapped method with timing
    metrics. Exceptions are logged and re-raised unchanged.

    Args:
        operation: Business operation name
        level: Logging level
        include_args: Whether to log function arguments
        include_result: Whether to log operation result
        include_performance: Whether to log timing metrics
        sensitive_fields: Additional sensitive fields to blacklist

    Returns:
        Decorated function with automatic structured logging
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            component_name = f"{func.__module__}.{self.__class__.__name__}"
            logger = get_logger(component_name)

            blacklist = DEFAULT_SENSITIVE_FIELDS.copy()
            if sensitive_fields:
                blacklist.update(sensitive_fields)

            context = _build_operation_context(operation, func.__name__, component_name)

            if include_args:
                bound_args = inspect.signature(func).bind(self, *args, **kwargs)
                bound_args.apply_defaults()
                args_dict = {k: v for k, v in bound_args.arguments.items() if k != 'self'}
                context["arguments"] = _sanitize_sensitive_data(args_dict, blacklist)

            start_time = time.perf_counter()
            log_level = getattr(logging, level.upper(), logging.INFO)

            logger.log(log_level, f"Starting {operation}", extra={"extra_fields": {**context, "status": "started"}})

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000

                error_context = context.copy()
                error_context.update({
                    "status": "failed",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                    "duration_ms": round(duration_ms, 2)
                })

                if get_settings().environment == "development":
                    error_context["stack_trace"] = traceback.format_exc()

                logger.error(f"Failed {operation}", extra={"extra_fields": error_context})
                raise

            success_context = context.copy()
            success_context["status"] = "completed"

            if include_performance:
                success_context["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)

            if include_result and result is not None:
                success_context["result"] = _sanitize_sensitive_data(result, blacklist)
                success_context["result_type"] = type(result).__name__
                if hasattr(result, '__len__') and not isinstance(result, str):
                    success_context["result_size"] = len(result)

            logger.log(log_level, f"Completed {operation}", extra={"extra_fields": success_context})
            return result

        return wrapper
    return decorator
