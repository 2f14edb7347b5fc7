from .log_config import get_logger, logging_manager
from .log_decorators import log_infrastructure_operation

__all__ = ["get_logger", "logging_manager", "log_infrastructure_operation"]
