from .settings import (
    DEFAULT_MIN_CONFIDENCE,
    LambdaSettings,
    get_settings,
    load_settings,
    parse_min_confidence,
)

__all__ = [
    "DEFAULT_MIN_CONFIDENCE",
    "LambdaSettings",
    "get_settings",
    "load_settings",
    "parse_min_confidence",
]
