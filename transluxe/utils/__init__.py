"""
TransLuxe - Utility Functions
"""
from transluxe.utils.validators import (
    validate_language,
    validate_text,
    validate_input_update
)
from transluxe.utils.logging import (
    LogBuffer,
    AppLogger,
    get_logger,
    log_event
)

__all__ = [
    "validate_language",
    "validate_text",
    "validate_input_update",
    "LogBuffer",
    "AppLogger",
    "get_logger",
    "log_event"
]
