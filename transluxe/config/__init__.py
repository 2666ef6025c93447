"""
TransLuxe - Configuration Module
"""
from transluxe.config.settings import Config, config
from transluxe.config.constants import (
    SUPPORTED_LANGUAGES,
    FailureReason,
    ERROR_MESSAGE,
    SOFT_FAILURE_MESSAGE
)

__all__ = [
    "Config",
    "config",
    "SUPPORTED_LANGUAGES",
    "FailureReason",
    "ERROR_MESSAGE",
    "SOFT_FAILURE_MESSAGE"
]
