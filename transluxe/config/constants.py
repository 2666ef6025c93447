"""
Constants and Enums for TransLuxe
"""
from enum import Enum

# Supported languages with their display names
SUPPORTED_LANGUAGES = {
    'en': 'English',
    'es': 'Spanish',
    'fr': 'French',
    'de': 'German',
    'ar': 'Arabic',
}

# Shown in place of a translation when the backend call fails
ERROR_MESSAGE = "An error occurred during translation."

# Shown when the backend answers but carries no translation
SOFT_FAILURE_MESSAGE = "Translation failed."


class FailureReason(str, Enum):
    """Why a translation request failed."""
    NETWORK_ERROR = "network_error"
    BAD_RESPONSE = "bad_response"
