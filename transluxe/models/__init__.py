"""
TransLuxe - Data Models
"""
from transluxe.models.translation import (
    InputSnapshot,
    TranslationRequest,
    TranslationResult,
    Success,
    Failure,
    PresentationState
)
from transluxe.models.schemas import (
    InputUpdateRequest,
    HealthStatus
)

__all__ = [
    "InputSnapshot",
    "TranslationRequest",
    "TranslationResult",
    "Success",
    "Failure",
    "PresentationState",
    "InputUpdateRequest",
    "HealthStatus"
]
