"""
Request/Response Schemas
========================
Validation schemas for API requests and responses.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from transluxe.utils.validators import validate_input_update


@dataclass
class InputUpdateRequest:
    """Request schema for the input endpoint. Missing fields stay unchanged."""
    text: Optional[Any] = None
    source_lang: Optional[Any] = None
    target_lang: Optional[Any] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> "InputUpdateRequest":
        data = data or {}
        return cls(
            text=data.get('text'),
            source_lang=data.get('source_lang'),
            target_lang=data.get('target_lang')
        )

    @property
    def is_empty(self) -> bool:
        return self.text is None and self.source_lang is None and self.target_lang is None

    def validate(self) -> List[str]:
        """Validate the request and return list of errors."""
        if self.is_empty:
            return ["At least one of text, source_lang, target_lang is required"]
        _, errors = validate_input_update(self.text, self.source_lang, self.target_lang)
        return errors


@dataclass
class HealthStatus:
    """Health check response."""
    status: str
    backend_connected: bool
    version: str

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'backend': 'connected' if self.backend_connected else 'disconnected',
            'version': self.version,
        }
