"""
Translation Data Models
=======================
Core data structures for the live translation pipeline.
"""
from dataclasses import dataclass, asdict
from typing import Optional, Union
from transluxe.config.constants import FailureReason


@dataclass(frozen=True)
class InputSnapshot:
    """The three user-controlled fields at one instant."""
    text: str
    source_lang: str
    target_lang: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class TranslationRequest:
    """A single outbound translation, numbered in submission order."""
    text: str
    source_lang: str
    target_lang: str
    sequence_id: int

    @classmethod
    def from_snapshot(cls, snapshot: InputSnapshot, sequence_id: int) -> "TranslationRequest":
        return cls(
            text=snapshot.text,
            source_lang=snapshot.source_lang,
            target_lang=snapshot.target_lang,
            sequence_id=sequence_id
        )


@dataclass(frozen=True)
class Success:
    """Backend returned a translation (possibly the soft-failure text)."""
    translated_text: str


@dataclass(frozen=True)
class Failure:
    """Transport or payload failure."""
    reason: FailureReason
    detail: str = ""


TranslationResult = Union[Success, Failure]


@dataclass(frozen=True)
class PresentationState:
    """Everything the UI renders."""
    input_text: str = ""
    translated_text: str = ""
    source_lang: str = "en"
    target_lang: str = "ar"
    is_loading: bool = False
    last_error: Optional[FailureReason] = None
    is_copied: bool = False

    @property
    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(self.input_text, self.source_lang, self.target_lang)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = asdict(self)
        result['last_error'] = self.last_error.value if self.last_error else None
        return result
