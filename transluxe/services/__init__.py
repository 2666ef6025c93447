"""
TransLuxe - Services
"""
from transluxe.services.lingva_client import LingvaClient
from transluxe.services.state_store import PresentationStateStore
from transluxe.services.debounce import DebounceScheduler
from transluxe.services.coordinator import RequestCoordinator
from transluxe.services.clipboard import CopyAction, InMemoryClipboard
from transluxe.services.speech import SpeakAction, LoggingSpeech
from transluxe.services.session import TranslatorSession

__all__ = [
    "LingvaClient",
    "PresentationStateStore",
    "DebounceScheduler",
    "RequestCoordinator",
    "CopyAction",
    "InMemoryClipboard",
    "SpeakAction",
    "LoggingSpeech",
    "TranslatorSession"
]
