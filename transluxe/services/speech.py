"""
Speech Collaborator
===================
Speech port plus the fire-and-forget speak action.
"""
import asyncio
from typing import Protocol

from transluxe.services.state_store import PresentationStateStore
from transluxe.utils.logging import get_logger


class SpeechPort(Protocol):
    def speak(self, text: str, lang: str) -> None:
        ...


class LoggingSpeech:
    """Default speech port: records utterances in the application log."""

    def __init__(self):
        self.logger = get_logger().app_logger
        self.utterances = []

    def speak(self, text: str, lang: str) -> None:
        self.utterances.append((text, lang))
        self.logger.info(f"Speak [{lang}]: {text}")


class SpeakAction:
    """Hand the current translation to the speech port without waiting."""

    def __init__(self, store: PresentationStateStore, speech: SpeechPort, loop: asyncio.AbstractEventLoop):
        self.store = store
        self.speech = speech
        self.loop = loop
        self.logger = get_logger().app_logger

    def speak(self) -> bool:
        """Returns False when there is nothing to say."""
        state = self.store.state
        if not state.translated_text:
            return False

        future = self.loop.run_in_executor(
            None, self.speech.speak, state.translated_text, state.target_lang
        )
        future.add_done_callback(self._log_failure)
        return True

    def _log_failure(self, future: asyncio.Future):
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            self.logger.error(f"Speech output failed: {error}")
