"""
Translator Session
==================
Wires the store, debounce scheduler, request coordinator and the
clipboard/speech actions onto one asyncio event loop running in a
background thread.

The loop thread is the only thread that touches pipeline state. Flask
request threads go through the thread-safe methods below, which marshal
each call onto the loop and wait for its answer.
"""
import asyncio
import concurrent.futures
import threading
from typing import Any, Callable, FrozenSet, Optional, Tuple

from transluxe.config import config
from transluxe.models.translation import PresentationState
from transluxe.services.clipboard import ClipboardPort, CopyAction, InMemoryClipboard
from transluxe.services.coordinator import RequestCoordinator
from transluxe.services.debounce import DebounceScheduler
from transluxe.services.lingva_client import LingvaClient
from transluxe.services.speech import LoggingSpeech, SpeakAction, SpeechPort
from transluxe.services.state_store import INPUT_FIELDS, PresentationStateStore
from transluxe.utils.logging import get_logger, log_event


class TranslatorSession:
    """One user's live translation pipeline."""

    def __init__(
        self,
        client=None,
        clipboard: ClipboardPort = None,
        speech: SpeechPort = None,
        debounce_seconds: float = None,
        copy_ack_seconds: float = None
    ):
        self.client = client or LingvaClient()
        self.clipboard = clipboard or InMemoryClipboard()
        self.speech = speech or LoggingSpeech()
        self.logger = get_logger().app_logger

        self.loop = asyncio.new_event_loop()
        self.store = PresentationStateStore()
        self.coordinator = RequestCoordinator(self.client, self.store, self.loop)
        self.scheduler = DebounceScheduler(self.coordinator.submit, self.loop, debounce_seconds)
        self.copy_action = CopyAction(self.store, self.clipboard, self.loop, copy_ack_seconds)
        self.speak_action = SpeakAction(self.store, self.speech, self.loop)
        self.store.subscribe(self._on_state_change)

        self._thread: Optional[threading.Thread] = None

    def _on_state_change(self, state: PresentationState, changed: FrozenSet[str]):
        if changed & INPUT_FIELDS:
            self.scheduler.on_input_change(state.snapshot)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "TranslatorSession":
        """Start the event loop thread."""
        if self.running:
            return self
        self._thread = threading.Thread(target=self._run_loop, name="transluxe-loop", daemon=True)
        self._thread.start()
        log_event("Translator session started", 'INFO', 'SESSION')
        return self

    def _run_loop(self):
        asyncio.set_event_loop(self.loop)
        try:
            self.loop.run_forever()
        finally:
            pending = asyncio.all_tasks(self.loop)
            for task in pending:
                task.cancel()
            if pending:
                self.loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            self.loop.close()

    def stop(self):
        """Cancel timers and requests, stop the loop and release the client."""
        if self._thread is None:
            return

        def shutdown():
            self.scheduler.close()
            self.copy_action.close()
            self.coordinator.close()

        # The loop thread may already be gone, e.g. during interpreter exit
        if self.running:
            try:
                self._call(shutdown)
                self.loop.call_soon_threadsafe(self.loop.stop)
            except (RuntimeError, concurrent.futures.TimeoutError) as e:
                self.logger.warning(f"Event loop did not shut down cleanly: {e}")
            self._thread.join(timeout=config.pipeline.call_timeout)
        self._thread = None
        self.client.close()
        log_event("Translator session stopped", 'INFO', 'SESSION')

    def _call(self, fn: Callable, *args, **kwargs) -> Any:
        """Run ``fn`` on the loop thread and return its result."""
        if not self.running:
            raise RuntimeError("Translator session is not running")

        async def runner():
            return fn(*args, **kwargs)

        future = asyncio.run_coroutine_threadsafe(runner(), self.loop)
        return future.result(timeout=config.pipeline.call_timeout)

    def update_input(
        self,
        text: Optional[str] = None,
        source_lang: Optional[str] = None,
        target_lang: Optional[str] = None
    ) -> PresentationState:
        """UI write of the input fields; returns the state right after the write."""
        def apply():
            self.store.set_input(text, source_lang, target_lang)
            return self.store.state

        return self._call(apply)

    def snapshot(self) -> PresentationState:
        return self._call(lambda: self.store.state)

    def versioned_snapshot(self) -> Tuple[int, PresentationState]:
        return self._call(lambda: (self.store.version, self.store.state))

    def copy(self) -> str:
        return self._call(self.copy_action.copy)

    def speak(self) -> bool:
        return self._call(self.speak_action.speak)
