"""
Request Coordinator
===================
Owns the current request identity and turns completions into state.

Responses can come back in any order. Each submit takes the next sequence
id and only the completion carrying the latest id may touch the store;
everything older is dropped on arrival.
"""
import asyncio
from typing import Set

from transluxe.config import FailureReason, ERROR_MESSAGE
from transluxe.models.translation import (
    InputSnapshot,
    TranslationRequest,
    TranslationResult,
    Success,
    Failure
)
from transluxe.services.state_store import PresentationStateStore
from transluxe.utils.logging import get_logger, log_event


class RequestCoordinator:
    """Sequence-fenced bridge between the debounce scheduler and the client."""

    def __init__(self, client, store: PresentationStateStore, loop: asyncio.AbstractEventLoop):
        self.client = client
        self.store = store
        self.loop = loop
        self.current_sequence_id = 0
        self.logger = get_logger().translation_logger
        self._tasks: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def submit(self, snapshot: InputSnapshot):
        """Start a translation for the snapshot, superseding any earlier one."""
        self.current_sequence_id += 1
        sequence_id = self.current_sequence_id

        if snapshot.is_blank:
            self.store.apply_translation(translated_text="", is_loading=False, last_error=None)
            return

        request = TranslationRequest.from_snapshot(snapshot, sequence_id)
        self.store.apply_translation(is_loading=True, last_error=None)

        log_event(f"Requested {request.source_lang}->{request.target_lang} ({len(request.text)} chars)",
                  'DEBUG', 'TRANSLATE', sequence_id)

        task = self.loop.create_task(self._run(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, request: TranslationRequest):
        result = await self._call_client(request)
        self._complete(request, result)

    async def _call_client(self, request: TranslationRequest) -> TranslationResult:
        try:
            return await self.loop.run_in_executor(
                None,
                self.client.translate,
                request.text,
                request.source_lang,
                request.target_lang
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.error(f"Request #{request.sequence_id} raised: {e}")
            return Failure(FailureReason.NETWORK_ERROR, str(e))

    def _complete(self, request: TranslationRequest, result: TranslationResult):
        if request.sequence_id != self.current_sequence_id:
            log_event(f"Dropped stale result (current #{self.current_sequence_id})",
                      'DEBUG', 'TRANSLATE', request.sequence_id)
            return

        if isinstance(result, Success):
            self.store.apply_translation(translated_text=result.translated_text, is_loading=False)
            log_event(f"Translated {request.source_lang}->{request.target_lang}",
                      'INFO', 'TRANSLATE', request.sequence_id)
        else:
            self.store.apply_translation(
                translated_text=ERROR_MESSAGE,
                is_loading=False,
                last_error=result.reason
            )
            log_event(f"Failed: {result.reason.value}", 'ERROR', 'TRANSLATE', request.sequence_id)

    async def wait_idle(self):
        """Wait until every outstanding request has completed."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self):
        """Cancel outstanding requests."""
        for task in list(self._tasks):
            task.cancel()
