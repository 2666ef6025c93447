"""
Clipboard Collaborator
======================
Clipboard port plus the copy action with its acknowledgment window.
"""
import asyncio
from typing import Optional, Protocol

from transluxe.config import config
from transluxe.services.state_store import PresentationStateStore
from transluxe.utils.logging import get_logger


class ClipboardPort(Protocol):
    def write_text(self, text: str) -> None:
        ...


class InMemoryClipboard:
    """Keeps the last copied text; used when no system clipboard is attached."""

    def __init__(self):
        self.text: Optional[str] = None

    def write_text(self, text: str) -> None:
        self.text = text


class CopyAction:
    """Copy the current translation and flag ``is_copied`` for a short window."""

    def __init__(
        self,
        store: PresentationStateStore,
        clipboard: ClipboardPort,
        loop: asyncio.AbstractEventLoop,
        ack_seconds: float = None
    ):
        self.store = store
        self.clipboard = clipboard
        self.loop = loop
        self.ack_seconds = ack_seconds if ack_seconds is not None else config.pipeline.copy_ack_seconds
        self.logger = get_logger().app_logger
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    def copy(self) -> str:
        """Write translated_text to the clipboard; returns what was copied."""
        text = self.store.state.translated_text
        self.clipboard.write_text(text)
        self.store.set_copied(True)

        # A repeated copy restarts the window
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        self._reset_handle = self.loop.call_later(self.ack_seconds, self._reset)

        self.logger.debug(f"Copied {len(text)} chars to clipboard")
        return text

    def _reset(self):
        self._reset_handle = None
        self.store.set_copied(False)

    def close(self):
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
