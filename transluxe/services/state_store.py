"""
Presentation State Store
========================
Observable record holding everything the UI renders.

Each field has exactly one writer:
    - the UI collaborator writes input_text, source_lang and target_lang
    - the request coordinator writes translated_text, is_loading and last_error
    - the copy action writes is_copied

Subscribers are notified synchronously, in subscription order, after every
write that actually changes a field.
"""
from dataclasses import replace
from typing import Callable, FrozenSet, List, Optional

from transluxe.config import config, FailureReason
from transluxe.models.translation import PresentationState
from transluxe.utils.logging import get_logger

StateListener = Callable[[PresentationState, FrozenSet[str]], None]

INPUT_FIELDS = frozenset({'input_text', 'source_lang', 'target_lang'})

# Sentinel for "leave this field alone" where None is a legal value
_UNSET = object()


class PresentationStateStore:
    """Passive state holder with change notification."""

    def __init__(self, initial: Optional[PresentationState] = None):
        self._state = initial or PresentationState(
            source_lang=config.pipeline.default_source_lang,
            target_lang=config.pipeline.default_target_lang
        )
        self._listeners: List[StateListener] = []
        self.version = 0
        self.logger = get_logger().app_logger

    @property
    def state(self) -> PresentationState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_input(
        self,
        text: Optional[str] = None,
        source_lang: Optional[str] = None,
        target_lang: Optional[str] = None
    ) -> FrozenSet[str]:
        """UI writer. Fields left as None are unchanged."""
        changes = {}
        if text is not None:
            changes['input_text'] = text
        if source_lang is not None:
            changes['source_lang'] = source_lang
        if target_lang is not None:
            changes['target_lang'] = target_lang
        return self._apply(changes)

    def apply_translation(
        self,
        translated_text: Optional[str] = None,
        is_loading: Optional[bool] = None,
        last_error=_UNSET
    ) -> FrozenSet[str]:
        """Coordinator writer. ``last_error`` may be explicitly set to None."""
        changes = {}
        if translated_text is not None:
            changes['translated_text'] = translated_text
        if is_loading is not None:
            changes['is_loading'] = is_loading
        if last_error is not _UNSET:
            if last_error is not None and not isinstance(last_error, FailureReason):
                raise TypeError(f"last_error must be a FailureReason, got {last_error!r}")
            changes['last_error'] = last_error
        return self._apply(changes)

    def set_copied(self, is_copied: bool) -> FrozenSet[str]:
        """Copy action writer."""
        return self._apply({'is_copied': is_copied})

    def _apply(self, changes: dict) -> FrozenSet[str]:
        changed = frozenset(
            name for name, value in changes.items()
            if getattr(self._state, name) != value
        )
        if not changed:
            return changed

        self._state = replace(self._state, **{name: changes[name] for name in changed})
        self.version += 1
        self._notify(changed)
        return changed

    def _notify(self, changed: FrozenSet[str]):
        state = self._state
        for listener in list(self._listeners):
            try:
                listener(state, changed)
            except Exception as e:
                self.logger.error(f"State listener {listener!r} failed: {e}")
