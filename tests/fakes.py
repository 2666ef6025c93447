"""
Test doubles shared by the pipeline and API tests.
"""
import asyncio
import threading
import time

from transluxe.models.translation import Success


class GatedClient:
    """
    Stand-in for LingvaClient.

    Echoes ``[target] text`` unless a canned result is registered. A text
    with a gate blocks in ``translate`` until the gate is set, which lets a
    test decide the order in which responses come back.
    """

    def __init__(self, results=None):
        self.results = dict(results or {})
        self.calls = []
        self.gates = {}
        self.healthy = True
        self.closed = False
        self._lock = threading.Lock()

    def gate(self, text: str) -> threading.Event:
        event = threading.Event()
        self.gates[text] = event
        return event

    def translate(self, text, source_lang, target_lang):
        with self._lock:
            self.calls.append((text, source_lang, target_lang))
        gate = self.gates.get(text)
        if gate is not None:
            gate.wait(timeout=5)
        result = self.results.get(text, Success(f"[{target_lang}] {text}"))
        if isinstance(result, Exception):
            raise result
        return result

    def is_healthy(self):
        return self.healthy

    def close(self):
        self.closed = True


async def wait_until(predicate, timeout: float = 2.0, interval: float = 0.01):
    """Poll ``predicate`` on the running loop until it holds."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(interval)


def poll_until(predicate, timeout: float = 2.0, interval: float = 0.01):
    """Blocking variant of ``wait_until`` for code outside the loop."""
    deadline = time.monotonic() + timeout
    while True:
        value = predicate()
        if value:
            return value
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached in time")
        time.sleep(interval)
