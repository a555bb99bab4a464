"""In-process notification bus for engine cues.

Signals published during a tick are queued and delivered when the engine
flushes at the end of that tick, so handlers always observe the finished
tick state.
"""
from __future__ import annotations

from typing import Any, Callable

from loguru import logger

_Handler = Callable[[str, dict[str, Any]], None]

ROUND_STARTED = "round_started"
GLYPH_LIT = "glyph_lit"
BLAST_FORMED = "blast_formed"
ORB_SPAWNED = "orb_spawned"
ORB_TANKED = "orb_tanked"
ORB_EXPIRED = "orb_expired"
BLAST_HIT = "blast_hit"
BLAST_PASSED = "blast_passed"
ROUND_ENDED = "round_ended"

SIGNALS = (
    ROUND_STARTED, GLYPH_LIT, BLAST_FORMED, ORB_SPAWNED, ORB_TANKED,
    ORB_EXPIRED, BLAST_HIT, BLAST_PASSED, ROUND_ENDED,
)


class SignalBus:
    """Per-tick queue of engine cues.

    The engine publishes while it holds its tick lock and flushes once the
    tick is complete, so every handler runs outside the lock and may start a
    new round. Subscribing to a name outside SIGNALS raises KeyError.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        if signal_name not in SIGNALS:
            raise KeyError(signal_name)
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        batch = self._queue
        self._queue = []
        for signal_name, data in batch:
            logger.trace("signal {} {}", signal_name, data)
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
