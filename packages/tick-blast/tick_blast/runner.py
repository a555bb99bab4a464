"""TickRunner - fixed-period timer that drives a BlastEngine."""
from __future__ import annotations

import threading
import time
from typing import Any, Mapping

from loguru import logger

from tick_blast.config import BlastOptions
from tick_blast.engine import BlastEngine
from tick_blast.types import Pattern


class TickRunner:
    """Calls engine.tick() once per period on a background thread.

    At most one timer is live at a time: every lifecycle call stops and joins
    the running thread before the engine is reset and a new thread starts.
    Options and patterns are validated before the timer is touched, so a
    rejected round leaves the current one ticking.
    """

    def __init__(self, engine: BlastEngine, period: float | None = None) -> None:
        self._engine = engine
        self._period = period if period is not None else engine.clock.period
        if self._period <= 0:
            raise ValueError("period must be positive")
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()
        self._lifecycle = threading.Lock()

    @property
    def engine(self) -> BlastEngine:
        return self._engine

    @property
    def period(self) -> float:
        return self._period

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start_round(self, options: BlastOptions | Mapping[str, Any] | None = None) -> None:
        plan = self._engine.plan_start_round(options)
        with self._lifecycle:
            self._halt()
            self._engine.begin_round(*plan)
            self._launch()

    def restart_round(self) -> None:
        with self._lifecycle:
            self._halt()
            self._engine.restart_round()
            self._launch()

    def new_round(
        self,
        options: BlastOptions | Mapping[str, Any] | None = None,
        pattern: Pattern | None = None,
    ) -> None:
        plan = self._engine.plan_new_round(options, pattern)
        with self._lifecycle:
            self._halt()
            self._engine.begin_round(*plan)
            self._launch()

    def stop(self) -> None:
        with self._lifecycle:
            self._halt()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the round finishes. Returns False on timeout."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _launch(self) -> None:
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._loop, args=(self._stop,), name="tick-blast-timer", daemon=True,
        )
        logger.debug("Timer started (period={}s)", self._period)
        self._thread.start()

    def _halt(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        logger.debug("Timer stopped")

    def _loop(self, stop: threading.Event) -> None:
        # Sleep first: ticks fire one period after the round starts.
        deadline = time.monotonic() + self._period
        while not stop.wait(max(0.0, deadline - time.monotonic())):
            if self._engine.tick() is None:
                break
            deadline += self._period
