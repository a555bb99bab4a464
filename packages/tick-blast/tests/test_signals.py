"""Tests for SignalBus — queued publish and flush."""
from __future__ import annotations

import pytest

from tick_blast.signals import BLAST_FORMED, GLYPH_LIT, SignalBus


class TestSignalBus:
    def test_publish_waits_for_flush(self) -> None:
        bus = SignalBus()
        received: list[tuple[str, dict]] = []
        bus.subscribe(GLYPH_LIT, lambda name, data: received.append((name, data)))
        bus.publish(GLYPH_LIT, element="fire")
        assert received == []
        assert bus.pending() == 1
        bus.flush()
        assert received == [(GLYPH_LIT, {"element": "fire"})]
        assert bus.pending() == 0

    def test_only_matching_handlers(self) -> None:
        bus = SignalBus()
        glyphs: list[dict] = []
        blasts: list[dict] = []
        bus.subscribe(GLYPH_LIT, lambda n, d: glyphs.append(d))
        bus.subscribe(BLAST_FORMED, lambda n, d: blasts.append(d))
        bus.publish(BLAST_FORMED, safe="ice")
        bus.flush()
        assert glyphs == []
        assert blasts == [{"safe": "ice"}]

    def test_unsubscribe(self) -> None:
        bus = SignalBus()
        received: list[dict] = []

        def handler(name: str, data: dict) -> None:
            received.append(data)

        bus.subscribe(GLYPH_LIT, handler)
        bus.unsubscribe(GLYPH_LIT, handler)
        bus.unsubscribe(GLYPH_LIT, handler)
        bus.publish(GLYPH_LIT)
        bus.flush()
        assert received == []

    def test_clear_drops_queue(self) -> None:
        bus = SignalBus()
        received: list[dict] = []
        bus.subscribe(GLYPH_LIT, lambda n, d: received.append(d))
        bus.publish(GLYPH_LIT)
        bus.clear()
        bus.flush()
        assert received == []

    def test_publish_during_flush_deferred(self) -> None:
        bus = SignalBus()
        order: list[str] = []

        def first(name: str, data: dict) -> None:
            order.append("glyph")
            bus.publish(BLAST_FORMED)

        bus.subscribe(GLYPH_LIT, first)
        bus.subscribe(BLAST_FORMED, lambda n, d: order.append("blast"))
        bus.publish(GLYPH_LIT)
        bus.flush()
        assert order == ["glyph"]
        bus.flush()
        assert order == ["glyph", "blast"]

    def test_unknown_signal(self) -> None:
        with pytest.raises(KeyError):
            SignalBus().subscribe("nope", lambda n, d: None)
