"""Tests for TickRunner — fixed-period timer around the engine."""
from __future__ import annotations

import time

import pytest

from tick_blast import BlastEngine, BlastOptions, ConfigError, Element, TickRunner

F, S, L = Element.FIRE, Element.SHADOW, Element.LIGHTNING


class TestTickRunner:
    def test_runs_round_to_completion(self) -> None:
        engine = BlastEngine(seed=0)
        runner = TickRunner(engine, period=0.001)
        runner.new_round(BlastOptions(), pattern=(F, S))
        assert runner.wait(timeout=5.0)
        assert engine.finished
        assert engine.clock.tick == len(engine.timeline)
        assert not runner.running

    def test_stop_halts_ticking(self) -> None:
        engine = BlastEngine(seed=0)
        runner = TickRunner(engine, period=0.01)
        runner.start_round(BlastOptions(active_glyphs=6))
        runner.stop()
        assert not runner.running
        frozen = engine.clock.tick
        time.sleep(0.05)
        assert engine.clock.tick == frozen

    def test_restart_replaces_timer(self) -> None:
        engine = BlastEngine(seed=0)
        runner = TickRunner(engine, period=0.001)
        runner.new_round(BlastOptions(), pattern=(F, S))
        runner.restart_round()
        runner.restart_round()
        assert runner.wait(timeout=5.0)
        assert engine.clock.tick == len(engine.timeline)
        assert engine.stats.lifetime.glyph_count == 6

    def test_period_defaults_to_engine_clock(self) -> None:
        engine = BlastEngine(seed=0, period=0.25)
        assert TickRunner(engine).period == 0.25

    def test_invalid_period(self) -> None:
        with pytest.raises(ValueError):
            TickRunner(BlastEngine(seed=0), period=0)

    def test_wait_without_timer(self) -> None:
        assert TickRunner(BlastEngine(seed=0)).wait(timeout=0.1)

    def test_rejected_options_keep_round_ticking(self) -> None:
        engine = BlastEngine(seed=0)
        runner = TickRunner(engine, period=0.05)
        runner.start_round(BlastOptions(active_glyphs=6))
        pattern = engine.pattern
        time.sleep(0.03)
        with pytest.raises(ConfigError):
            runner.start_round({"activeGlyphCount": 9})
        with pytest.raises(ConfigError):
            runner.new_round(pattern=(F, L))
        assert runner.running
        assert engine.pattern == pattern
        assert engine.stats.lifetime.glyph_count == 6
        runner.stop()
