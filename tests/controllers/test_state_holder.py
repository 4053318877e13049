"""Tests for the observable state holder."""

from __future__ import annotations

from flightboard.contracts.state import FeaturedState
from flightboard.controllers.base import StateHolder


class TestStateHolder:
    def test_subscribe_emits_current_value(self):
        holder = StateHolder(FeaturedState())
        seen = []
        holder.subscribe(seen.append)
        assert seen == [FeaturedState()]

    def test_update_replaces_snapshot(self):
        holder = StateHolder(FeaturedState())
        first = holder.value

        holder.update(is_loading=True)

        assert holder.value.is_loading is True
        assert first.is_loading is False

    def test_unsubscribe(self):
        holder = StateHolder(FeaturedState())
        seen = []
        unsubscribe = holder.subscribe(seen.append)
        unsubscribe()
        holder.update(error="x")
        assert len(seen) == 1
        unsubscribe()  # second call is harmless

    def test_failing_listener_does_not_break_update(self):
        holder = StateHolder(FeaturedState())
        seen = []

        def broken(state):
            if state.error:
                raise RuntimeError("render failed")

        holder.subscribe(broken)
        holder.subscribe(seen.append)

        holder.update(error="boom")

        assert holder.value.error == "boom"
        assert seen[-1].error == "boom"
