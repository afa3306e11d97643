"""Tests for the event bus."""

from unittest.mock import MagicMock

import pytest

from hardwood.events import EventBus, PhaseChangedEvent, PlayerSignedEvent, TradeCompletedEvent


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


class TestSubscribe:
    """Tests for typed subscriptions."""

    def test_handler_receives_matching_event(self, bus):
        """A typed handler gets events of its type only."""
        handler = MagicMock()
        bus.subscribe(TradeCompletedEvent, handler)

        event = TradeCompletedEvent(trade_id="trade-1-1")
        bus.emit(event)
        bus.emit(PlayerSignedEvent(player_id="p1"))

        handler.assert_called_once_with(event)

    def test_multiple_handlers(self, bus):
        """Every handler for a type is called."""
        first, second = MagicMock(), MagicMock()
        bus.subscribe(PlayerSignedEvent, first)
        bus.subscribe(PlayerSignedEvent, second)

        bus.emit(PlayerSignedEvent())

        first.assert_called_once()
        second.assert_called_once()

    def test_wildcard_runs_after_typed(self, bus):
        """Wildcard handlers see everything, after typed handlers."""
        calls = []
        bus.subscribe_all(lambda e: calls.append("all"))
        bus.subscribe(PhaseChangedEvent, lambda e: calls.append("typed"))

        bus.emit(PhaseChangedEvent(previous_phase="preseason", new_phase="regular_season"))
        bus.emit(TradeCompletedEvent())

        assert calls == ["typed", "all", "all"]

    def test_handler_error_propagates(self, bus):
        """A failing handler surfaces to the emitter."""
        bus.subscribe(TradeCompletedEvent, MagicMock(side_effect=RuntimeError("boom")))
        with pytest.raises(RuntimeError, match="boom"):
            bus.emit(TradeCompletedEvent())


class TestUnsubscribe:
    """Tests for removing handlers."""

    def test_unsubscribe(self, bus):
        """Removed handlers are no longer called."""
        handler = MagicMock()
        bus.subscribe(TradeCompletedEvent, handler)
        bus.unsubscribe(TradeCompletedEvent, handler)

        bus.emit(TradeCompletedEvent())
        handler.assert_not_called()

    def test_unsubscribe_unknown_is_noop(self, bus):
        """Removing something never registered does nothing."""
        bus.unsubscribe(TradeCompletedEvent, MagicMock())
        bus.unsubscribe_all(MagicMock())
        assert bus.handler_count() == 0

    def test_unsubscribe_all(self, bus):
        """Wildcard handlers can be removed too."""
        handler = MagicMock()
        bus.subscribe_all(handler)
        bus.unsubscribe_all(handler)

        bus.emit(PlayerSignedEvent())
        handler.assert_not_called()


class TestHandlerCount:
    """Tests for handler bookkeeping."""

    def test_counts(self, bus):
        """Totals include wildcards; per-type counts do not."""
        bus.subscribe(TradeCompletedEvent, MagicMock())
        bus.subscribe(PlayerSignedEvent, MagicMock())
        bus.subscribe_all(MagicMock())

        assert bus.handler_count() == 3
        assert bus.handler_count(TradeCompletedEvent) == 1
        assert bus.handler_count(PhaseChangedEvent) == 0

    def test_clear(self, bus):
        """Clearing removes every handler."""
        bus.subscribe(TradeCompletedEvent, MagicMock())
        bus.subscribe_all(MagicMock())
        bus.clear()
        assert bus.handler_count() == 0
