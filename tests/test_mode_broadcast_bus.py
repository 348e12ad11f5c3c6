"""Behavior-focused tests for ModeBroadcastBus."""

from unittest.mock import MagicMock

import pytest

from placy_proximity.adapters.page.broadcasters import ModeBroadcastBus
from placy_proximity.domain.models import TravelMode, TravelModeChanged


class TestSetMode:
    """Tests for mode selection and notification."""

    def test_when_mode_unchanged_then_subscribers_not_invoked(self) -> None:
        """Given walk is selected, when setting walk, then no handler runs."""
        bus = ModeBroadcastBus(TravelMode.WALK)
        handler = MagicMock()
        bus.subscribe(handler)

        bus.set_mode(TravelMode.WALK)

        handler.assert_not_called()

    def test_when_mode_changes_then_handler_invoked_once_with_mode(self) -> None:
        """Given a subscriber, when setting drive, then it is called exactly once with drive."""
        bus = ModeBroadcastBus()
        handler = MagicMock()
        bus.subscribe(handler)

        bus.set_mode(TravelMode.DRIVE)

        handler.assert_called_once_with(
            TravelModeChanged(mode=TravelMode.DRIVE, previous_mode=TravelMode.WALK)
        )
        assert bus.current_mode is TravelMode.DRIVE

    def test_when_mode_given_as_string_then_accepted(self) -> None:
        """Given the string 'bike', when setting, then bike is selected."""
        bus = ModeBroadcastBus("walk")

        bus.set_mode("bike")

        assert bus.current_mode is TravelMode.BIKE

    def test_when_mode_unknown_then_raises_value_error(self) -> None:
        """Given an unknown mode, when setting, then ValueError and state unchanged."""
        bus = ModeBroadcastBus()

        with pytest.raises(ValueError):
            bus.set_mode("teleport")

        assert bus.current_mode is TravelMode.WALK

    def test_when_initialized_then_uses_configured_default(self) -> None:
        """Given a bike default, when created, then bike is current."""
        assert ModeBroadcastBus(TravelMode.BIKE).current_mode is TravelMode.BIKE

    def test_when_handlers_registered_then_notified_in_registration_order(self) -> None:
        """Given three subscribers, when mode changes, then they run in subscription order."""
        bus = ModeBroadcastBus()
        calls: list[str] = []
        for name in ("timeline", "selector", "map"):
            bus.subscribe(lambda event, name=name: calls.append(name))

        bus.set_mode(TravelMode.BIKE)

        assert calls == ["timeline", "selector", "map"]

    def test_when_handler_fails_then_later_handlers_still_notified(self) -> None:
        """Given a failing first handler, when mode changes, then the second still runs."""
        bus = ModeBroadcastBus()
        failing = MagicMock(side_effect=RuntimeError("widget gone"))
        healthy = MagicMock()
        bus.subscribe(failing)
        bus.subscribe(healthy)

        bus.set_mode(TravelMode.DRIVE)

        failing.assert_called_once()
        healthy.assert_called_once()
        assert bus.current_mode is TravelMode.DRIVE

    def test_when_handler_sets_mode_then_change_applied_after_current_pass(self) -> None:
        """Given a handler switching bike to drive, when setting bike, then no interleaving."""
        bus = ModeBroadcastBus()
        seen: list[tuple[str, TravelMode]] = []

        def redirecting(event: TravelModeChanged) -> None:
            seen.append(("redirecting", event.mode))
            if event.mode is TravelMode.BIKE:
                bus.set_mode(TravelMode.DRIVE)

        def recording(event: TravelModeChanged) -> None:
            seen.append(("recording", event.mode))

        bus.subscribe(redirecting)
        bus.subscribe(recording)

        bus.set_mode(TravelMode.BIKE)

        assert seen == [
            ("redirecting", TravelMode.BIKE),
            ("recording", TravelMode.BIKE),
            ("redirecting", TravelMode.DRIVE),
            ("recording", TravelMode.DRIVE),
        ]
        assert bus.current_mode is TravelMode.DRIVE


class TestSubscribe:
    """Tests for subscription management."""

    def test_when_unsubscribed_then_handler_no_longer_invoked(self) -> None:
        """Given an unsubscribed handler, when mode changes, then it is not called."""
        bus = ModeBroadcastBus()
        handler = MagicMock()
        unsubscribe = bus.subscribe(handler)

        unsubscribe()
        bus.set_mode(TravelMode.BIKE)

        handler.assert_not_called()
        assert bus.subscriber_count == 0

    def test_when_unsubscribed_twice_then_no_error(self) -> None:
        """Given an unsubscribe callable, when called twice, then nothing breaks."""
        bus = ModeBroadcastBus()
        unsubscribe = bus.subscribe(MagicMock())

        unsubscribe()
        unsubscribe()

        assert bus.subscriber_count == 0

    def test_when_subscribed_after_change_then_only_later_changes_seen(self) -> None:
        """Given a late subscriber, when mode changes again, then it sees only the later change."""
        bus = ModeBroadcastBus()
        bus.set_mode(TravelMode.BIKE)
        handler = MagicMock()
        bus.subscribe(handler)

        bus.set_mode(TravelMode.DRIVE)

        handler.assert_called_once()
        assert handler.call_args.args[0].mode is TravelMode.DRIVE
