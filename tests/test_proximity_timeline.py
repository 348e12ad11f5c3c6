"""Behavior-focused tests for ProximityTimeline."""

import pytest

from placy_proximity.adapters.page.broadcasters import ModeBroadcastBus
from placy_proximity.adapters.page.widgets import ProximityTimeline
from placy_proximity.application.services import TravelTimeEstimator
from placy_proximity.domain.models import Coordinate, TravelMode

ORIGIN = Coordinate(63.4305, 10.3951)
CARD_DATASETS = [
    {"data-poi-id": "bakeri", "data-poi-coords": "[63.4310,10.3970]"},
    {"data-poi-id": "uten-koordinater"},
    {"data-poi-id": "badeland", "data-poi-coords": "[63.44,10.40]", "data-drive-time": "7"},
]


@pytest.fixture
def bus() -> ModeBroadcastBus:
    return ModeBroadcastBus()


def make_timeline(bus: ModeBroadcastBus, origin: Coordinate | None = ORIGIN) -> ProximityTimeline:
    timeline = ProximityTimeline.from_datasets(bus, TravelTimeEstimator(), origin, CARD_DATASETS)
    timeline.attach()
    return timeline


def test_attach_renders_badges_for_current_mode(bus: ModeBroadcastBus) -> None:
    """Given a walk default, when attached, then cards show walking badges."""
    timeline = make_timeline(bus)

    first = timeline.cards[0]
    assert first.minutes == 2
    assert first.badge_text == "2 min til fots"
    assert first.icon == "fa-shoe-prints"
    assert first.badge_visible is True


def test_mode_change_updates_every_card(bus: ModeBroadcastBus) -> None:
    """Given an attached timeline, when drive is selected, then badges switch to driving."""
    timeline = make_timeline(bus)

    bus.set_mode(TravelMode.DRIVE)

    assert timeline.cards[0].badge_text == "1 min bil"
    assert timeline.cards[0].icon == "fa-car"
    assert timeline.cards[2].badge_text == "7 min bil"


def test_precomputed_estimate_only_used_for_its_mode(bus: ModeBroadcastBus) -> None:
    """Given a card with a precomputed drive time, when walking, then the estimate is computed."""
    timeline = make_timeline(bus)

    assert timeline.cards[2].minutes != 7
    assert timeline.cards[2].minutes == TravelTimeEstimator().estimate_between(
        ORIGIN, Coordinate(63.44, 10.40), TravelMode.WALK
    )


def test_card_without_coordinates_is_skipped(bus: ModeBroadcastBus) -> None:
    """Given a card without coordinates, when rendering, then its badge stays hidden."""
    timeline = make_timeline(bus)

    skipped = timeline.cards[1]
    assert skipped.marker is None
    assert skipped.badge_visible is False
    assert skipped.badge_text is None


def test_without_origin_badges_stay_hidden(bus: ModeBroadcastBus) -> None:
    """Given no property coordinate, when the mode changes, then no card is updated."""
    timeline = make_timeline(bus, origin=None)

    bus.set_mode(TravelMode.BIKE)

    assert all(not card.badge_visible for card in timeline.cards)


def test_detached_timeline_ignores_mode_changes(bus: ModeBroadcastBus) -> None:
    """Given a detached timeline, when the mode changes, then badges keep the old mode."""
    timeline = make_timeline(bus)
    timeline.detach()

    bus.set_mode(TravelMode.BIKE)

    assert timeline.cards[0].badge_text == "2 min til fots"
    assert bus.subscriber_count == 0


def test_attach_twice_subscribes_once(bus: ModeBroadcastBus) -> None:
    """Given an attached timeline, when attached again, then it stays a single subscriber."""
    timeline = make_timeline(bus)

    timeline.attach()

    assert bus.subscriber_count == 1
