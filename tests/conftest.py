"""Shared fixtures for navigation engine tests."""

from datetime import datetime, timedelta

import pytest

from navigation_assistant.models import ActionKind, InteractionEvent, NavigableItem, NavigationContext
from navigation_assistant.pipeline import NavigationEngine

BASE_TIME = datetime(2026, 3, 2, 9, 0)


class FixedClock:
    """Manually advanced clock injected into engines under test."""

    def __init__(self, now: datetime = BASE_TIME):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def make_event(
    item_id,
    timestamp,
    *,
    actor_id="user_1",
    action=ActionKind.CLICK,
    context=NavigationContext.OPERATIONAL,
    **extra,
):
    return InteractionEvent(
        actor_id=actor_id,
        session_id="session_1",
        item_id=item_id,
        action=action,
        context=context,
        timestamp=timestamp,
        **extra,
    )


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def engine(clock):
    return NavigationEngine(clock=clock)


@pytest.fixture
def restaurant_catalog():
    return [
        NavigableItem(
            item_id="orders",
            label="Orders",
            category="operational",
            contexts=frozenset({NavigationContext.OPERATIONAL}),
            href="/restaurant/orders",
        ),
        NavigableItem(
            item_id="kitchen",
            label="Kitchen Display",
            category="operational",
            contexts=frozenset({NavigationContext.OPERATIONAL}),
            href="/restaurant/kitchen",
        ),
        NavigableItem(item_id="settings", label="Settings", category="system", href="/settings"),
    ]
