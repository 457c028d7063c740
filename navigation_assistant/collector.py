"""Interaction event log with a rolling retention window."""

from __future__ import annotations

import bisect
import logging
from collections import deque
from dataclasses import replace
from datetime import datetime
from typing import Callable, Deque, Dict, Iterable, List

from .config import EngineConfig
from .learning import UsageStats
from .models import ActionKind, InteractionEvent, NavigableItem, NavigationContext
from .utils import local_naive, non_negative_number, parse_timestamp, unit_interval

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class EventLog:
    """Append-only per-actor store that discards events past the retention window."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        clock: Clock = datetime.now,
        stats: UsageStats | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.clock = clock
        self.stats = stats or UsageStats()
        self._events: Dict[str, Deque[InteractionEvent]] = {}

    def track(self, event: InteractionEvent) -> None:
        event = _normalise(event)
        if event is None:
            return
        events = self._events.setdefault(event.actor_id, deque())
        if events and event.timestamp < events[-1].timestamp:
            # Late arrivals are slotted in so each deque stays chronological.
            bisect.insort(events, event, key=lambda stored: stored.timestamp)
        else:
            events.append(event)
        self.stats.record(event)
        self.purge()

    def extend(self, events: Iterable[InteractionEvent]) -> None:
        for event in events:
            self.track(event)

    def purge(self, now: datetime | None = None) -> int:
        """Drop every event older than the retention window; return how many went."""

        cutoff = (now or self.clock()) - self.config.retention
        removed = 0
        for actor_id in list(self._events):
            events = self._events[actor_id]
            while events and events[0].timestamp < cutoff:
                self.stats.forget(events.popleft())
                removed += 1
            if not events:
                del self._events[actor_id]
        if removed:
            logger.debug("Purged %d interaction events older than %s", removed, cutoff)
        return removed

    def events_for(self, actor_id: str, now: datetime | None = None) -> List[InteractionEvent]:
        """Return a chronological snapshot of the actor's retained events."""

        cutoff = (now or self.clock()) - self.config.retention
        return [event for event in self._events.get(actor_id, ()) if event.timestamp >= cutoff]

    def actors(self) -> List[str]:
        return list(self._events)

    def __len__(self) -> int:
        return sum(len(events) for events in self._events.values())


def _normalise(event: InteractionEvent) -> InteractionEvent | None:
    try:
        action = ActionKind(event.action)
        context = NavigationContext(event.context)
    except ValueError:
        action = context = None
    if action is None or not (event.actor_id and event.item_id and isinstance(event.timestamp, datetime)):
        logger.debug("Ignoring interaction event with missing required fields: %r", event)
        return None
    duration = non_negative_number(event.duration)
    timestamp = local_naive(event.timestamp)
    if (
        action is event.action
        and context is event.context
        and duration == event.duration
        and timestamp is event.timestamp
    ):
        return event
    return replace(event, action=action, context=context, duration=duration, timestamp=timestamp)


def build_event(
    *,
    actor_id: str,
    item_id: str,
    action,
    context,
    timestamp,
    session_id: str = "",
    duration=None,
    search_query: str | None = None,
    previous_item_id: str | None = None,
) -> InteractionEvent | None:
    """Construct an event from loosely typed host values.

    Returns None when a required field is missing or unrecognised; malformed
    optional fields are stored as absent.
    """

    try:
        action_kind = ActionKind(action)
        nav_context = NavigationContext(context)
    except ValueError:
        logger.debug("Unrecognised action %r or context %r", action, context)
        return None
    ts = parse_timestamp(timestamp)
    if not actor_id or not item_id or ts is None:
        return None
    query = search_query.strip() if isinstance(search_query, str) else None
    return InteractionEvent(
        actor_id=str(actor_id),
        session_id=str(session_id or ""),
        item_id=str(item_id),
        action=action_kind,
        context=nav_context,
        timestamp=ts,
        duration=non_negative_number(duration),
        search_query=query or None,
        previous_item_id=str(previous_item_id) if previous_item_id else None,
    )


def event_from_dict(payload: dict) -> InteractionEvent | None:
    """Helper to construct an event from a JSON-style dictionary."""

    return build_event(
        actor_id=payload.get("actor_id", ""),
        item_id=payload.get("item_id", ""),
        action=payload.get("action"),
        context=payload.get("context", NavigationContext.DEFAULT.value),
        timestamp=payload.get("timestamp"),
        session_id=payload.get("session_id", ""),
        duration=payload.get("duration"),
        search_query=payload.get("search_query"),
        previous_item_id=payload.get("previous_item_id"),
    )


def item_from_dict(payload: dict) -> NavigableItem:
    """Helper to construct a catalog item from a dictionary; unknown contexts are skipped."""

    contexts = set()
    for raw in payload.get("contexts", []):
        try:
            contexts.add(NavigationContext(raw))
        except ValueError:
            logger.debug("Skipping unknown context %r on item %r", raw, payload.get("item_id"))
    return NavigableItem(
        item_id=str(payload["item_id"]),
        label=payload.get("label", payload["item_id"]),
        category=payload.get("category", ""),
        relevance_hint=unit_interval(payload.get("relevance_hint")),
        contexts=frozenset(contexts),
        keywords=frozenset(str(keyword).lower() for keyword in payload.get("keywords", [])),
        href=payload.get("href"),
        description=payload.get("description"),
    )
