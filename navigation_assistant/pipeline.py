"""End-to-end orchestration of navigation analytics and prediction."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from datetime import datetime
from typing import Dict, List, Sequence

from .collector import Clock, EventLog, build_event
from .config import EngineConfig
from .insights import DetectorInput, InsightEngine
from .models import ActionKind, Insight, InteractionEvent, NavigableItem, NavigationContext, Prediction
from .ranking import rank_predictions
from .recommendations import blend_recommendations
from .reporting import Report, daily_report, weekly_report
from .search import analyze_search_patterns, match_items, order_by_predictions
from .sequences import mine_sequences, shortcuts_from_sequences
from .signals import contextual_scores, sequential_scores, temporal_scores

logger = logging.getLogger(__name__)


class NavigationEngine:
    """Coordinates the event log, signal scorers, ranker and insight rules.

    One instance owns its log and caches; construct one per host process or
    tenant. Entry points share a re-entrant lock and every query works on a
    snapshot of the actor's history taken when it starts.
    """

    def __init__(
        self,
        *,
        config: EngineConfig | None = None,
        clock: Clock = datetime.now,
        event_log: EventLog | None = None,
        insight_engine: InsightEngine | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.clock = clock
        self.event_log = event_log or EventLog(self.config, clock=clock)
        self.insight_engine = insight_engine or InsightEngine()
        self._lock = threading.RLock()

    @property
    def stats(self):
        return self.event_log.stats

    def track(self, event: InteractionEvent) -> None:
        with self._lock:
            self.event_log.track(event)

    def track_interaction(
        self,
        actor_id: str,
        item_id: str,
        *,
        action="click",
        context=NavigationContext.DEFAULT,
        session_id: str = "",
        timestamp: datetime | None = None,
        duration=None,
        search_query: str | None = None,
        previous_item_id: str | None = None,
    ) -> InteractionEvent | None:
        """Build and record an event stamped with the engine clock by default."""

        event = build_event(
            actor_id=actor_id,
            item_id=item_id,
            action=action,
            context=context,
            timestamp=timestamp or self.clock(),
            session_id=session_id,
            duration=duration,
            search_query=search_query,
            previous_item_id=previous_item_id,
        )
        if event is None:
            logger.debug("Dropped interaction for actor %r on item %r", actor_id, item_id)
            return None
        self.track(event)
        return event

    def generate_predictions(
        self,
        catalog: Sequence[NavigableItem],
        context: NavigationContext,
        actor_id: str,
        now: datetime | None = None,
    ) -> List[Prediction]:
        now = now or self.clock()
        events = self._snapshot(actor_id, now)
        if not catalog:
            return []
        config = self.config
        temporal = temporal_scores(
            events, now, window_hours=config.temporal_window_hours, increment=config.signal_increment
        )
        contextual = contextual_scores(events, context, increment=config.signal_increment)
        sequential = sequential_scores(events, gap=config.session_gap, increment=config.signal_increment)
        return rank_predictions(catalog, temporal, contextual, sequential, config)

    def generate_insights(
        self,
        catalog: Sequence[NavigableItem],
        context: NavigationContext,
        actor_id: str,
        now: datetime | None = None,
    ) -> List[Insight]:
        now = now or self.clock()
        events = self._snapshot(actor_id, now)
        data = DetectorInput(events=events, catalog=list(catalog), context=context, now=now, config=self.config)
        return self.insight_engine.evaluate(data)

    def get_personalized_recommendations(
        self,
        catalog: Sequence[NavigableItem],
        actor_id: str,
        context: NavigationContext,
        now: datetime | None = None,
    ) -> List[NavigableItem]:
        now = now or self.clock()
        with self._lock:
            events = self._snapshot(actor_id, now)
            predictions = self.generate_predictions(catalog, context, actor_id, now)
        usage = Counter(event.item_id for event in events)
        frequent = [item_id for item_id, _ in usage.most_common(self.config.frequent_item_count)]
        return blend_recommendations(catalog, frequent, context, predictions, self.config)

    def top_recommendations(
        self,
        catalog: Sequence[NavigableItem],
        context: NavigationContext,
        actor_id: str,
        *,
        limit: int = 5,
        now: datetime | None = None,
    ) -> List[Prediction]:
        return self.generate_predictions(catalog, context, actor_id, now)[:limit]

    def predict_optimal_shortcuts(self, actor_id: str, now: datetime | None = None) -> Dict[str, List[str]]:
        events = self._snapshot(actor_id, now or self.clock())
        return shortcuts_from_sequences(mine_sequences(events, gap=self.config.session_gap))

    @staticmethod
    def analyze_search_patterns(search_history: Sequence[str]) -> List[str]:
        return analyze_search_patterns(search_history)

    def search_history(self, actor_id: str, now: datetime | None = None) -> List[str]:
        events = self._snapshot(actor_id, now or self.clock())
        return [event.search_query for event in events if event.search_query]

    def frequent_search_terms(self, actor_id: str, now: datetime | None = None) -> List[str]:
        return analyze_search_patterns(self.search_history(actor_id, now))

    def search(
        self,
        catalog: Sequence[NavigableItem],
        query: str,
        context: NavigationContext,
        actor_id: str,
        now: datetime | None = None,
        *,
        record: bool = True,
    ) -> List[NavigableItem]:
        """Catalog items matching ``query``, most likely destinations first.

        Non-blank queries are tracked as ``search`` interactions unless
        ``record`` is false, so they show up in :meth:`search_history`.
        """

        if record and query and query.strip():
            self.track_interaction(
                actor_id,
                "search",
                action=ActionKind.SEARCH,
                context=context,
                timestamp=now,
                search_query=query,
            )
        results = match_items(catalog, query)
        if not results:
            return []
        predictions = self.generate_predictions(results, context, actor_id, now)
        return order_by_predictions(results, predictions)

    def daily_report(self, actor_id: str, now: datetime | None = None) -> Report:
        now = now or self.clock()
        return daily_report(self._snapshot(actor_id, now), target_date=now.date())

    def weekly_report(self, actor_id: str, now: datetime | None = None) -> Report:
        now = now or self.clock()
        return weekly_report(self._snapshot(actor_id, now), end_date=now.date())

    def _snapshot(self, actor_id: str, now: datetime) -> List[InteractionEvent]:
        with self._lock:
            self.event_log.purge()
            return self.event_log.events_for(actor_id, now)
