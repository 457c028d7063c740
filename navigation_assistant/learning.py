"""Frequency caches derived from the tracked interaction stream."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List

from .models import InteractionEvent, NavigationContext


class UsageStats:
    """Per-actor and per-context item counters kept in step with the event log."""

    def __init__(self) -> None:
        self._by_actor: Dict[str, Counter] = defaultdict(Counter)
        self._by_context: Dict[NavigationContext, Counter] = defaultdict(Counter)

    def record(self, event: InteractionEvent) -> None:
        self._by_actor[event.actor_id][event.item_id] += 1
        self._by_context[event.context][event.item_id] += 1

    def forget(self, event: InteractionEvent) -> None:
        self._decrement(self._by_actor, event.actor_id, event.item_id)
        self._decrement(self._by_context, event.context, event.item_id)

    def frequently_used(self, actor_id: str, limit: int = 5) -> List[str]:
        counts = self._by_actor.get(actor_id)
        if not counts:
            return []
        return [item_id for item_id, _ in counts.most_common(limit)]

    def context_affinity(self, context: NavigationContext, limit: int = 5) -> List[tuple[str, int]]:
        counts = self._by_context.get(context)
        if not counts:
            return []
        return counts.most_common(limit)

    def usage_count(self, actor_id: str, item_id: str) -> int:
        counts = self._by_actor.get(actor_id)
        return counts[item_id] if counts else 0

    @staticmethod
    def _decrement(table: Dict, key, item_id: str) -> None:
        counts = table.get(key)
        if not counts:
            return
        counts[item_id] -= 1
        if counts[item_id] <= 0:
            del counts[item_id]
        if not counts:
            del table[key]
