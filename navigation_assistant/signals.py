"""Affinity signals mined from an actor's interaction history.

Each scorer returns an unbounded, non-negative accumulator per item id. The
ranker weights and combines them; none of them look at the catalog.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Sequence

import numpy as np

from .models import InteractionEvent, NavigationContext
from .sequences import mine_sequences

Scores = Dict[str, float]


def temporal_scores(
    events: Sequence[InteractionEvent],
    now: datetime,
    *,
    window_hours: int = 2,
    increment: float = 0.1,
) -> Scores:
    """Reward items the actor tends to open around this hour of day.

    Distance wraps at midnight rather than using the plain hour difference,
    so 23:00 and 01:00 are two hours apart and fall inside the default window.
    """

    if not events:
        return {}
    hours = np.fromiter((event.timestamp.hour for event in events), dtype=np.int64, count=len(events))
    diff = np.abs(hours - now.hour) % 24
    distance = np.minimum(diff, 24 - diff)
    return _accumulate([event.item_id for event in events], distance <= window_hours, increment)


def contextual_scores(
    events: Sequence[InteractionEvent],
    context: NavigationContext,
    *,
    increment: float = 0.1,
) -> Scores:
    if not events:
        return {}
    mask = np.fromiter((event.context == context for event in events), dtype=bool, count=len(events))
    return _accumulate([event.item_id for event in events], mask, increment)


def sequential_scores(
    events: Sequence[InteractionEvent],
    *,
    gap: timedelta = timedelta(minutes=5),
    increment: float = 0.1,
) -> Scores:
    """Reward items that close a mined navigation sequence."""

    endings = [sequence[-1] for sequence in mine_sequences(events, gap=gap, min_length=2)]
    if not endings:
        return {}
    return _accumulate(endings, np.ones(len(endings), dtype=bool), increment)


def _accumulate(item_ids: Sequence[str], mask: np.ndarray, increment: float) -> Scores:
    selected = np.asarray(item_ids, dtype=object)[mask]
    if selected.size == 0:
        return {}
    unique, counts = np.unique(selected, return_counts=True)
    return {str(item_id): float(count) * increment for item_id, count in zip(unique, counts)}
