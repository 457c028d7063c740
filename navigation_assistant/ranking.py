"""Composite scoring of catalog items into navigation predictions."""

from __future__ import annotations

from typing import Iterable, List, Mapping

from .config import EngineConfig
from .models import NavigableItem, Prediction
from .utils import clamp_unit, unit_interval

FREQUENTLY_USED_AT_THIS_TIME = "frequently_used_at_this_time"
RELEVANT_TO_CURRENT_CONTEXT = "relevant_to_current_context"
FOLLOWS_USAGE_PATTERN = "follows_usage_pattern"
AI_RECOMMENDED = "ai_recommended"

_CONTEXT_REASON = "Relevant to current business context"
_TIME_REASON = "Often used at this time of day"
_SEQUENCE_REASON = "Follows your typical usage pattern"
_FALLBACK_REASON = "Based on usage patterns"


def score_item(
    item: NavigableItem,
    temporal: Mapping[str, float],
    contextual: Mapping[str, float],
    sequential: Mapping[str, float],
    config: EngineConfig,
) -> Prediction:
    time_score = temporal.get(item.item_id, 0.0)
    context_score = contextual.get(item.item_id, 0.0)
    sequence_score = sequential.get(item.item_id, 0.0)
    composite = (
        time_score * config.temporal_weight
        + context_score * config.contextual_weight
        + sequence_score * config.sequential_weight
    )

    factors: List[str] = []
    if time_score > config.factor_threshold:
        factors.append(FREQUENTLY_USED_AT_THIS_TIME)
    if context_score > config.factor_threshold:
        factors.append(RELEVANT_TO_CURRENT_CONTEXT)
    if sequence_score > config.factor_threshold:
        factors.append(FOLLOWS_USAGE_PATTERN)
    hint = unit_interval(item.relevance_hint)
    if hint:
        composite += hint * config.hint_weight
        factors.append(AI_RECOMMENDED)

    if RELEVANT_TO_CURRENT_CONTEXT in factors:
        reason = _CONTEXT_REASON
    elif FREQUENTLY_USED_AT_THIS_TIME in factors:
        reason = _TIME_REASON
    elif FOLLOWS_USAGE_PATTERN in factors:
        reason = _SEQUENCE_REASON
    else:
        reason = _FALLBACK_REASON

    return Prediction(
        item_id=item.item_id,
        score=clamp_unit(composite),
        reason=reason,
        confidence=composite,
        context_factors=factors,
    )


def rank_predictions(
    catalog: Iterable[NavigableItem],
    temporal: Mapping[str, float],
    contextual: Mapping[str, float],
    sequential: Mapping[str, float],
    config: EngineConfig | None = None,
) -> List[Prediction]:
    """Score every catalog item, keep those above the floor, best first."""

    config = config or EngineConfig()
    predictions = [score_item(item, temporal, contextual, sequential, config) for item in catalog]
    kept = [prediction for prediction in predictions if prediction.confidence > config.min_score]
    kept.sort(key=lambda prediction: prediction.score, reverse=True)
    return kept[: config.max_predictions]
