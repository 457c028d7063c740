from datetime import timedelta

from navigation_assistant.config import EngineConfig
from navigation_assistant.models import NavigableItem, NavigationContext, Prediction
from navigation_assistant.recommendations import blend_recommendations, contextual_items

from conftest import make_event


def _catalog():
    return [
        NavigableItem(item_id="a", label="A", category="system"),
        NavigableItem(item_id="b", label="B", category="system"),
        NavigableItem(item_id="c", label="C", category="operational"),
        NavigableItem(item_id="d", label="D", category="system", keywords=frozenset({"operational"})),
    ]


def test_blend_accumulates_frequency_context_and_predictions():
    predictions = [Prediction(item_id="b", score=0.5, reason="r", confidence=0.5)]

    recommended = blend_recommendations(_catalog(), ["a", "gone"], NavigationContext.OPERATIONAL, predictions)

    assert [item.item_id for item in recommended] == ["a", "c", "d", "b"]


def test_unknown_ids_are_dropped_after_truncation():
    config = EngineConfig(max_recommendations=2)
    recommended = blend_recommendations(_catalog(), ["a", "gone"], NavigationContext.OPERATIONAL, [], config)
    assert [item.item_id for item in recommended] == ["a"]


def test_contextual_items_match_contexts_category_or_keywords():
    catalog = _catalog() + [
        NavigableItem(item_id="e", label="E", category="x", contexts=frozenset({NavigationContext.OPERATIONAL}))
    ]
    assert [item.item_id for item in contextual_items(catalog, NavigationContext.OPERATIONAL)] == ["c", "d", "e"]


def test_engine_recommendations_favour_frequent_items(engine, clock, restaurant_catalog):
    for index in range(4):
        engine.track(make_event("settings", clock.now - timedelta(minutes=10 * index)))

    recommended = engine.get_personalized_recommendations(restaurant_catalog, "user_1", NavigationContext.FINANCIAL)

    assert [item.item_id for item in recommended][0] == "settings"
    assert len(recommended) <= 8


def test_engine_recommendations_for_unknown_actor_use_context_only(engine, restaurant_catalog):
    recommended = engine.get_personalized_recommendations(restaurant_catalog, "nobody", NavigationContext.OPERATIONAL)
    assert [item.item_id for item in recommended] == ["orders", "kitchen"]


def test_frequency_ignores_events_outside_window_of_query_time(engine, clock, restaurant_catalog):
    ledger = NavigableItem(
        item_id="ledger",
        label="Ledger",
        category="financial",
        contexts=frozenset({NavigationContext.FINANCIAL}),
    )
    for index in range(4):
        engine.track(make_event("settings", clock.now - timedelta(days=29, minutes=index)))
    later = clock.now + timedelta(days=5)
    catalog = restaurant_catalog + [ledger]

    assert engine.generate_predictions(catalog, NavigationContext.FINANCIAL, "user_1", now=later) == []
    recommended = engine.get_personalized_recommendations(catalog, "user_1", NavigationContext.FINANCIAL, now=later)
    assert [item.item_id for item in recommended] == ["ledger"]
