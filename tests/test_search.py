from datetime import timedelta

from navigation_assistant.models import ActionKind, NavigableItem, NavigationContext
from navigation_assistant.search import analyze_search_patterns, match_items

from conftest import make_event


def test_sales_is_the_top_search_term():
    terms = analyze_search_patterns(["show sales report", "sales by day", "sales report export"])
    assert terms[:2] == ["sales", "report"]
    assert "by" not in terms


def test_short_tokens_and_non_strings_are_ignored():
    assert analyze_search_patterns(["a an the", None, "GL gl ledger"]) == ["the", "ledger"]


def test_terms_are_capped_at_ten():
    history = [" ".join(f"term{index}" for index in range(15))]
    assert len(analyze_search_patterns(history)) == 10


def test_whitespace_runs_do_not_create_empty_terms():
    assert analyze_search_patterns(["  sales\treport\n"]) == ["sales", "report"]


def test_match_items_checks_label_description_and_keywords():
    catalog = [
        NavigableItem(item_id="sales-report", label="Sales Report", category="financial"),
        NavigableItem(item_id="pos", label="Point of Sale", category="operational", description="Ring up sales"),
        NavigableItem(item_id="gl", label="Ledger", category="financial", keywords=frozenset({"salesjournal"})),
        NavigableItem(item_id="kitchen", label="Kitchen", category="operational"),
    ]
    assert [item.item_id for item in match_items(catalog, "SALES")] == ["sales-report", "pos", "gl"]
    assert match_items(catalog, "   ") == []


def test_engine_search_orders_results_by_predictions(engine, clock):
    catalog = [
        NavigableItem(item_id="sales-report", label="Sales Report", category="financial"),
        NavigableItem(item_id="sales-orders", label="Sales Orders", category="operational"),
    ]
    for index in range(3):
        engine.track(make_event("sales-orders", clock.now - timedelta(minutes=10 * index)))

    results = engine.search(catalog, "sales", NavigationContext.OPERATIONAL, "user_1")
    assert [item.item_id for item in results] == ["sales-orders", "sales-report"]


def test_search_history_feeds_term_analysis(engine, clock):
    for query in ["show sales report", "sales by day", "sales report export"]:
        engine.track(make_event("search", clock.now, action=ActionKind.SEARCH, search_query=query))
    engine.track(make_event("orders", clock.now))

    assert engine.search_history("user_1") == ["show sales report", "sales by day", "sales report export"]
    assert engine.frequent_search_terms("user_1")[0] == "sales"


def test_engine_search_records_the_query(engine, clock):
    catalog = [NavigableItem(item_id="sales-report", label="Sales Report", category="financial")]

    engine.search(catalog, "sales report", NavigationContext.FINANCIAL, "user_1")
    engine.search(catalog, "   ", NavigationContext.FINANCIAL, "user_1")
    engine.search(catalog, "kitchen", NavigationContext.FINANCIAL, "user_1", record=False)

    assert engine.search_history("user_1") == ["sales report"]
    (event,) = engine.event_log.events_for("user_1")
    assert event.action is ActionKind.SEARCH
    assert event.item_id == "search"
    assert event.timestamp == clock.now
