from __future__ import annotations

from backend.dashboard.aggregator import bucketize, distribute, recompute, summarize
from backend.dashboard.models import FilterCriteria, Recipe, SummaryStats

PIZZA = Recipe(id=1, title="Pizza", ready_in_minutes=20, health_score=80, vegetarian=True)
TACOS = Recipe(id=2, title="Tacos", ready_in_minutes=45, health_score=50, vegan=True)
SCENARIO = [PIZZA, TACOS]


def _recipe(rid: int, minutes: int = 10, **flags) -> Recipe:
    return Recipe(id=rid, title=f"Recipe {rid}", ready_in_minutes=minutes, **flags)


def _counts(buckets) -> list[int]:
    return [b.count for b in buckets]


# ── Summary stats ────────────────────────────────────────────────────────


def test_summarize_empty_guards_division():
    assert summarize([]) == SummaryStats(total_recipes=0, avg_time=0, avg_health=0)


def test_summarize_rounds_half_away_from_zero():
    stats = summarize(SCENARIO)
    # (20 + 45) / 2 = 32.5 and (80 + 50) / 2 = 65
    assert stats.total_recipes == 2
    assert stats.avg_time == 33
    assert stats.avg_health == 65


def test_summarize_rounds_down_below_half():
    recipes = [_recipe(1, 10), _recipe(2, 10), _recipe(3, 11)]
    assert summarize(recipes).avg_time == 10


def test_summarize_missing_health_counts_as_zero():
    recipes = [
        Recipe.model_validate({"id": 1, "title": "A", "readyInMinutes": 10, "healthScore": 90}),
        Recipe.model_validate({"id": 2, "title": "B", "readyInMinutes": 10}),
    ]
    assert summarize(recipes).avg_health == 45


def test_summarize_total_matches_length():
    recipes = [_recipe(i) for i in range(1, 8)]
    assert summarize(recipes).total_recipes == 7


# ── Time buckets ─────────────────────────────────────────────────────────


def test_bucketize_labels_are_fixed():
    labels = [b.label for b in bucketize([])]
    assert labels == ["0-30 min", "31-60 min", "61-90 min", "90+ min"]


def test_bucketize_empty_keeps_all_buckets():
    assert _counts(bucketize([])) == [0, 0, 0, 0]


def test_bucketize_scenario():
    assert _counts(bucketize(SCENARIO)) == [1, 1, 0, 0]


def test_bucketize_boundaries():
    minutes = [0, 30, 31, 60, 61, 90, 91, 240]
    recipes = [_recipe(i, m) for i, m in enumerate(minutes, start=1)]
    assert _counts(bucketize(recipes)) == [2, 2, 2, 2]


def test_bucketize_total_matches_length_for_non_negative_times():
    recipes = [_recipe(i, m) for i, m in enumerate([5, 35, 65, 95, 120, 15], start=1)]
    assert sum(_counts(bucketize(recipes))) == len(recipes)


def test_bucketize_skips_negative_times():
    recipes = [_recipe(1, -5), _recipe(2, 25)]
    assert _counts(bucketize(recipes)) == [1, 0, 0, 0]


def test_bucketize_skips_missing_times():
    recipe = Recipe.model_validate({"id": 1, "title": "No time"})
    assert recipe.ready_in_minutes is None
    assert _counts(bucketize([recipe])) == [0, 0, 0, 0]


def test_summarize_counts_missing_time_as_zero():
    recipes = [
        Recipe.model_validate({"id": 1, "title": "No time"}),
        _recipe(2, 40),
    ]
    stats = summarize(recipes)
    assert stats.total_recipes == 2
    assert stats.avg_time == 20


# ── Diet distribution ────────────────────────────────────────────────────


def test_distribute_scenario_omits_empty_categories():
    slices = distribute(SCENARIO)
    assert [(s.label, s.count) for s in slices] == [("Vegetarian", 1), ("Vegan", 1)]


def test_distribute_colors():
    recipes = [
        _recipe(1, vegetarian=True),
        _recipe(2, vegan=True),
        _recipe(3, gluten_free=True),
        _recipe(4),
    ]
    colors = {s.label: s.color for s in distribute(recipes)}
    assert colors == {
        "Vegetarian": "#22c55e",
        "Vegan": "#a855f7",
        "Gluten Free": "#3b82f6",
        "Other": "#ef4444",
    }


def test_distribute_counts_multi_label_recipes_in_each_category():
    recipes = [_recipe(1, vegetarian=True, vegan=True, gluten_free=True)]
    slices = distribute(recipes)
    assert [(s.label, s.count) for s in slices] == [
        ("Vegetarian", 1),
        ("Vegan", 1),
        ("Gluten Free", 1),
    ]
    assert sum(s.count for s in slices) > len(recipes)


def test_distribute_other_only_for_untagged():
    recipes = [_recipe(1), _recipe(2), _recipe(3, dairy_free=True)]
    slices = distribute(recipes)
    assert [(s.label, s.count) for s in slices] == [("Other", 3)]


def test_distribute_empty():
    assert distribute([]) == []


# ── Full pipeline ────────────────────────────────────────────────────────


def test_recompute_all():
    view = recompute(SCENARIO, FilterCriteria(search_query="", diet_filter="all"))
    assert len(view.recipes) == 2
    assert view.stats == SummaryStats(total_recipes=2, avg_time=33, avg_health=65)
    assert [(b.label, b.count) for b in view.time_buckets] == [
        ("0-30 min", 1), ("31-60 min", 1), ("61-90 min", 0), ("90+ min", 0),
    ]
    assert [s.label for s in view.diet_distribution] == ["Vegetarian", "Vegan"]


def test_recompute_no_matches():
    view = recompute(SCENARIO, FilterCriteria(search_query="xyz"))
    assert view.recipes == []
    assert view.stats == SummaryStats(total_recipes=0, avg_time=0, avg_health=0)
    assert _counts(view.time_buckets) == [0, 0, 0, 0]
    assert view.diet_distribution == []


def test_recompute_vegan():
    view = recompute(SCENARIO, FilterCriteria(diet_filter="vegan"))
    assert view.recipes == [TACOS]
    assert [(s.label, s.count) for s in view.diet_distribution] == [("Vegan", 1)]
