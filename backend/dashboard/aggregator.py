from __future__ import annotations

from collections import Counter
from typing import Callable, NamedTuple

from .filtering import filter_recipes
from .models import (
    DashboardView,
    DietSlice,
    FilterCriteria,
    Recipe,
    SummaryStats,
    TimeBucket,
)


class TimeRange(NamedTuple):
    label: str
    low: int
    high: int | None  # None = open-ended


class DietCategory(NamedTuple):
    label: str
    color: str
    matches: Callable[[Recipe], bool]


TIME_RANGES: list[TimeRange] = [
    TimeRange("0-30 min", 0, 30),
    TimeRange("31-60 min", 31, 60),
    TimeRange("61-90 min", 61, 90),
    TimeRange("90+ min", 91, None),
]

DIET_CATEGORIES: list[DietCategory] = [
    DietCategory("Vegetarian", "#22c55e", lambda r: r.vegetarian),
    DietCategory("Vegan", "#a855f7", lambda r: r.vegan),
    DietCategory("Gluten Free", "#3b82f6", lambda r: r.gluten_free),
    DietCategory(
        "Other",
        "#ef4444",
        lambda r: not (r.vegetarian or r.vegan or r.gluten_free),
    ),
]


def _round_mean(total: int, count: int) -> int:
    """Round total / count half away from zero, exactly."""
    magnitude = (2 * abs(total) + count) // (2 * count)
    return -magnitude if total < 0 else magnitude


def summarize(filtered: list[Recipe]) -> SummaryStats:
    total = len(filtered)
    if total == 0:
        return SummaryStats(total_recipes=0, avg_time=0, avg_health=0)

    # A missing time adds 0 to the sum but still counts toward the mean.
    time_sum = sum(r.ready_in_minutes or 0 for r in filtered)
    health_sum = sum(r.health_score for r in filtered)
    return SummaryStats(
        total_recipes=total,
        avg_time=_round_mean(time_sum, total),
        avg_health=_round_mean(health_sum, total),
    )


def _time_range_for(minutes: int | None) -> TimeRange | None:
    if minutes is None:
        return None
    for time_range in TIME_RANGES:
        if minutes >= time_range.low and (time_range.high is None or minutes <= time_range.high):
            return time_range
    # Negative times land nowhere.
    return None


def bucketize(filtered: list[Recipe]) -> list[TimeBucket]:
    counter: Counter[str] = Counter()
    for r in filtered:
        time_range = _time_range_for(r.ready_in_minutes)
        if time_range is not None:
            counter[time_range.label] += 1
    return [TimeBucket(label=t.label, count=counter[t.label]) for t in TIME_RANGES]


def distribute(filtered: list[Recipe]) -> list[DietSlice]:
    # Categories overlap: one recipe may count toward several of them.
    slices: list[DietSlice] = []
    for category in DIET_CATEGORIES:
        count = sum(1 for r in filtered if category.matches(r))
        if count > 0:
            slices.append(DietSlice(label=category.label, count=count, color=category.color))
    return slices


def recompute(recipes: list[Recipe], criteria: FilterCriteria) -> DashboardView:
    """Run the full pipeline for one (collection, criteria) pair."""
    filtered = filter_recipes(recipes, criteria)
    return DashboardView(
        recipes=filtered,
        stats=summarize(filtered),
        time_buckets=bucketize(filtered),
        diet_distribution=distribute(filtered),
    )
