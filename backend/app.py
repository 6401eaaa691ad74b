from __future__ import annotations

from fastapi import Depends, FastAPI, Query

from .dashboard.aggregator import DIET_CATEGORIES, TIME_RANGES
from .dashboard.cache import get_cache_stats
from .dashboard.data_store import RecipeCollection, get_collection, reload_collection
from .dashboard.models import (
    DashboardView,
    DietFilter,
    DietSlice,
    FilterCriteria,
    Recipe,
    SourceStatus,
    SummaryStats,
    TimeBucket,
)
from .dashboard.views import get_dashboard

app = FastAPI(title="Recipe Dashboard API", version="1.0.0")

DIET_FILTER_LABELS: dict[str, str] = {
    DietFilter.all.value: "All Diets",
    DietFilter.vegetarian.value: "Vegetarian",
    DietFilter.vegan.value: "Vegan",
    DietFilter.gluten_free.value: "Gluten Free",
}


def criteria_from_query(
    search: str = Query(default="", max_length=200),
    diet: str = Query(default=DietFilter.all.value),
) -> FilterCriteria:
    return FilterCriteria(search_query=search, diet_filter=diet)


def _status(collection: RecipeCollection) -> SourceStatus:
    return SourceStatus(
        total_recipes=len(collection.recipes),
        demo_mode=collection.demo_mode,
        error=collection.error,
        generation=collection.generation,
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "dietFilters": [
            {"value": value, "label": label} for value, label in DIET_FILTER_LABELS.items()
        ],
        "timeBuckets": [t.label for t in TIME_RANGES],
        "dietCategories": [
            {"label": c.label, "color": c.color} for c in DIET_CATEGORIES
        ],
    }


# ── Recipe source ────────────────────────────────────────────────────────


@app.get("/source", response_model=SourceStatus)
def source_status() -> SourceStatus:
    return _status(get_collection())


@app.post("/source/reload", response_model=SourceStatus)
def source_reload() -> SourceStatus:
    return _status(reload_collection())


# ── Dashboard views ──────────────────────────────────────────────────────


@app.post("/dashboard", response_model=DashboardView)
def dashboard_view(body: FilterCriteria) -> DashboardView:
    return get_dashboard(body)


@app.get("/recipes", response_model=list[Recipe])
def recipes(criteria: FilterCriteria = Depends(criteria_from_query)) -> list[Recipe]:
    return get_dashboard(criteria).recipes


@app.get("/stats", response_model=SummaryStats)
def stats(criteria: FilterCriteria = Depends(criteria_from_query)) -> SummaryStats:
    return get_dashboard(criteria).stats


@app.get("/time-buckets", response_model=list[TimeBucket])
def time_buckets(criteria: FilterCriteria = Depends(criteria_from_query)) -> list[TimeBucket]:
    return get_dashboard(criteria).time_buckets


@app.get("/diet-distribution", response_model=list[DietSlice])
def diet_distribution(criteria: FilterCriteria = Depends(criteria_from_query)) -> list[DietSlice]:
    return get_dashboard(criteria).diet_distribution


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
