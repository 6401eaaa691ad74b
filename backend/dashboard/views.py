from __future__ import annotations

from .aggregator import recompute
from .cache import cache_get, cache_set
from .data_store import get_collection
from .models import DashboardView, FilterCriteria


def get_dashboard(criteria: FilterCriteria) -> DashboardView:
    """Derived views for the current collection, memoized per generation."""
    collection = get_collection()

    cached = cache_get(collection.generation, criteria)
    if cached is not None:
        return cached

    view = recompute(list(collection.recipes), criteria)
    cache_set(collection.generation, criteria, view)
    return view
