from __future__ import annotations

import hashlib
import json
from collections import OrderedDict

from .models import DashboardView, FilterCriteria

_MAX_ENTRIES = 256

# Least recently used first.
_cache: OrderedDict[str, DashboardView] = OrderedDict()
_hits: int = 0
_misses: int = 0


def _make_key(generation: int, criteria: FilterCriteria) -> str:
    normalized = json.dumps(
        {"generation": generation, **criteria.model_dump()},
        sort_keys=True,
        default=str,
    )
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(generation: int, criteria: FilterCriteria) -> DashboardView | None:
    global _hits, _misses
    key = _make_key(generation, criteria)
    view = _cache.get(key)
    if view is not None:
        _cache.move_to_end(key)
        _hits += 1
        return view
    _misses += 1
    return None


def cache_set(generation: int, criteria: FilterCriteria, view: DashboardView) -> None:
    key = _make_key(generation, criteria)
    _cache[key] = view
    _cache.move_to_end(key)
    while len(_cache) > _MAX_ENTRIES:
        _cache.popitem(last=False)


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "max_size": _MAX_ENTRIES,
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0
