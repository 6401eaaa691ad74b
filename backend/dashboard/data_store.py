from __future__ import annotations

import logging
from dataclasses import dataclass

from ..recipe_source.config import DEFAULT_SOURCE_CONFIG, SourceConfig
from ..recipe_source.spoonacular import load_recipes
from .cache import clear_cache
from .models import Recipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipeCollection:
    recipes: tuple[Recipe, ...]
    demo_mode: bool = False
    error: str | None = None
    generation: int = 0


_collection: RecipeCollection | None = None
_generation: int = 0


def _install(recipes: list[Recipe], demo_mode: bool, error: str | None) -> RecipeCollection:
    global _collection, _generation
    ids = [r.id for r in recipes]
    if len(ids) != len(set(ids)):
        raise ValueError("Recipe ids must be unique within a collection")

    _generation += 1
    _collection = RecipeCollection(
        recipes=tuple(recipes),
        demo_mode=demo_mode,
        error=error,
        generation=_generation,
    )
    clear_cache()
    logger.info(
        "Loaded %d recipes (generation %d, demo_mode=%s)",
        len(recipes), _generation, demo_mode,
    )
    return _collection


def get_collection() -> RecipeCollection:
    """Return the in-memory recipe collection, loading it on first call."""
    if _collection is None:
        return reload_collection()
    return _collection


def reload_collection(config: SourceConfig = DEFAULT_SOURCE_CONFIG) -> RecipeCollection:
    loaded = load_recipes(config)
    return _install(loaded.recipes, loaded.demo_mode, loaded.error)


def set_collection(
    recipes: list[Recipe],
    demo_mode: bool = False,
    error: str | None = None,
) -> RecipeCollection:
    """Install *recipes* directly as the current collection."""
    return _install(list(recipes), demo_mode, error)


def clear_collection() -> None:
    global _collection
    _collection = None
