from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from ..dashboard.models import Recipe
from .config import DEFAULT_SOURCE_CONFIG, SourceConfig
from .mock import generate_mock_recipes

logger = logging.getLogger(__name__)


class RecipeSourceError(Exception):
    """Spoonacular answered, but not with a usable recipe list."""


@dataclass(frozen=True)
class RecipeLoad:
    recipes: list[Recipe]
    demo_mode: bool = False
    error: str | None = None


def _parse_results(results: list[Any]) -> list[Recipe]:
    """Validate raw results, skipping bad records and repeated ids."""
    recipes: list[Recipe] = []
    seen: set[int] = set()
    for raw in results:
        try:
            recipe = Recipe.model_validate(raw)
        except ValidationError:
            logger.warning("Skipping invalid recipe record %r", raw, exc_info=True)
            continue
        if recipe.id in seen:
            logger.warning("Skipping duplicate recipe id %s", recipe.id)
            continue
        seen.add(recipe.id)
        recipes.append(recipe)
    return recipes


def fetch_recipes(config: SourceConfig = DEFAULT_SOURCE_CONFIG) -> list[Recipe]:
    """
    Fetch recipes from Spoonacular's complexSearch endpoint.

    Raises ``httpx.HTTPError`` on transport failures and non-2xx responses,
    and ``RecipeSourceError`` when the payload has no ``results`` list.
    """
    response = httpx.get(
        f"{config.base_url}/complexSearch",
        params={
            "apiKey": config.api_key,
            "number": config.number,
            "addRecipeInformation": "true",
            "fillIngredients": "true",
        },
        timeout=config.timeout,
    )
    response.raise_for_status()

    try:
        payload = response.json()
    except ValueError as exc:
        raise RecipeSourceError("Failed to fetch recipes: response is not JSON") from exc

    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        raise RecipeSourceError("Failed to fetch recipes: missing 'results' list")

    return _parse_results(results)


def load_recipes(config: SourceConfig = DEFAULT_SOURCE_CONFIG) -> RecipeLoad:
    """
    Load the recipe collection, falling back to demo recipes.

    Never raises: any retrieval failure is logged and replaced by the
    generated demo sequence with ``demo_mode`` set.
    """
    if not config.enabled or not config.api_key:
        logger.warning("Spoonacular source disabled or API key missing, using demo recipes")
        return RecipeLoad(
            recipes=generate_mock_recipes(config.mock_seed),
            demo_mode=True,
            error="Spoonacular API key not configured",
        )

    try:
        recipes = fetch_recipes(config)
    except (httpx.HTTPError, RecipeSourceError) as exc:
        logger.warning("Spoonacular fetch failed, falling back to demo recipes", exc_info=True)
        return RecipeLoad(
            recipes=generate_mock_recipes(config.mock_seed),
            demo_mode=True,
            error=str(exc),
        )

    return RecipeLoad(recipes=recipes)
