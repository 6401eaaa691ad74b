"""
Demo recipe generator.

Used whenever Spoonacular cannot be reached (or no API key is set), so the
dashboard always has something to show. Pass a seed for reproducible output.
"""
from __future__ import annotations

import numpy as np

from ..dashboard.models import Recipe

MOCK_TITLES: list[str] = [
    "Classic Margherita Pizza",
    "Chicken Tikka Masala",
    "Caesar Salad",
    "Beef Tacos",
    "Mushroom Risotto",
    "Grilled Salmon",
    "Pasta Carbonara",
    "Thai Green Curry",
    "Quinoa Buddha Bowl",
    "Chocolate Chip Cookies",
    "Greek Moussaka",
    "Sushi Rolls",
    "French Onion Soup",
    "BBQ Ribs",
    "Caprese Sandwich",
]


def _image_url(title: str) -> str:
    return f"https://source.unsplash.com/400x300/?food,{'-'.join(title.split())}"


def generate_mock_recipes(seed: int | None = None) -> list[Recipe]:
    rng = np.random.default_rng(seed)
    recipes: list[Recipe] = []
    for i, title in enumerate(MOCK_TITLES):
        recipes.append(Recipe(
            id=i + 1,
            title=title,
            ready_in_minutes=int(rng.integers(15, 105)),
            servings=int(rng.integers(2, 8)),
            health_score=int(rng.integers(0, 100)),
            vegetarian=bool(rng.random() > 0.5),
            vegan=bool(rng.random() > 0.7),
            gluten_free=bool(rng.random() > 0.6),
            image=_image_url(title),
            price_per_serving=float(round(rng.random() * 500 + 100)),
        ))
    return recipes
