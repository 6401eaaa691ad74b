from __future__ import annotations

import pandas as pd

from .models import DietFilter, FilterCriteria, Recipe

# Diet filter value -> frame column that must be True.
DIET_FLAGS: dict[str, str] = {
    DietFilter.vegetarian.value: "vegetarian",
    DietFilter.vegan.value: "vegan",
    DietFilter.gluten_free.value: "gluten_free",
}


def _to_frame(recipes: list[Recipe]) -> pd.DataFrame:
    """Project the columns the filters look at; row i is recipes[i]."""
    return pd.DataFrame({
        "title_folded": [r.title.casefold() for r in recipes],
        "vegetarian": [r.vegetarian for r in recipes],
        "vegan": [r.vegan for r in recipes],
        "gluten_free": [r.gluten_free for r in recipes],
    })


def filter_recipes(recipes: list[Recipe], criteria: FilterCriteria) -> list[Recipe]:
    if not recipes:
        return []

    df = _to_frame(recipes)
    mask = pd.Series(True, index=df.index)

    # --- Text stage ---
    if criteria.search_query:
        query = criteria.search_query.casefold()
        mask = mask & df["title_folded"].str.contains(query, regex=False)

    # --- Diet stage (unknown values fall through as "all") ---
    flag = DIET_FLAGS.get(criteria.diet_filter)
    if flag:
        mask = mask & df[flag]

    return [recipes[i] for i in df.index[mask.to_numpy()]]
