from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (36.5 -> 37)."""
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    title: str = Field(..., min_length=1)
    ready_in_minutes: int | None = Field(default=None, alias="readyInMinutes")
    servings: int = Field(default=1, gt=0)
    health_score: int = Field(default=0, alias="healthScore")
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = Field(default=False, alias="glutenFree")
    dairy_free: bool = Field(default=False, alias="dairyFree")
    very_healthy: bool = Field(default=False, alias="veryHealthy")
    very_popular: bool = Field(default=False, alias="veryPopular")
    cheap: bool = False
    sustainable: bool = False
    image: str = ""
    price_per_serving: float = Field(default=0.0, alias="pricePerServing")

    @field_validator("health_score", "ready_in_minutes", mode="before")
    @classmethod
    def _whole_number(cls, value, info):
        # Spoonacular sends fractional health scores, e.g. 12.0 or 37.5
        if value is None:
            # No time means no bucket; no health score counts as 0.
            return None if info.field_name == "ready_in_minutes" else 0
        if isinstance(value, float) and not value.is_integer():
            return round_half_away(value)
        return value

    @field_validator("price_per_serving", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return 0.0 if value is None else value

    @field_validator(
        "vegetarian", "vegan", "gluten_free", "dairy_free",
        "very_healthy", "very_popular", "cheap", "sustainable",
        mode="before",
    )
    @classmethod
    def _none_as_false(cls, value):
        return False if value is None else value

    @field_validator("image", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class DietFilter(str, Enum):
    all = "all"
    vegetarian = "vegetarian"
    vegan = "vegan"
    gluten_free = "gluten-free"


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search_query: str = Field(default="", max_length=200, alias="searchQuery")
    # Plain str: unknown values are accepted and mean "all".
    diet_filter: str = Field(default=DietFilter.all.value, alias="dietFilter")


class SummaryStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_recipes: int = Field(default=0, ge=0, alias="totalRecipes")
    avg_time: int = Field(default=0, alias="avgTime")
    avg_health: int = Field(default=0, alias="avgHealth")


class TimeBucket(BaseModel):
    label: str
    count: int = Field(default=0, ge=0)


class DietSlice(BaseModel):
    label: str
    count: int = Field(..., gt=0)
    color: str


class DashboardView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipes: list[Recipe]
    stats: SummaryStats
    time_buckets: list[TimeBucket] = Field(alias="timeBuckets")
    diet_distribution: list[DietSlice] = Field(alias="dietDistribution")


class SourceStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_recipes: int = Field(alias="totalRecipes")
    demo_mode: bool = Field(alias="demoMode")
    error: str | None = None
    generation: int
