"""
Recipe dashboard pipeline.

Responsibilities:
- Narrow the recipe collection by search text and diet filter.
- Reduce the filtered recipes to summary stats, a cooking-time histogram
  and a diet-tag distribution.
- Hold the loaded collection in memory and memoize derived views.
"""
