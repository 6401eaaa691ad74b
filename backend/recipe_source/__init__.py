"""
Recipe source layer.

Responsibilities:
- Manage Spoonacular API configuration and credentials.
- Fetch recipes from the complexSearch endpoint and validate them.
- Generate demo recipes when the API is unavailable or not configured.
"""
