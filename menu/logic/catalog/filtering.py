"""Catalog filtering: category selector plus case-insensitive name search."""
from __future__ import annotations
from typing import Iterable, List, Optional
from menu.domain.Ingredient import Ingredient
from menu.utilities.constants import ALL_CATEGORIES

__all__ = ["matches", "filter_ingredients", "list_categories"]


def matches(ingredient: Ingredient, category: str = ALL_CATEGORIES, search: str = "") -> bool:
    matches_filter = category == ALL_CATEGORIES or ingredient.category == category
    matches_search = search.lower() in ingredient.name.lower()
    return matches_filter and matches_search


def filter_ingredients(ingredients: Iterable[Ingredient], category: Optional[str] = ALL_CATEGORIES,
                       search: Optional[str] = "") -> List[Ingredient]:
    """Return the ingredients matching both the category and the search term, in original order.

    ``category`` must equal the ingredient's category exactly unless it is "All".
    ``search`` is a case-insensitive substring of the name; empty matches everything.
    """
    category = ALL_CATEGORIES if category is None else category
    search = search or ""
    return [ing for ing in ingredients if matches(ing, category, search)]


def list_categories(ingredients: Iterable[Ingredient]) -> List[str]:
    """Distinct categories in first-seen order."""
    seen: List[str] = []
    for ing in ingredients:
        if ing.category not in seen:
            seen.append(ing.category)
    return seen
