import json
import logging
from functools import lru_cache
from typing import List, Optional
from menu.domain.Ingredient import Ingredient
from menu.infra.paths import INGREDIENTS_FILE

logger = logging.getLogger(__name__)


def reading_from_catalog(path=INGREDIENTS_FILE) -> List[Ingredient]:
    """Read the ingredient catalog from JSON with proper error handling."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            ingredient_data = json.load(f)
        ingredients: List[Ingredient] = []
        for entry in ingredient_data:
            ingredient = Ingredient.from_dict(entry)
            if ingredient in ingredients:
                logger.warning(f"Duplicate ingredient {ingredient.name!r} in catalog, keeping the first.")
                continue
            ingredients.append(ingredient)
        return ingredients
    except FileNotFoundError:
        logger.warning(f"Catalog file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in catalog file: {e}")
        return []


@lru_cache(maxsize=1)
def _cached_catalog() -> tuple:
    return tuple(reading_from_catalog())


def load_catalog() -> List[Ingredient]:
    """The fixed catalog shipped with the package, read once per process."""
    return list(_cached_catalog())


def find_ingredient(name: str) -> Optional[Ingredient]:
    """Exact, case-sensitive lookup by name."""
    return next((ing for ing in _cached_catalog() if ing.name == name), None)
