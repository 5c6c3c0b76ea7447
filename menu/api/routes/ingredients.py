from fastapi import APIRouter, HTTPException, Query
from typing import Optional
from menu.infra.Catalog_Repository import load_catalog, find_ingredient
from menu.logic.catalog.filtering import filter_ingredients, list_categories
from menu.utilities.constants import ALL_CATEGORIES

router = APIRouter(prefix="/api/ingredients")


@router.get("")
@router.get("/")
def list_ingredients(category: Optional[str] = Query(default=ALL_CATEGORIES),
                     search: Optional[str] = Query(default="")):
    """Return the catalog narrowed by category and a case-insensitive name search."""
    catalog = load_catalog()
    filtered = filter_ingredients(catalog, category, search)
    return {
        "category": category,
        "search": search,
        "categories": [ALL_CATEGORIES] + list_categories(catalog),
        "count": len(filtered),
        "total": len(catalog),
        "ingredients": [ing.to_dict() for ing in filtered],
    }


@router.get("/{name}")
def get_ingredient(name: str):
    ingredient = find_ingredient(name)
    if ingredient is None:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return ingredient.to_dict()
