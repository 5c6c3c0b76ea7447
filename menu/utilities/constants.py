from typing import Final

ALL_CATEGORIES: Final[str] = "All"

QUANTITY_MIN: Final[int] = 1
QUANTITY_MAX: Final[int] = 10
WEIGHT_STEP: Final[float] = 0.1
PRICE_STEP: Final[float] = 0.01

DEFAULT_PRICE_CONFIG: Final[dict] = {
    "base_price": 7.99,
    "adjusted_price": 7.99,
    "quantity": 1,
    "weight": 0.1,
    "price_unit": "pound",
}

NUTRIENTS: Final[tuple[str, ...]] = ("calories", "protein", "carbs", "fat")
NUTRIENT_SUFFIX: Final[dict[str, str]] = {
    "calories": " kcal",
    "protein": "g",
    "carbs": "g",
    "fat": "g",
}

SAVE_LOG_MESSAGE: Final[str] = "Saving menu item..."
