"""
Input schemas using Pydantic, plus the lenient number parsing used by the price form.

Form fields never produce validation errors: anything that is not a number
becomes zero, the same way an empty or garbled input box would.
"""
import math
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union
from menu.utilities.constants import DEFAULT_PRICE_CONFIG

Number = Union[float, int, str, None]


def parse_number(value: Number) -> float:
    """Parse a float from user input; non-numeric, NaN and infinite inputs become 0."""
    if isinstance(value, bool):
        return 0.0
    try:
        result = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def parse_quantity(value: Number, maximum: int) -> int:
    """Parse a piece count: truncated to int, negatives become 0, capped at maximum."""
    qty = int(parse_number(value))
    if qty < 0:
        return 0
    return min(qty, maximum)


class MenuItemDetailsInput(BaseModel):
    """Free-text fields of the menu item form. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    category: Optional[str] = Field(None, max_length=100)

    @field_validator('name', 'description', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class PriceConfigChangeInput(BaseModel):
    """A single change from the price form: which field and its raw value."""
    key: str = Field(..., min_length=1)
    value: Number = None


class NutritionQuery(BaseModel):
    """Stateless nutrition lookup for a list of ingredient names."""
    names: List[str] = Field(default_factory=list)
    unit: str = DEFAULT_PRICE_CONFIG["price_unit"]
    weight: Number = DEFAULT_PRICE_CONFIG["weight"]

    @field_validator('names')
    @classmethod
    def drop_blank_names(cls, v):
        """Filter out empty names."""
        return [n for n in v if n and n.strip()]
