"""Ingredient domain entity: name, price, category, price unit, optional nutrition."""
from enum import Enum
from typing import Optional

from menu.domain.Nutrition import NutritionInfo


class PriceUnit(str, Enum):
    POUND = "pound"
    PIECE = "piece"

    @property
    def label(self) -> str:
        return f"Per {self.value.capitalize()}"

    @classmethod
    def parse(cls, value) -> Optional["PriceUnit"]:
        '''Returns the matching unit (case-insensitive) or None for unknown values.'''
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Ingredient:
    def __init__(self, name: str = "", price: float = 0.0, category: str = "",
                 price_unit: PriceUnit = PriceUnit.POUND, nutrition: Optional[NutritionInfo] = None):
        self.name = name
        self.price = price
        self.category = category
        self.price_unit = price_unit
        self.nutrition = nutrition

    # The name is the identity key: a catalog never holds two ingredients with the same name.
    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def price_label(self) -> str:
        return f"${self.price}/{self.price_unit.value}"

    def __str__(self) -> str:
        parts = [f"{self.name} ({self.category})", self.price_label]
        if self.nutrition:
            parts.append(str(self.nutrition))
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        unit = PriceUnit.parse(d.get("price_unit", d.get("priceUnit"))) or PriceUnit.POUND
        nutrition = d.get("nutrition")
        try:
            price = float(d.get("price") or 0)
        except (TypeError, ValueError):
            price = 0.0
        return Ingredient(
            name=str(d.get("name", "")),
            price=price,
            category=str(d.get("category", "")),
            price_unit=unit,
            nutrition=NutritionInfo.from_dict(nutrition) if isinstance(nutrition, dict) else None,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "price_unit": self.price_unit.value,
            "price_label": self.price_label,
            "nutrition": self.nutrition.to_dict() if self.nutrition else None,
        }
