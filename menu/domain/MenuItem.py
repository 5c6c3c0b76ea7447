"""MenuItem domain entity: the menu item being composed on the form.

Holds the free-text details, the ingredient selection and the price
configuration. Totals are derived on demand and never stored.
"""
from typing import List, Optional

from menu.domain.Ingredient import Ingredient
from menu.domain.Nutrition import NutritionInfo
from menu.domain.PriceConfig import PriceConfig
from menu.logic.pricing.calculator import calculate_total_nutrition, calculate_total_price


class MenuItem:
    def __init__(self, name: str = "", description: str = "", category: str = "",
                 ingredients: Optional[List[Ingredient]] = None, price_config: Optional[PriceConfig] = None):
        self.name = name
        self.description = description
        self.category = category
        self.ingredients: List[Ingredient] = []
        for ing in ingredients or []:
            if ing not in self.ingredients:
                self.ingredients.append(ing)
        self.price_config = price_config or PriceConfig.default()

    def set_details(self, name: Optional[str] = None, description: Optional[str] = None,
                    category: Optional[str] = None):
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category

    def reset(self):
        '''Clears the details and selection and restores the default price config.'''
        self.name = self.description = self.category = ""
        self.ingredients = []
        self.price_config = PriceConfig.default()

    def is_selected(self, ingredient: Ingredient) -> bool:
        return ingredient in self.ingredients

    def toggle_ingredient(self, ingredient: Ingredient) -> bool:
        '''
        Selects the ingredient if absent, deselects it if present.
        Returns True when the ingredient is selected afterwards.
        '''
        if ingredient in self.ingredients:
            self.ingredients = [i for i in self.ingredients if i != ingredient]
            return False
        self.ingredients.append(ingredient)
        return True

    def apply_price_change(self, key: str, value) -> bool:
        return self.price_config.apply_change(key, value)

    def total_price(self) -> str:
        return calculate_total_price(self.price_config)

    def total_nutrition(self) -> NutritionInfo:
        return calculate_total_nutrition(self.price_config, self.ingredients)

    def selected_names(self) -> List[str]:
        return [ing.name for ing in self.ingredients]

    def __str__(self) -> str:
        names = ", ".join(self.selected_names()) or "No ingredients selected"
        return f"{self.name or '(unnamed)'} [{self.category}] - {names} - ${self.total_price()}"

    __repr__ = __str__

    def summary(self) -> dict:
        '''Details, selection, price config and derived totals, ready for JSON.'''
        nutrition = self.total_nutrition()
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "ingredients": self.selected_names(),
            "price_config": self.price_config.to_dict(),
            "total_price": self.total_price(),
            "nutrition": nutrition.to_dict(),
            "nutrition_display": nutrition.display(),
        }
