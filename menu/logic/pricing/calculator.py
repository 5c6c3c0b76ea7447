"""Price and nutrition calculation for a menu item.

total price = adjusted price x quantity                 (per piece)
            = adjusted price x weight x quantity        (per pound)

Nutrition is summed over the selected ingredients, each scaled by the
configured weight when pricing per pound.
"""
from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable
from menu.domain.Ingredient import Ingredient, PriceUnit
from menu.domain.Nutrition import NutritionInfo
from menu.domain.PriceConfig import PriceConfig

_CENTS = Decimal("0.01")


def compute_total_price(config: PriceConfig) -> float:
    if config.price_unit == PriceUnit.PIECE:
        return config.adjusted_price * config.quantity
    return config.adjusted_price * config.weight * config.quantity


def format_price(amount: float) -> str:
    """Two decimals, halves rounded up ("0.125" -> "0.13")."""
    if amount == 0 or not math.isfinite(amount):
        return "0.00"
    # Decimal(float) is the exact binary value, so 0.799 rounds to "0.80" not "0.79"
    exact = Decimal(amount)
    with localcontext() as ctx:
        # room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, exact.adjusted() + 4)
        return str(exact.quantize(_CENTS, rounding=ROUND_HALF_UP))


def calculate_total_price(config: PriceConfig) -> str:
    return format_price(compute_total_price(config))


def calculate_total_nutrition(config: PriceConfig, selected: Iterable[Ingredient]) -> NutritionInfo:
    """Sum of each selected ingredient's nutrition times the config multiplier.

    Ingredients without nutrition contribute nothing; an empty selection is all zeros.
    """
    multiplier = config.multiplier
    total = NutritionInfo()
    for ingredient in selected:
        if ingredient.nutrition is None:
            continue
        total = total + ingredient.nutrition.scaled(multiplier)
    return total


__all__ = ["compute_total_price", "format_price", "calculate_total_price", "calculate_total_nutrition"]
