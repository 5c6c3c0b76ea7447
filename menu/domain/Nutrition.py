"""NutritionInfo value object: calories, protein, carbs, fat."""
import math
from typing import Dict, Optional

from menu.utilities.constants import NUTRIENTS, NUTRIENT_SUFFIX


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (0.5 -> 1, 2.5 -> 3). Overflowed values count as 0."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


class NutritionInfo:
    def __init__(self, calories: float = 0, protein: float = 0, carbs: float = 0, fat: float = 0):
        self.calories = calories
        self.protein = protein
        self.carbs = carbs
        self.fat = fat

    def __add__(self, other: "NutritionInfo") -> "NutritionInfo":
        if not isinstance(other, NutritionInfo):
            return NotImplemented
        return NutritionInfo(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
        )

    def scaled(self, multiplier: float) -> "NutritionInfo":
        return NutritionInfo(
            calories=self.calories * multiplier,
            protein=self.protein * multiplier,
            carbs=self.carbs * multiplier,
            fat=self.fat * multiplier,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, NutritionInfo):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return ", ".join(f"{k.capitalize()}: {v}" for k, v in self.display().items())

    __repr__ = __str__

    def rounded(self) -> Dict[str, int]:
        return {k: round_half_up(getattr(self, k)) for k in NUTRIENTS}

    def display(self) -> Dict[str, str]:
        '''Rounded values with units, e.g. {"calories": "125 kcal", "protein": "13g"}.'''
        return {k: f"{v}{NUTRIENT_SUFFIX[k]}" for k, v in self.rounded().items()}

    @staticmethod
    def from_dict(data: Optional[dict]) -> "NutritionInfo":
        '''Creates a NutritionInfo from a dictionary. Missing or negative fields count as zero.'''
        d = data if isinstance(data, dict) else {}
        values = {}
        for k in NUTRIENTS:
            try:
                v = float(d.get(k) or 0)
            except (TypeError, ValueError):
                v = 0.0
            values[k] = v if v > 0 else 0.0
        return NutritionInfo(**values)

    def to_dict(self) -> Dict[str, float]:
        return {k: _finite(getattr(self, k)) for k in NUTRIENTS}
