"""PriceConfig domain entity: base/adjusted price, quantity, weight and price unit."""
import logging
from typing import Optional

from menu.domain.Ingredient import PriceUnit
from menu.utilities.constants import DEFAULT_PRICE_CONFIG, QUANTITY_MAX
from menu.utilities.validators import parse_number, parse_quantity

logger = logging.getLogger(__name__)

# Form field names (camelCase, as the page sends them) -> attribute names
KEY_ALIASES = {
    "basePrice": "base_price",
    "adjustedPrice": "adjusted_price",
    "priceUnit": "price_unit",
    "base_price": "base_price",
    "adjusted_price": "adjusted_price",
    "price_unit": "price_unit",
    "quantity": "quantity",
    "weight": "weight",
}


class PriceConfig:
    def __init__(self, base_price: float = DEFAULT_PRICE_CONFIG["base_price"],
                 adjusted_price: Optional[float] = None,
                 quantity: int = DEFAULT_PRICE_CONFIG["quantity"],
                 weight: float = DEFAULT_PRICE_CONFIG["weight"],
                 price_unit: PriceUnit = PriceUnit(DEFAULT_PRICE_CONFIG["price_unit"])):
        self.base_price = base_price
        # base_price is display only; adjusted_price is what gets charged
        self.adjusted_price = base_price if adjusted_price is None else adjusted_price
        self.quantity = quantity
        self.weight = weight
        self.price_unit = price_unit

    @classmethod
    def default(cls) -> "PriceConfig":
        return cls.from_dict(DEFAULT_PRICE_CONFIG)

    @property
    def multiplier(self) -> float:
        '''Weight for per-pound pricing, 1 for per-piece pricing.'''
        return self.weight if self.price_unit == PriceUnit.POUND else 1

    def apply_change(self, key: str, value) -> bool:
        '''
        Applies one change coming from the price form.
        Returns False (and leaves the config untouched) for unknown keys or units.
        '''
        attr = KEY_ALIASES.get(key)
        if attr is None:
            logger.warning("Ignoring unknown price config key %r", key)
            return False
        if attr == "price_unit":
            unit = PriceUnit.parse(value)
            if unit is None:
                logger.warning("Ignoring unknown price unit %r", value)
                return False
            self.price_unit = unit
        elif attr == "quantity":
            self.quantity = parse_quantity(value, QUANTITY_MAX)
        elif attr == "base_price":
            # A new base price resets the adjustment
            self.base_price = parse_number(value)
            self.adjusted_price = self.base_price
        else:
            setattr(self, attr, parse_number(value))
        return True

    def __str__(self) -> str:
        unit = self.price_unit.value
        if self.price_unit == PriceUnit.POUND:
            return f"{self.quantity} x {self.weight} {unit} @ ${self.adjusted_price}/{unit} (base ${self.base_price})"
        return f"{self.quantity} {unit} @ ${self.adjusted_price}/{unit} (base ${self.base_price})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a PriceConfig from a dictionary (snake_case or camelCase keys). Missing keys use defaults.'''
        config = PriceConfig()
        d = dict(data) if isinstance(data, dict) else {}
        adjusted = d.get("adjusted_price", d.get("adjustedPrice"))
        for key in ("price_unit", "priceUnit", "quantity", "weight", "base_price", "basePrice"):
            if key in d:
                config.apply_change(key, d[key])
        if adjusted is not None:
            config.apply_change("adjusted_price", adjusted)
        return config

    def to_dict(self):
        return {
            "base_price": self.base_price,
            "adjusted_price": self.adjusted_price,
            "quantity": self.quantity,
            "weight": self.weight,
            "price_unit": self.price_unit.value,
        }
