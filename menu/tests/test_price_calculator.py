import unittest
from decimal import Decimal
from menu.domain.Ingredient import Ingredient, PriceUnit
from menu.domain.Nutrition import NutritionInfo
from menu.domain.PriceConfig import PriceConfig
from menu.infra.Catalog_Repository import find_ingredient
from menu.logic.pricing.calculator import (
    calculate_total_nutrition, calculate_total_price, format_price
)


class TestTotalPrice(unittest.TestCase):

    def test_per_piece(self):
        config = PriceConfig(adjusted_price=2.00, quantity=3, price_unit=PriceUnit.PIECE)
        self.assertEqual(calculate_total_price(config), "6.00")

    def test_per_pound(self):
        config = PriceConfig(adjusted_price=4.00, quantity=2, weight=0.5, price_unit=PriceUnit.POUND)
        self.assertEqual(calculate_total_price(config), "4.00")

    def test_weight_ignored_per_piece(self):
        config = PriceConfig(adjusted_price=4.00, quantity=2, weight=0.5, price_unit=PriceUnit.PIECE)
        self.assertEqual(calculate_total_price(config), "8.00")

    def test_default_config(self):
        # 7.99 x 0.1 lb x 1
        self.assertEqual(calculate_total_price(PriceConfig.default()), "0.80")

    def test_base_price_is_not_charged(self):
        config = PriceConfig(base_price=10.0, adjusted_price=5.0, quantity=1, price_unit=PriceUnit.PIECE)
        self.assertEqual(calculate_total_price(config), "5.00")

    def test_format_price_large_totals(self):
        self.assertEqual(Decimal(format_price(1e30)), Decimal(1e30))
        self.assertTrue(format_price(1e30).endswith(".00"))
        self.assertEqual(format_price(float("inf")), "0.00")
        self.assertEqual(format_price(float("nan")), "0.00")

    def test_overflowing_total_is_zero(self):
        config = PriceConfig(adjusted_price=1e200, weight=1e200, quantity=1, price_unit=PriceUnit.POUND)
        self.assertEqual(calculate_total_price(config), "0.00")

    def test_format_price_rounds_half_up(self):
        self.assertEqual(format_price(0.125), "0.13")
        self.assertEqual(format_price(0), "0.00")
        self.assertEqual(format_price(12.5), "12.50")


class TestTotalNutrition(unittest.TestCase):

    def setUp(self):
        self.beef = find_ingredient("Ground Beef")
        self.peppers = find_ingredient("Bell Peppers")

    def test_empty_selection_is_zero(self):
        total = calculate_total_nutrition(PriceConfig.default(), [])
        self.assertEqual(total, NutritionInfo())

    def test_per_piece_multiplier_is_one(self):
        config = PriceConfig(price_unit=PriceUnit.PIECE, weight=5)
        total = calculate_total_nutrition(config, [self.beef, self.peppers])
        self.assertEqual(total.calories, 280)
        self.assertEqual(total.protein, 27)
        self.assertEqual(total.carbs, 7)
        self.assertAlmostEqual(total.fat, 15.2)

    def test_per_pound_uses_weight(self):
        config = PriceConfig(price_unit=PriceUnit.POUND, weight=0.5)
        total = calculate_total_nutrition(config, [self.beef, self.peppers])
        self.assertAlmostEqual(total.calories, 140)
        self.assertAlmostEqual(total.protein, 13.5)
        self.assertEqual(total.rounded()["calories"], 140)

    def test_order_irrelevant(self):
        config = PriceConfig(price_unit=PriceUnit.POUND, weight=0.3)
        a = calculate_total_nutrition(config, [self.beef, self.peppers])
        b = calculate_total_nutrition(config, [self.peppers, self.beef])
        self.assertEqual(a.rounded(), b.rounded())

    def test_missing_nutrition_contributes_nothing(self):
        plain = Ingredient("Salt", 0.5, "Spice")
        config = PriceConfig(price_unit=PriceUnit.PIECE)
        total = calculate_total_nutrition(config, [plain, self.peppers])
        self.assertEqual(total.calories, 30)


if __name__ == '__main__':
    unittest.main()
