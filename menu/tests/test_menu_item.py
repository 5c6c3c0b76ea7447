import unittest
from menu.domain.Ingredient import PriceUnit
from menu.domain.MenuItem import MenuItem
from menu.infra.Catalog_Repository import find_ingredient, load_catalog


class TestMenuItem(unittest.TestCase):

    def setUp(self):
        self.item = MenuItem()
        self.beef = find_ingredient("Ground Beef")
        self.cheese = find_ingredient("Mozzarella")

    def test_toggle_twice_restores_selection(self):
        self.item.toggle_ingredient(self.cheese)
        before = list(self.item.ingredients)
        self.assertTrue(self.item.toggle_ingredient(self.beef))
        self.assertFalse(self.item.toggle_ingredient(self.beef))
        self.assertEqual(self.item.ingredients, before)

    def test_toggle_uses_name_identity(self):
        self.item.toggle_ingredient(self.beef)
        copy = load_catalog()[0]
        self.assertTrue(self.item.is_selected(copy))
        self.item.toggle_ingredient(copy)
        self.assertEqual(self.item.ingredients, [])

    def test_selection_keeps_order_without_duplicates(self):
        item = MenuItem(ingredients=[self.cheese, self.beef, self.cheese])
        self.assertEqual(item.selected_names(), ["Mozzarella", "Ground Beef"])

    def test_set_details_partial(self):
        self.item.set_details(name="Supreme Pizza", category="Pizza")
        self.item.set_details(description="Loaded")
        self.assertEqual((self.item.name, self.item.description, self.item.category),
                         ("Supreme Pizza", "Loaded", "Pizza"))

    def test_reset(self):
        self.item.set_details(name="Calzone")
        self.item.toggle_ingredient(self.cheese)
        self.item.apply_price_change("quantity", 4)
        self.item.reset()
        self.assertEqual(self.item.name, "")
        self.assertEqual(self.item.ingredients, [])
        self.assertEqual(self.item.price_config.quantity, 1)

    def test_summary(self):
        self.item.toggle_ingredient(self.beef)
        self.item.apply_price_change("priceUnit", PriceUnit.PIECE.value)
        self.item.apply_price_change("basePrice", "2")
        self.item.apply_price_change("quantity", "3")
        summary = self.item.summary()
        self.assertEqual(summary["ingredients"], ["Ground Beef"])
        self.assertEqual(summary["total_price"], "6.00")
        self.assertEqual(summary["nutrition_display"],
                         {"calories": "250 kcal", "protein": "26g", "carbs": "0g", "fat": "15g"})
        self.assertEqual(summary["price_config"]["price_unit"], "piece")


if __name__ == '__main__':
    unittest.main()
