import unittest
from shoplist.domain.IngredientLine import IngredientLine
from shoplist.domain.ShoppingList import ShoppingList
from shoplist.logic.formatting.fractions import format_as_fraction
from shoplist.logic.formatting.text import format_for_display, format_item
from shoplist.logic.ingredients.quantity import parse_fraction
from shoplist.logic.shopping.list_builder import generate_from_multiple_recipes


class TestFormatAsFraction(unittest.TestCase):

    def test_common_fractions(self):
        self.assertEqual(format_as_fraction(0.5), '1/2')
        self.assertEqual(format_as_fraction(0.25), '1/4')
        self.assertEqual(format_as_fraction(0.75), '3/4')
        self.assertEqual(format_as_fraction(1 / 3), '1/3')
        self.assertEqual(format_as_fraction(2 / 3), '2/3')

    def test_mixed_numbers(self):
        self.assertEqual(format_as_fraction(2.5), '2 1/2')
        self.assertEqual(format_as_fraction(1.25), '1 1/4')
        self.assertEqual(format_as_fraction(3.75), '3 3/4')
        self.assertEqual(format_as_fraction(2.125), '2 1/8')

    def test_whole_numbers(self):
        self.assertEqual(format_as_fraction(2), '2')
        self.assertEqual(format_as_fraction(5.0), '5')

    def test_other_simple_fractions(self):
        self.assertEqual(format_as_fraction(0.2), '1/5')
        self.assertEqual(format_as_fraction(0.125), '1/8')

    def test_falls_back_to_decimal(self):
        self.assertEqual(format_as_fraction(0.03), '0.03')
        self.assertEqual(format_as_fraction(None), '')

    def test_non_finite_values(self):
        self.assertEqual(format_as_fraction(float('inf')), 'inf')
        self.assertEqual(format_as_fraction(float('nan')), 'nan')
        self.assertEqual(format_as_fraction(10 ** 400), '1' + '0' * 400)

    def test_parsed_fractions_print_back(self):
        for text in ('1/2', '1/4', '3/4', '1/3', '2/3', '2 1/2'):
            self.assertEqual(format_as_fraction(parse_fraction(text)), text)


class TestFormatItem(unittest.TestCase):

    def test_parts(self):
        self.assertEqual(format_item(IngredientLine(item='flour', quantity=2, unit='cups')), '2 cups flour')
        self.assertEqual(format_item(IngredientLine(item='milk', quantity=0.5, unit='cup')), '1/2 cup milk')
        self.assertEqual(format_item(IngredientLine(item='eggs', quantity=3)), '3 eggs')
        self.assertEqual(format_item(IngredientLine(item='salt to taste')), 'salt to taste')

    def test_unit_without_quantity_is_omitted(self):
        self.assertEqual(format_item(IngredientLine(item='butter', unit='cup')), 'butter')

    def test_infinite_quantity(self):
        self.assertEqual(format_item(IngredientLine(item='flour', quantity=float('inf'), unit='cup')), 'inf cup flour')

    def test_missing_name(self):
        self.assertEqual(format_item(IngredientLine(quantity=1)), '1 Unknown item')


class TestFormatForDisplay(unittest.TestCase):

    def setUp(self):
        recipes = [
            {'id': 'r1', 'title': 'BBQ Ribs', 'ingredients': ['2 lbs baby back ribs', '1/2 cup brown sugar', '1 tsp salt']},
            {'id': 'r2', 'title': 'BBQ Sauce', 'ingredients': ['1/4 cup brown sugar', '2 tsp salt']},
        ]
        self.sl = generate_from_multiple_recipes(recipes, 'Cookout')['shopping_list']

    def test_flat(self):
        text = format_for_display(self.sl)
        lines = text.split('\n')
        self.assertEqual(lines[0], 'Cookout')
        self.assertEqual(lines[1], '=======')
        self.assertIn('• 2 pound baby back ribs', lines)
        self.assertIn('• 3/4 cup brown sugar', lines)
        self.assertIn('• 3 teaspoon salt', lines)
        self.assertTrue(text.endswith('\nFrom 2 recipe(s)'))
        self.assertNotIn('MEAT:', text)

    def test_by_category(self):
        text = format_for_display(self.sl, organize_by_category=True)
        self.assertIn('MEAT:\n• 2 pound baby back ribs\n', text)
        self.assertIn('PANTRY:\n• 3/4 cup brown sugar\n', text)
        self.assertIn('\n\nSPICES:', text)
        self.assertTrue(text.endswith('• 3 teaspoon salt\n\n\nFrom 2 recipe(s)'))

    def test_invalid(self):
        self.assertEqual(format_for_display(None), 'Invalid shopping list')
        self.assertEqual(format_for_display(ShoppingList(title='')), 'Invalid shopping list')

    def test_no_recipes_no_footer(self):
        sl = ShoppingList(title='Loose', items=[IngredientLine(item='bread', quantity=1)])
        self.assertEqual(format_for_display(sl), 'Loose\n=====\n\n• 1 bread\n')


if __name__ == '__main__':
    unittest.main()
