from decimal import Decimal
from types import SimpleNamespace
from app.utils.inventory_calculations import (
    assign_display_order,
    build_order_map,
    parse_weight,
    reconcile_weights,
)
from app.utils.validators.validation_utils import InventoryValidator, parse_number

def make_item(product_id, quantity=1, product_name=None):
    return SimpleNamespace(product_id=product_id, quantity=quantity, product_name=product_name)

class TestParseNumber:
    def test_numbers_and_strings(self):
        assert parse_number(3) == Decimal("3")
        assert parse_number(" 2.5 ") == Decimal("2.5")
        assert parse_number(0.1) == Decimal("0.1")

    def test_rejected_values(self):
        for value in (None, "", "   ", "abc", True, "nan", "inf"):
            assert parse_number(value) is None

class TestReconcileWeights:
    def test_both_sides_given(self):
        reading = reconcile_weights("1200", 400)
        assert reading.net_weight == Decimal("800")

    def test_zero_is_missing(self):
        assert parse_weight(0) is None
        reading = reconcile_weights(0, 400, fallback_full=1000)
        assert reading.full_weight == Decimal("1000")
        assert reading.net_weight == Decimal("600")

    def test_fallback_per_side(self):
        reading = reconcile_weights(1500, None, fallback_full=1000, fallback_empty=300)
        assert reading.full_weight == Decimal("1500")
        assert reading.empty_weight == Decimal("300")
        assert reading.net_weight == Decimal("1200")

    def test_no_net_when_incomplete_or_not_positive(self):
        assert reconcile_weights(1000, None).net_weight is None
        assert reconcile_weights(400, 400).net_weight is None
        assert reconcile_weights(300, 400).net_weight is None

class TestDisplayOrder:
    def test_without_previous_count(self):
        items = [make_item(3), make_item(1), make_item(2)]
        ordered = assign_display_order(items, {})
        assert [(i.product_id, order) for i, order in ordered] == [(3, 1), (1, 2), (2, 3)]

    def test_new_products_first(self):
        previous = build_order_map([(1, 1), (2, 2)])
        items = [make_item(1), make_item(2), make_item(3)]
        ordered = assign_display_order(items, previous)
        assert [(i.product_id, order) for i, order in ordered] == [(3, 1), (1, 2), (2, 3)]

    def test_carried_products_follow_previous_order(self):
        previous = {10: 3, 20: 1, 30: 2}
        items = [make_item(10), make_item(99), make_item(20), make_item(30), make_item(98)]
        ordered = assign_display_order(items, previous)
        assert [i.product_id for i, _ in ordered] == [99, 98, 20, 30, 10]
        assert [order for _, order in ordered] == [1, 2, 3, 4, 5]

class TestValidateQuantities:
    def test_valid(self):
        is_valid, _ = InventoryValidator.validate_quantities([make_item(1, "2"), make_item(2, 0.5)])
        assert is_valid

    def test_names_offending_product(self):
        is_valid, message = InventoryValidator.validate_quantities(
            [make_item(1, 1), make_item(2, 0, product_name="Lemons")]
        )
        assert not is_valid
        assert message == "Quantity must be greater than 0 for Lemons"

    def test_falls_back_to_position(self):
        is_valid, message = InventoryValidator.validate_quantities([make_item(1, "abc")])
        assert not is_valid
        assert message == "Quantity must be greater than 0 for product 1"
