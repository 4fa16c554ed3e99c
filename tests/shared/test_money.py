from decimal import Decimal

from storefront.shared.keys import derived_id
from storefront.shared.money import as_amount, line_total, to_money


class TestMoney:
    def test_to_money_quantizes(self):
        assert to_money(1.005) == Decimal("1.01")
        assert to_money("2") == Decimal("2.00")
        assert to_money(None) == Decimal("0.00")

    def test_line_total_avoids_float_drift(self):
        assert line_total(3, 0.1) == Decimal("0.30")

    def test_as_amount(self):
        assert as_amount(Decimal("19.999")) == 20.0


class TestDerivedId:
    def test_stable_for_same_parts(self):
        assert derived_id("cart", "user-1", 0) == derived_id("cart", "user-1", 0)

    def test_differs_by_part(self):
        assert derived_id("cart", "user-1", 0) != derived_id("cart", "user-1", 1)
