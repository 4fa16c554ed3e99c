"""Tests for the Product aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.product.events import InventoryDecremented, ProductCreated, ProductUpdated
from storefront.product.product import Product
from storefront.shared.errors import InsufficientInventory


def _make_product(**overrides):
    defaults = {"name": "Desk Lamp", "price": 24.50, "inventory_count": 5}
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_create_product(self):
        product = _make_product()
        assert product.name == "Desk Lamp"
        assert product.price == 24.50
        assert product.inventory_count == 5
        assert product.category_id is None

    def test_create_raises_event(self):
        product = _make_product()
        created = [e for e in product._events if isinstance(e, ProductCreated)]
        assert len(created) == 1
        assert created[0].name == "Desk Lamp"

    def test_price_rounded_to_cents(self):
        product = _make_product(price=9.999)
        assert product.price == 10.00

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(price=-1)

    def test_negative_inventory_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(inventory_count=-1)

    def test_name_required(self):
        with pytest.raises(ValidationError):
            _make_product(name=None)


class TestProductUpdate:
    def test_only_given_fields_change(self):
        product = _make_product(description="Warm light")
        product.update_details(price=19.99)

        assert product.price == 19.99
        assert product.name == "Desk Lamp"
        assert product.description == "Warm light"

    def test_update_raises_event(self):
        product = _make_product()
        product.update_details(inventory_count=50)

        updated = [e for e in product._events if isinstance(e, ProductUpdated)]
        assert len(updated) == 1
        assert updated[0].inventory_count == 50


class TestInventory:
    def test_has_stock_for(self):
        product = _make_product(inventory_count=3)
        assert product.has_stock_for(3)
        assert not product.has_stock_for(4)

    def test_decrement(self):
        product = _make_product(inventory_count=5)
        product.decrement_inventory(2)
        assert product.inventory_count == 3

    def test_decrement_to_zero(self):
        product = _make_product(inventory_count=2)
        product.decrement_inventory(2)
        assert product.inventory_count == 0

    def test_decrement_raises_event(self):
        product = _make_product(inventory_count=5)
        product.decrement_inventory(2)

        events = [e for e in product._events if isinstance(e, InventoryDecremented)]
        assert len(events) == 1
        assert events[0].previous_count == 5
        assert events[0].new_count == 3

    def test_decrement_beyond_stock_rejected(self):
        product = _make_product(inventory_count=1)
        with pytest.raises(InsufficientInventory) as exc:
            product.decrement_inventory(2)

        assert exc.value.available == 1
        assert str(exc.value) == "Insufficient inventory for Desk Lamp. Available: 1"
        assert product.inventory_count == 1
