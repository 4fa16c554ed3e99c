"""Application tests for checkout."""

import pytest
from factories import create_product
from protean import UnitOfWork
from protean.exceptions import ExpectedVersionError, ValidationError
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.cart.items import AddToCart, UpdateCartItem
from storefront.cart.management import OpenCart
from storefront.checkout.checkout import PlaceOrder
from storefront.order.order import Order, OrderStatus
from storefront.shared.errors import Forbidden, InsufficientInventory, InvalidState


def _add(product_id, quantity=1, user_id="user-001"):
    command = AddToCart(user_id=user_id, product_id=product_id, quantity=quantity)
    return current_domain.process(command, asynchronous=False)


def _checkout(user_id="user-001", address="1 Main St", phone="555-0100"):
    command = PlaceOrder(user_id=user_id, shipping_address=address, shipping_phone=phone)
    return current_domain.process(command, asynchronous=False)


def _inventory(product_id):
    return current_domain.repository_for(Product).get(product_id).inventory_count


class TestPlaceOrder:
    def test_checkout_places_order_and_decrements_stock(self):
        lamp = create_product(name="Lamp", price=20.00, inventory_count=5)
        bulb = create_product(name="Bulb", price=2.50, inventory_count=10)
        _add(lamp, 2)
        cart_id = _add(bulb, 4)

        order_id = _checkout()

        assert order_id == cart_id
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PENDING.value
        assert order.total_price == 50.00
        assert order.shipping_address == "1 Main St"
        assert order.shipping_phone == "555-0100"
        assert order.placed_at is not None

        assert _inventory(lamp) == 3
        assert _inventory(bulb) == 6

    def test_exact_stock_can_be_bought(self):
        product_id = create_product(inventory_count=2)
        _add(product_id, 2)
        _checkout()

        assert _inventory(product_id) == 0

    def test_next_cart_is_fresh(self):
        product_id = create_product()
        cart_id = _add(product_id, 1)
        _checkout()

        new_cart_id = current_domain.process(OpenCart(user_id="user-001"), asynchronous=False)
        assert new_cart_id != cart_id
        new_cart = current_domain.repository_for(Order).get(new_cart_id)
        assert new_cart.is_cart
        assert new_cart.items == []

    def test_placed_order_items_are_frozen(self):
        product_id = create_product()
        cart_id = _add(product_id, 1)
        _checkout()
        item_id = current_domain.repository_for(Order).get(cart_id).items[0].id

        with pytest.raises(Forbidden):
            current_domain.process(
                UpdateCartItem(user_id="user-001", item_id=item_id, quantity=2),
                asynchronous=False,
            )

    def test_shipping_details_required(self):
        product_id = create_product()
        _add(product_id, 1)
        with pytest.raises(ValidationError):
            _checkout(address=None)


class TestCheckoutRejections:
    def test_empty_cart(self):
        current_domain.process(OpenCart(user_id="user-001"), asynchronous=False)
        with pytest.raises(InvalidState, match="Cart is empty"):
            _checkout()

    def test_no_cart_at_all(self):
        with pytest.raises(InvalidState):
            _checkout(user_id="user-without-cart")

    def test_insufficient_inventory_changes_nothing(self):
        plenty = create_product(name="Plenty", inventory_count=10)
        scarce = create_product(name="Scarce", inventory_count=1)
        _add(plenty, 2)
        cart_id = _add(scarce, 3)

        with pytest.raises(InsufficientInventory) as exc:
            _checkout()

        assert exc.value.product_name == "Scarce"
        assert exc.value.available == 1
        assert current_domain.repository_for(Order).get(cart_id).is_cart
        assert _inventory(plenty) == 10
        assert _inventory(scarce) == 1

    def test_last_unit_goes_to_first_buyer(self):
        product_id = create_product(inventory_count=1)
        _add(product_id, 1, user_id="user-001")
        _add(product_id, 1, user_id="user-002")

        _checkout(user_id="user-001")
        with pytest.raises(InsufficientInventory):
            _checkout(user_id="user-002")

        assert _inventory(product_id) == 0

    def test_stale_product_snapshot_cannot_overwrite_committed_checkout(self):
        product_id = create_product(inventory_count=1)
        repo = current_domain.repository_for(Product)
        stale = repo.get(product_id)

        _add(product_id, 1, user_id="user-002")
        _checkout(user_id="user-002")

        with pytest.raises(ExpectedVersionError):
            with UnitOfWork():
                stale.decrement_inventory(1)
                repo.add(stale)

        assert _inventory(product_id) == 0

    def test_failure_mid_checkout_rolls_back_everything(self, monkeypatch):
        first = create_product(name="First", inventory_count=5)
        second = create_product(name="Second", inventory_count=5)
        _add(first, 1)
        cart_id = _add(second, 1)

        original = Product.decrement_inventory
        calls = []

        def failing_decrement(self, quantity):
            calls.append(self.id)
            if len(calls) == 2:
                raise RuntimeError("storage unavailable")
            return original(self, quantity)

        monkeypatch.setattr(Product, "decrement_inventory", failing_decrement)

        with pytest.raises(RuntimeError):
            _checkout()

        assert len(calls) == 2
        assert current_domain.repository_for(Order).get(cart_id).is_cart
        assert _inventory(first) == 5
        assert _inventory(second) == 5
