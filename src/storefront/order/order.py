"""Order aggregate: a user's cart while open, an immutable record once placed.

An Order starts life in `cart` status. Line items can be added, re-quantified
and removed only in that status, and the total is recomputed from scratch
after every change. Checkout moves the order to `pending`, fills in the
shipping details and freezes the item set.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.order.events import (
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
    OrderPlaced,
)
from storefront.shared.errors import Forbidden, InvalidState, NotFound
from storefront.shared.money import ZERO, as_amount, line_total


class OrderStatus(Enum):
    CART = "cart"
    PENDING = "pending"


@storefront.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)  # Unit price captured when first added

    @property
    def subtotal(self):
        return line_total(self.quantity, self.price)


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.CART.value)
    items = HasMany(OrderItem)
    total_price = Float(default=0.0)
    shipping_address = String(max_length=500, sanitize=False)
    shipping_phone = String(max_length=20)
    created_at = DateTime()
    updated_at = DateTime()
    placed_at = DateTime()

    @invariant.post
    def placed_order_must_have_items(self):
        if self.status == OrderStatus.PENDING.value and not self.items:
            raise ValidationError({"items": ["A placed order must contain at least one item"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open_cart(cls, user_id, cart_id=None):
        """Create an empty cart for `user_id`.

        `cart_id` lets the caller supply a key derived from the user, see
        `storefront.cart.management`.
        """
        now = datetime.now(UTC)
        values = dict(
            user_id=user_id,
            status=OrderStatus.CART.value,
            total_price=0.0,
            created_at=now,
            updated_at=now,
        )
        if cart_id is not None:
            values["id"] = cart_id
        return cls(**values)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def is_cart(self):
        return self.status == OrderStatus.CART.value

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)

    def owned_by(self, user_id):
        return str(self.user_id) == str(user_id)

    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def find_item_for_product(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def calculate_total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), ZERO)

    # -------------------------------------------------------------------
    # Cart mutation
    # -------------------------------------------------------------------
    def _ensure_cart(self):
        if not self.is_cart:
            raise Forbidden("Items of a placed order cannot be changed", order_id=str(self.id))

    def _recalculate_total(self):
        self.total_price = as_amount(self.calculate_total())
        self.updated_at = datetime.now(UTC)

    def add_item(self, product_id, quantity, unit_price):
        """Add `quantity` of a product, or top up the existing line for it.

        The price is captured only when the line is first created; topping up
        keeps the original snapshot.
        """
        self._ensure_cart()
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        existing = self.find_item_for_product(product_id)
        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = OrderItem(
                product_id=product_id,
                quantity=quantity,
                price=as_amount(unit_price),
            )
            self.add_items(item)

        self._recalculate_total()

        self.raise_(
            CartItemAdded(
                order_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product_id),
                quantity=quantity,
                unit_price=item.price,
                total_price=self.total_price,
            )
        )
        return item

    def update_item_quantity(self, item_id, quantity):
        self._ensure_cart()
        item = self.find_item(item_id)
        if item is None:
            raise NotFound("Item not found in cart", item_id=str(item_id))

        previous_quantity = item.quantity
        item.quantity = quantity
        self._recalculate_total()

        self.raise_(
            CartItemQuantityUpdated(
                order_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
                total_price=self.total_price,
            )
        )

    def remove_item(self, item_id):
        self._ensure_cart()
        item = self.find_item(item_id)
        if item is None:
            raise NotFound("Item not found in cart", item_id=str(item_id))

        self.remove_items(item)
        self._recalculate_total()

        self.raise_(
            CartItemRemoved(
                order_id=str(self.id),
                item_id=str(item_id),
                product_id=str(item.product_id),
                total_price=self.total_price,
            )
        )

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def place(self, shipping_address, shipping_phone):
        """Turn the cart into a pending order. Inventory is handled by the caller."""
        if not self.is_cart:
            raise InvalidState("Only a cart can be checked out", order_id=str(self.id))
        if not self.items:
            raise InvalidState("Cart is empty", order_id=str(self.id))

        now = datetime.now(UTC)
        self.shipping_address = shipping_address
        self.shipping_phone = shipping_phone
        self.status = OrderStatus.PENDING.value
        self.placed_at = now
        self.updated_at = now

        self.raise_(
            OrderPlaced(
                order_id=str(self.id),
                user_id=str(self.user_id),
                total_price=self.total_price,
                item_count=self.item_count,
                placed_at=now,
            )
        )
