"""Checkout: turn the user's cart into a pending order and commit its stock.

The handler runs inside the Unit of Work that Protean opens for every command
handler, so the order's status change and every product's inventory decrement
are persisted together or not at all.

Stock is validated before anything is written and reports the first
shortfall. Each decrement is then conditional: `Product.decrement_inventory`
refuses to go below the requested quantity and the `inventory_count` field
rejects negatives. A concurrent checkout that committed first leaves this
handler holding a stale Product version, which Protean's optimistic version
check rejects on save, rolling back the whole Unit of Work instead of
overselling.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.domain import logger, storefront
from storefront.order.order import Order
from storefront.shared.errors import InsufficientInventory, InvalidState, NotFound


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    shipping_address = String(required=True, max_length=500, sanitize=False)
    shipping_phone = String(required=True, max_length=20)


def _products_for(cart):
    products = current_domain.repository_for(Product).get_many(item.product_id for item in cart.items)
    for item in cart.items:
        if str(item.product_id) not in products:
            raise NotFound(
                f"Product {item.product_id} in cart no longer exists",
                product_id=str(item.product_id),
            )
    return products


def _ensure_stock(cart, products):
    for item in cart.items:
        product = products[str(item.product_id)]
        if not product.has_stock_for(item.quantity):
            raise InsufficientInventory(
                product_id=str(product.id),
                product_name=product.name,
                available=product.inventory_count,
            )


@storefront.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order_repo = current_domain.repository_for(Order)
        product_repo = current_domain.repository_for(Product)

        cart = order_repo.active_cart_for(command.user_id)
        if cart is None or not cart.items:
            raise InvalidState("Cart is empty", user_id=str(command.user_id))

        products = _products_for(cart)
        try:
            _ensure_stock(cart, products)
        except InsufficientInventory as exc:
            logger.info(
                "checkout_rejected",
                order_id=str(cart.id),
                product_id=exc.product_id,
                available=exc.available,
            )
            raise

        cart.place(command.shipping_address, command.shipping_phone)
        order_repo.add(cart)

        for item in cart.items:
            product = products[str(item.product_id)]
            product.decrement_inventory(item.quantity)
            product_repo.add(product)

        logger.info(
            "order_placed",
            order_id=str(cart.id),
            user_id=str(command.user_id),
            total_price=cart.total_price,
            item_count=cart.item_count,
        )
        return str(cart.id)
