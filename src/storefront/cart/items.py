"""Cart line items: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.product.management import load_product
from storefront.domain import logger, storefront
from storefront.cart.management import open_cart_for
from storefront.order.order import Order, OrderItem
from storefront.shared.errors import Forbidden, NotFound


@storefront.command(part_of="Order")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Order")
class UpdateCartItem:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Order")
class RemoveCartItem:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


def _cart_holding(user_id, item_id):
    """Return the user's cart when it holds `item_id`.

    An item that exists elsewhere (another user's cart, or any placed order)
    is Forbidden; an id that matches no item at all is NotFound.
    """
    cart = current_domain.repository_for(Order).active_cart_for(user_id)
    if cart is not None and cart.find_item(item_id) is not None:
        return cart

    items = current_domain.repository_for(OrderItem)._dao.query.filter(id=str(item_id)).all().items
    if items:
        raise Forbidden("This item does not belong to your cart", item_id=str(item_id))
    raise NotFound(f"Cart item {item_id} not found", item_id=str(item_id))


@storefront.command_handler(part_of=Order)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = load_product(command.product_id)
        cart = open_cart_for(command.user_id)

        cart.add_item(
            product_id=product.id,
            quantity=command.quantity,
            unit_price=product.price,
        )
        current_domain.repository_for(Order).add(cart)

        logger.info(
            "cart_item_added",
            order_id=str(cart.id),
            product_id=str(product.id),
            quantity=command.quantity,
            total_price=cart.total_price,
        )
        return str(cart.id)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        cart = _cart_holding(command.user_id, command.item_id)
        cart.update_item_quantity(command.item_id, command.quantity)
        current_domain.repository_for(Order).add(cart)

        logger.info("cart_item_updated", order_id=str(cart.id), item_id=str(command.item_id))
        return str(cart.id)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        cart = _cart_holding(command.user_id, command.item_id)
        cart.remove_item(command.item_id)
        current_domain.repository_for(Order).add(cart)

        logger.info("cart_item_removed", order_id=str(cart.id), item_id=str(command.item_id))
        return str(cart.id)
