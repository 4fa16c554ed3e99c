"""Cart management: opening the user's single active cart.

Every user has at most one Order in `cart` status. The cart's identity is
derived from the user id and the number of orders the user already owns, so
two requests racing to open the first cart compute the same key and end up on
the same record. Checkout adds an order to the count, which moves the next
cart onto a fresh key.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.order.order import Order
from storefront.shared.keys import derived_id


@storefront.command(part_of="Order")
class OpenCart:
    """Return the user's cart, creating an empty one when none exists."""

    user_id = Identifier(required=True)


def open_cart_for(user_id):
    repo = current_domain.repository_for(Order)

    cart = repo.active_cart_for(user_id)
    if cart is not None:
        return cart

    generation = repo.count_for(user_id)
    while True:
        cart_id = derived_id("cart", user_id, generation)
        try:
            existing = repo.get(cart_id)
        except ObjectNotFoundError:
            break
        if existing.is_cart:
            return existing
        generation += 1

    cart = Order.open_cart(user_id=user_id, cart_id=cart_id)
    repo.add(cart)
    logger.info("cart_opened", user_id=str(user_id), order_id=cart_id)
    return cart


@storefront.command_handler(part_of=Order)
class ManageCartHandler:
    @handle(OpenCart)
    def open_cart(self, command):
        return str(open_cart_for(command.user_id).id)
