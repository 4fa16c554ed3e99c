"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order, OrderStatus

_PLACED_STATUSES = [status.value for status in OrderStatus if status is not OrderStatus.CART]


@storefront.repository(part_of=Order)
class OrderRepository:
    def active_cart_for(self, user_id):
        """Return the user's open cart, or None."""
        carts = self._dao.query.filter(user_id=str(user_id), status=OrderStatus.CART.value).all().items
        return carts[0] if carts else None

    def count_for(self, user_id):
        return self._dao.query.filter(user_id=str(user_id)).all().total

    def history_for(self, user_id, offset=0, limit=10):
        """Return a page of the user's placed orders, newest first."""
        return (
            self._dao.query.filter(user_id=str(user_id), status__in=_PLACED_STATUSES)
            .order_by("-placed_at")
            .offset(offset)
            .limit(limit)
            .all()
        )
