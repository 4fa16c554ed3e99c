"""Wishlist entries: the products a user has saved for later.

Each (user, product) pair is its own small aggregate whose identity is derived
from the pair, so a duplicate insert targets the existing record.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier

from storefront.domain import storefront
from storefront.shared.keys import derived_id
from storefront.shared.paging import fetch_all


@storefront.aggregate
class WishlistEntry:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    added_at = DateTime()

    @staticmethod
    def key_for(user_id, product_id):
        return derived_id("wishlist", user_id, product_id)

    @classmethod
    def create(cls, user_id, product_id):
        return cls(
            id=cls.key_for(user_id, product_id),
            user_id=user_id,
            product_id=product_id,
            added_at=datetime.now(UTC),
        )


@storefront.repository(part_of=WishlistEntry)
class WishlistRepository:
    def for_user(self, user_id):
        """Return every entry of the user, oldest first."""
        return fetch_all(self._dao.query.filter(user_id=str(user_id)), order_by=["added_at", "id"])

    def find(self, user_id, product_id):
        entries = self._dao.query.filter(id=WishlistEntry.key_for(user_id, product_id)).all().items
        return entries[0] if entries else None
