"""Storefront error taxonomy.

Each error carries a human-readable message, a semantic category and optional
details. The HTTP layer maps categories to status codes; the domain never
deals in status codes itself.
"""

from typing import Any


class StorefrontError(Exception):
    category = "error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "error": self.category, **self.details}


class NotFound(StorefrontError):
    """A referenced product, category, order, item or wishlist entry does not exist."""

    category = "not_found"


class Forbidden(StorefrontError):
    """The caller does not own the target, or the target is no longer mutable."""

    category = "forbidden"


class InvalidState(StorefrontError):
    """The target exists but is not in a state that allows the operation."""

    category = "invalid_state"


class InsufficientInventory(StorefrontError):
    category = "insufficient_inventory"

    def __init__(self, product_id: str, product_name: str, available: int):
        super().__init__(
            f"Insufficient inventory for {product_name}. Available: {available}",
            product_id=product_id,
            product_name=product_name,
            available=available,
        )
        self.product_id = product_id
        self.product_name = product_name
        self.available = available


class Conflict(StorefrontError):
    category = "conflict"
