"""Storefront HTTP API routers."""

from storefront.api.catalogue import admin_router, category_router, product_router
from storefront.api.ordering import cart_router, checkout_router, order_router
from storefront.api.wishlist import wishlist_router

__all__ = [
    "product_router",
    "category_router",
    "admin_router",
    "cart_router",
    "checkout_router",
    "order_router",
    "wishlist_router",
]
