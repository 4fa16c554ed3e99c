"""Storefront domain: catalogue, cart, checkout, order history and wishlists.

All aggregates share one domain so that checkout can change an Order and the
Products it draws stock from inside a single Unit of Work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
