"""Wishlist management: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.product.management import load_product
from storefront.domain import logger, storefront
from storefront.shared.errors import Conflict, NotFound
from storefront.wishlist.wishlist import WishlistEntry


@storefront.command(part_of="WishlistEntry")
class AddToWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="WishlistEntry")
class RemoveFromWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=WishlistEntry)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        product = load_product(command.product_id)
        repo = current_domain.repository_for(WishlistEntry)

        if repo.find(command.user_id, product.id) is not None:
            raise Conflict("Product already in wishlist", product_id=str(product.id))

        entry = WishlistEntry.create(user_id=command.user_id, product_id=product.id)
        repo.add(entry)

        logger.info("wishlist_item_added", user_id=str(command.user_id), product_id=str(product.id))
        return str(entry.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistEntry)
        entry = repo.find(command.user_id, command.product_id)
        if entry is None:
            raise NotFound("Product not in wishlist", product_id=str(command.product_id))

        repo._dao.delete(entry)
        logger.info("wishlist_item_removed", user_id=str(command.user_id), product_id=str(command.product_id))
