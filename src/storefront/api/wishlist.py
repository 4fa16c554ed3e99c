"""FastAPI routes for the Wishlist context."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.api.catalogue_schemas import MessageResponse, ProductResponse
from storefront.category.tree import CategoryTree
from storefront.product.product import Product
from storefront.shared.http import current_user_id
from storefront.api.wishlist_schemas import AddToWishlistRequest
from storefront.wishlist.management import AddToWishlist, RemoveFromWishlist
from storefront.wishlist.wishlist import WishlistEntry

wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@wishlist_router.get("", response_model=list[ProductResponse])
async def list_wishlist(user_id: str = Depends(current_user_id)) -> list[ProductResponse]:
    entries = current_domain.repository_for(WishlistEntry).for_user(user_id)
    products = current_domain.repository_for(Product).get_many(entry.product_id for entry in entries)
    tree = CategoryTree.load()

    response = []
    for entry in entries:
        product = products.get(str(entry.product_id))
        if product is None:
            continue
        category = tree.get(product.category_id) if product.category_id else None
        response.append(ProductResponse.from_product(product, category))
    return response


@wishlist_router.post("", status_code=201, response_model=MessageResponse)
async def add_to_wishlist(body: AddToWishlistRequest, user_id: str = Depends(current_user_id)) -> MessageResponse:
    current_domain.process(AddToWishlist(user_id=user_id, product_id=body.product_id), asynchronous=False)
    return MessageResponse(message="Product added to wishlist")


@wishlist_router.delete("/{product_id}", response_model=MessageResponse)
async def remove_from_wishlist(product_id: str, user_id: str = Depends(current_user_id)) -> MessageResponse:
    current_domain.process(RemoveFromWishlist(user_id=user_id, product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product removed from wishlist")
