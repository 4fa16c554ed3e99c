"""FastAPI routes for the Ordering context: cart, checkout and order history."""

from fastapi import APIRouter, Depends, Query
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.api.ordering_schemas import (
    AddToCartRequest,
    CheckoutRequest,
    OrderPage,
    OrderResponse,
    UpdateCartItemRequest,
)
from storefront.cart.items import AddToCart, RemoveCartItem, UpdateCartItem
from storefront.cart.management import OpenCart
from storefront.checkout.checkout import PlaceOrder
from storefront.order.order import Order
from storefront.shared.errors import Forbidden, NotFound
from storefront.shared.http import current_user_id

ORDERS_PER_PAGE = 10

cart_router = APIRouter(prefix="/cart", tags=["cart"])
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _order_response(order) -> OrderResponse:
    products = current_domain.repository_for(Product).get_many(item.product_id for item in order.items)
    return OrderResponse.from_order(order, products)


def _load_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFound(f"Order {order_id} not found", order_id=order_id) from None


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.get("", response_model=OrderResponse)
async def show_cart(user_id: str = Depends(current_user_id)) -> OrderResponse:
    cart_id = current_domain.process(OpenCart(user_id=user_id), asynchronous=False)
    return _order_response(_load_order(cart_id))


@cart_router.post("", response_model=OrderResponse)
async def add_cart_item(body: AddToCartRequest, user_id: str = Depends(current_user_id)) -> OrderResponse:
    command = AddToCart(
        user_id=user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    cart_id = current_domain.process(command, asynchronous=False)
    return _order_response(_load_order(cart_id))


@cart_router.patch("/{item_id}", response_model=OrderResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, user_id: str = Depends(current_user_id)
) -> OrderResponse:
    command = UpdateCartItem(
        user_id=user_id,
        item_id=item_id,
        quantity=body.quantity,
    )
    cart_id = current_domain.process(command, asynchronous=False)
    return _order_response(_load_order(cart_id))


@cart_router.delete("/{item_id}", response_model=OrderResponse)
async def remove_cart_item(item_id: str, user_id: str = Depends(current_user_id)) -> OrderResponse:
    command = RemoveCartItem(user_id=user_id, item_id=item_id)
    cart_id = current_domain.process(command, asynchronous=False)
    return _order_response(_load_order(cart_id))


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
@checkout_router.post("", status_code=201, response_model=OrderResponse)
async def checkout(body: CheckoutRequest, user_id: str = Depends(current_user_id)) -> OrderResponse:
    """Place the caller's cart as a pending order and commit its stock."""
    command = PlaceOrder(
        user_id=user_id,
        shipping_address=body.shipping_address,
        shipping_phone=body.shipping_phone,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order_response(_load_order(order_id))


# ---------------------------------------------------------------------------
# Order history
# ---------------------------------------------------------------------------
@order_router.get("", response_model=OrderPage)
async def list_orders(page: int = Query(1, ge=1), user_id: str = Depends(current_user_id)) -> OrderPage:
    result = current_domain.repository_for(Order).history_for(
        user_id,
        offset=(page - 1) * ORDERS_PER_PAGE,
        limit=ORDERS_PER_PAGE,
    )
    return OrderPage(
        data=[_order_response(order) for order in result.items],
        page=page,
        per_page=ORDERS_PER_PAGE,
        total=result.total,
    )


@order_router.get("/{order_id}", response_model=OrderResponse)
async def show_order(order_id: str, user_id: str = Depends(current_user_id)) -> OrderResponse:
    order = _load_order(order_id)
    if not order.owned_by(user_id):
        raise Forbidden("This order belongs to another user", order_id=order_id)
    return _order_response(order)
