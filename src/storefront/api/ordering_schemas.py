"""Pydantic request/response schemas for the Ordering API.

These are external contracts, kept separate from the Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 2}]}
    }


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=1)


class CheckoutRequest(BaseModel):
    shipping_address: str = Field(min_length=1, max_length=500)
    shipping_phone: str = Field(min_length=1, max_length=20)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping_address": "123 Main St, Springfield, IL 62701",
                    "shipping_phone": "+1-217-555-0134",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ProductSummary(BaseModel):
    id: str
    name: str
    price: float
    image_url: str | None = None


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    product: ProductSummary | None = None  # None when the product was deleted after purchase
    quantity: int
    price: float
    subtotal: float


class OrderResponse(BaseModel):
    id: str
    status: str
    total_price: float
    shipping_address: str = ""
    shipping_phone: str = ""
    items: list[OrderItemResponse]
    item_count: int
    created_at: datetime | None = None
    placed_at: datetime | None = None

    @classmethod
    def from_order(cls, order, products):
        """Build the response from an Order and a dict of its products keyed by id."""
        items = []
        for item in order.items:
            product = products.get(str(item.product_id))
            items.append(
                OrderItemResponse(
                    id=str(item.id),
                    product_id=str(item.product_id),
                    product=ProductSummary(
                        id=str(product.id),
                        name=product.name,
                        price=product.price,
                        image_url=product.image_url,
                    )
                    if product
                    else None,
                    quantity=item.quantity,
                    price=item.price,
                    subtotal=float(item.subtotal),
                )
            )

        return cls(
            id=str(order.id),
            status=order.status,
            total_price=order.total_price,
            shipping_address=order.shipping_address or "",
            shipping_phone=order.shipping_phone or "",
            items=items,
            item_count=order.item_count,
            created_at=order.created_at,
            placed_at=order.placed_at,
        )


class OrderPage(BaseModel):
    data: list[OrderResponse]
    page: int
    per_page: int
    total: int
