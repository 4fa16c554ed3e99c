"""Pydantic request schemas for the Wishlist API."""

from pydantic import BaseModel


class AddToWishlistRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    product_id: str
