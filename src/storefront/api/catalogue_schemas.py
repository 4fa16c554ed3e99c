"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Wireless Headphones",
                    "description": "Noise-cancelling over-ear headphones",
                    "price": 129.99,
                    "image_url": "https://cdn.example.com/images/headphones.jpg",
                    "inventory_count": 25,
                    "category_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    image_url: str | None = Field(None, max_length=500)
    inventory_count: int = Field(0, ge=0)
    category_id: str | None = None


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 119.99, "inventory_count": 40}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    image_url: str | None = Field(None, max_length=500)
    inventory_count: int | None = Field(None, ge=0)
    category_id: str | None = None


# --- Category Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Headphones", "slug": "headphones", "parent_id": None}]}
    }

    name: str = Field(..., max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    parent_id: str | None = None


class UpdateCategoryRequest(BaseModel):
    """Partial update. Sending `parent_id` (even as null) moves the category."""

    model_config = {"json_schema_extra": {"examples": [{"name": "Audio", "parent_id": None}]}}

    name: str | None = Field(None, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    parent_id: str | None = None

    @property
    def reparent(self) -> bool:
        return "parent_id" in self.model_fields_set


# --- Response Schemas ---


class CategorySummary(BaseModel):
    id: str
    name: str
    slug: str

    @classmethod
    def from_category(cls, category) -> CategorySummary:
        return cls(id=str(category.id), name=category.name, slug=category.slug)


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    image_url: str | None = None
    inventory_count: int
    category: CategorySummary | None = None

    @classmethod
    def from_product(cls, product, category=None) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            image_url=product.image_url,
            inventory_count=product.inventory_count,
            category=CategorySummary.from_category(category) if category else None,
        )


class ProductPage(BaseModel):
    data: list[ProductResponse]
    page: int
    per_page: int
    total: int


class CategoryNode(BaseModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    parent_id: str | None = None
    children: list[CategoryNode] = []


class MessageResponse(BaseModel):
    message: str
