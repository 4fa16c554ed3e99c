"""FastAPI endpoints for the Catalogue: public browsing and admin management."""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.api.catalogue_schemas import (
    CategoryNode,
    CreateCategoryRequest,
    CreateProductRequest,
    MessageResponse,
    ProductPage,
    ProductResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from storefront.category.management import (
    CreateCategory,
    DeleteCategory,
    UpdateCategory,
    load_category,
)
from storefront.category.tree import CategoryTree
from storefront.product.management import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    load_product,
)
from storefront.product.product import Product
from storefront.shared.http import require_admin

PRODUCTS_PER_PAGE = 20

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _product_response(product, tree=None) -> ProductResponse:
    tree = tree or CategoryTree.load()
    category = tree.get(product.category_id) if product.category_id else None
    return ProductResponse.from_product(product, category)


def _browse(category_id=None, min_price=None, max_price=None, search=None, page=1) -> ProductPage:
    tree = CategoryTree.load()
    category_ids = tree.descendant_ids(category_id) if category_id else None

    result = current_domain.repository_for(Product).browse(
        category_ids=category_ids,
        min_price=min_price,
        max_price=max_price,
        search=search,
        offset=(page - 1) * PRODUCTS_PER_PAGE,
        limit=PRODUCTS_PER_PAGE,
    )
    return ProductPage(
        data=[_product_response(product, tree) for product in result.items],
        page=page,
        per_page=PRODUCTS_PER_PAGE,
        total=result.total,
    )


# --- Public product endpoints ---


@product_router.get("", response_model=ProductPage)
async def list_products(
    category_id: str | None = None,
    min_price: float | None = Query(None, ge=0),
    max_price: float | None = Query(None, ge=0),
    search: str | None = None,
    page: int = Query(1, ge=1),
) -> ProductPage:
    """List products. Filtering by category includes every nested subcategory."""
    return _browse(category_id, min_price, max_price, search, page)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def show_product(product_id: str) -> ProductResponse:
    return _product_response(load_product(product_id))


# --- Public category endpoints ---


@category_router.get("", response_model=list[CategoryNode])
async def list_category_tree() -> list[CategoryNode]:
    tree = CategoryTree.load()
    return [CategoryNode(**tree.nested(root.id)) for root in tree.roots()]


# --- Admin product endpoints ---


@admin_router.get("/products", response_model=ProductPage)
async def admin_list_products(page: int = Query(1, ge=1)) -> ProductPage:
    return _browse(page=page)


@admin_router.post("/products", status_code=201, response_model=ProductResponse)
async def admin_create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        image_url=body.image_url,
        inventory_count=body.inventory_count,
        category_id=body.category_id,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(load_product(product_id))


@admin_router.patch("/products/{product_id}", response_model=ProductResponse)
async def admin_update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        image_url=body.image_url,
        inventory_count=body.inventory_count,
        category_id=body.category_id,
    )
    current_domain.process(command, asynchronous=False)
    return _product_response(load_product(product_id))


@admin_router.delete("/products/{product_id}", response_model=MessageResponse)
async def admin_delete_product(product_id: str) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted successfully")


# --- Admin category endpoints ---


@admin_router.get("/categories", response_model=list[CategoryNode])
async def admin_list_categories() -> list[CategoryNode]:
    tree = CategoryTree.load()
    return [CategoryNode(**tree.nested(root.id)) for root in tree.roots()]


@admin_router.post("/categories", status_code=201, response_model=CategoryNode)
async def admin_create_category(body: CreateCategoryRequest) -> CategoryNode:
    command = CreateCategory(
        name=body.name,
        slug=body.slug,
        description=body.description,
        parent_id=body.parent_id,
    )
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryNode(**CategoryTree.load().nested(category_id))


@admin_router.get("/categories/{category_id}", response_model=CategoryNode)
async def admin_show_category(category_id: str) -> CategoryNode:
    category = load_category(category_id)
    return CategoryNode(**CategoryTree.load().nested(category.id))


@admin_router.patch("/categories/{category_id}", response_model=CategoryNode)
async def admin_update_category(category_id: str, body: UpdateCategoryRequest) -> CategoryNode:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        slug=body.slug,
        description=body.description,
        parent_id=body.parent_id,
        reparent=body.reparent,
    )
    current_domain.process(command, asynchronous=False)
    return CategoryNode(**CategoryTree.load().nested(category_id))


@admin_router.delete("/categories/{category_id}", response_model=MessageResponse)
async def admin_delete_category(category_id: str) -> MessageResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return MessageResponse(message="Category deleted successfully")
