"""Product management: commands and handlers for the admin surface."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.product.product import Product
from storefront.domain import logger, storefront
from storefront.shared.errors import NotFound


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=500, sanitize=False)
    inventory_count: Integer(default=0, min_value=0)
    category_id: Identifier()


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(min_value=0.0)
    image_url: String(max_length=500, sanitize=False)
    inventory_count: Integer(min_value=0)
    category_id: Identifier()


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def load_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise NotFound(f"Product {product_id} not found", product_id=str(product_id)) from None


def _ensure_category_exists(category_id):
    try:
        current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ValidationError({"category_id": [f"Category {category_id} does not exist"]}) from None


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        if command.category_id:
            _ensure_category_exists(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            inventory_count=command.inventory_count or 0,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("product_created", product_id=str(product.id), price=product.price)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        product = load_product(command.product_id)
        if command.category_id:
            _ensure_category_exists(command.category_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            inventory_count=command.inventory_count,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_updated", product_id=str(product.id))

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = load_product(command.product_id)
        current_domain.repository_for(Product)._dao.delete(product)
        logger.info("product_deleted", product_id=str(product.id))
