"""Category management: commands and handlers for the admin surface."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.category.category import Category, slugify
from storefront.category.tree import CategoryTree
from storefront.product.product import Product
from storefront.domain import logger, storefront
from storefront.shared.errors import InvalidState, NotFound


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=255, sanitize=False)
    slug: String(max_length=255)
    description: Text(sanitize=False)
    parent_id: Identifier()


@storefront.command(part_of="Category")
class UpdateCategory:
    """Partially update a category. Only fields that are set are applied.

    `parent_id` is applied when `reparent` is true, so a category can be moved
    to the root by sending `parent_id=None, reparent=True`.
    """

    category_id: Identifier(required=True)
    name: String(max_length=255, sanitize=False)
    slug: String(max_length=255)
    description: Text(sanitize=False)
    parent_id: Identifier()
    reparent: Boolean(default=False)


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def load_category(category_id):
    try:
        return current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise NotFound(f"Category {category_id} not found", category_id=str(category_id)) from None


def _ensure_slug_available(slug, category_id=None):
    existing = current_domain.repository_for(Category).find_by_slug(slug)
    if existing is not None and str(existing.id) != str(category_id):
        raise ValidationError({"slug": ["The slug has already been taken"]})


def _ensure_parent_exists(parent_id):
    try:
        current_domain.repository_for(Category).get(parent_id)
    except ObjectNotFoundError:
        raise ValidationError({"parent_id": [f"Parent category {parent_id} does not exist"]}) from None


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        slug = command.slug or slugify(command.name)
        _ensure_slug_available(slug)
        if command.parent_id:
            _ensure_parent_exists(command.parent_id)

        category = Category.create(
            name=command.name,
            slug=slug,
            description=command.description,
            parent_id=command.parent_id,
        )
        current_domain.repository_for(Category).add(category)

        logger.info("category_created", category_id=str(category.id), slug=slug)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        if command.slug is not None:
            _ensure_slug_available(command.slug, category.id)

        if command.name is not None or command.slug is not None or command.description is not None:
            category.update_details(
                name=command.name,
                slug=command.slug,
                description=command.description,
            )

        if command.reparent:
            if command.parent_id:
                _ensure_parent_exists(command.parent_id)
                if CategoryTree.load().would_create_cycle(category.id, command.parent_id):
                    raise ValidationError({"parent_id": ["A category cannot be moved under its own descendant"]})
            category.move_under(command.parent_id)

        repo.add(category)
        logger.info("category_updated", category_id=str(category.id))

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = load_category(command.category_id)

        has_products = bool(current_domain.repository_for(Product).in_category(category.id))
        if repo.has_children(category.id) or has_products:
            raise InvalidState(
                "Cannot delete category with children or products",
                category_id=str(category.id),
            )

        repo._dao.delete(category)
        logger.info("category_deleted", category_id=str(category.id))
