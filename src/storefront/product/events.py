"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True, sanitize=False)
    price: Float(required=True)
    inventory_count: Integer(required=True)
    category_id: Identifier()
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True, sanitize=False)
    price: Float(required=True)
    inventory_count: Integer(required=True)
    category_id: Identifier()


@storefront.event(part_of="Product")
class InventoryDecremented:
    """Stock was committed to a placed order."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_count: Integer(required=True)
    new_count: Integer(required=True)
