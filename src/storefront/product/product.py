"""Product aggregate root: a sellable item with its available stock."""

from datetime import datetime

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.product.events import InventoryDecremented, ProductCreated, ProductUpdated
from storefront.shared.errors import InsufficientInventory
from storefront.shared.money import as_amount


@storefront.aggregate
class Product:
    """A catalogue product.

    `inventory_count` is the quantity available to sell. It only goes down at
    checkout, through `decrement_inventory`, and can never drop below zero.
    """

    name: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=500, sanitize=False)
    inventory_count: Integer(default=0, min_value=0)
    category_id: Identifier()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, price, inventory_count=0, description=None, image_url=None, category_id=None):
        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=as_amount(price),
            image_url=image_url,
            inventory_count=inventory_count,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                price=product.price,
                inventory_count=product.inventory_count,
                category_id=category_id,
                created_at=now,
            )
        )
        return product

    def update_details(
        self,
        name=None,
        description=None,
        price=None,
        image_url=None,
        inventory_count=None,
        category_id=None,
    ):
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = as_amount(price)
        if image_url is not None:
            self.image_url = image_url
        if inventory_count is not None:
            self.inventory_count = inventory_count
        if category_id is not None:
            self.category_id = category_id

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                inventory_count=self.inventory_count,
                category_id=self.category_id,
            )
        )

    def has_stock_for(self, quantity):
        return self.inventory_count >= quantity

    def decrement_inventory(self, quantity):
        """Take `quantity` units out of stock, refusing to go below zero."""
        if not self.has_stock_for(quantity):
            raise InsufficientInventory(
                product_id=str(self.id),
                product_name=self.name,
                available=self.inventory_count,
            )

        previous_count = self.inventory_count
        self.inventory_count = previous_count - quantity
        self.updated_at = datetime.now()

        self.raise_(
            InventoryDecremented(
                product_id=self.id,
                quantity=quantity,
                previous_count=previous_count,
                new_count=self.inventory_count,
            )
        )
