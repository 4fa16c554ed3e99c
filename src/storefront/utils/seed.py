"""Faker-based sample data for local development.

Seeding goes through the same commands the API uses, so every generated
record passes the domain's validation rules.
"""

import random

from faker import Faker
from protean.utils.globals import current_domain

from storefront.category.management import CreateCategory
from storefront.product.management import CreateProduct
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

fake = Faker()

# Parent name -> subcategory names
CATEGORY_TREE = {
    "Electronics": ["Audio", "Computers", "Cameras"],
    "Home": ["Kitchen", "Furniture"],
    "Outdoors": ["Camping", "Cycling"],
}


def product_data(category_id: str | None = None) -> dict:
    """Generate CreateProduct fields within the catalogue's limits."""
    return {
        "name": f"{fake.color_name()} {fake.word().capitalize()} {random.randint(100, 999)}"[:255],
        "description": fake.paragraph(nb_sentences=3),
        "price": round(random.uniform(4.99, 499.99), 2),
        "image_url": f"https://picsum.photos/seed/{fake.uuid4()[:8]}/600/600",
        "inventory_count": random.randint(0, 100),
        "category_id": category_id,
    }


def seed_categories() -> list[str]:
    """Create the sample category tree. Returns the ids of the leaf categories."""
    leaf_ids = []
    for parent_name, children in CATEGORY_TREE.items():
        parent_id = current_domain.process(
            CreateCategory(name=parent_name, description=fake.sentence()),
            asynchronous=False,
        )
        for child_name in children:
            leaf_ids.append(
                current_domain.process(
                    CreateCategory(name=child_name, description=fake.sentence(), parent_id=parent_id),
                    asynchronous=False,
                )
            )
    return leaf_ids


def seed(products_per_category: int = 5) -> dict:
    category_ids = seed_categories()
    product_count = 0
    for category_id in category_ids:
        for _ in range(products_per_category):
            current_domain.process(CreateProduct(**product_data(category_id)), asynchronous=False)
            product_count += 1

    logger.info("catalogue_seeded", categories=len(category_ids), products=product_count)
    return {"categories": len(category_ids), "products": product_count}
