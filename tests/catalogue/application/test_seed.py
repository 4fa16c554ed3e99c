"""Application tests for the sample-data loader."""

from protean.utils.globals import current_domain

from storefront.category.tree import CategoryTree
from storefront.product.product import Product
from storefront.utils.seed import CATEGORY_TREE, seed


def test_seed_builds_tree_and_products():
    counts = seed(products_per_category=2)

    leaf_count = sum(len(children) for children in CATEGORY_TREE.values())
    assert counts == {"categories": leaf_count, "products": leaf_count * 2}

    tree = CategoryTree.load()
    assert {c.name for c in tree.roots()} == set(CATEGORY_TREE)

    products = current_domain.repository_for(Product).browse(limit=100)
    assert products.total == leaf_count * 2
    assert all(product.category_id for product in products.items)
