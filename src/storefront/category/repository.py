"""Repository for the Category aggregate."""

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.shared.paging import fetch_all


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug):
        """Return the category with this slug, or None."""
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def children_of(self, category_id):
        return fetch_all(self._dao.query.filter(parent_id=str(category_id)))

    def has_children(self, category_id):
        return bool(self.children_of(category_id))

    def load_all(self):
        """Return every category."""
        return fetch_all(self._dao.query)
