"""Repository for the Product aggregate."""

from storefront.product.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def browse(self, category_ids=None, min_price=None, max_price=None, search=None, offset=0, limit=20):
        """Return one page of products matching the given filters as a ResultSet.

        `category_ids` is an inclusion set; callers expand a category into its
        subtree before passing it in.
        """
        query = self._dao.query
        if category_ids is not None:
            query = query.filter(category_id__in=sorted(str(category_id) for category_id in category_ids))
        if min_price is not None:
            query = query.filter(price__gte=float(min_price))
        if max_price is not None:
            query = query.filter(price__lte=float(max_price))
        if search:
            query = query.filter(name__icontains=search)

        return query.order_by("name").offset(offset).limit(limit).all()

    def in_category(self, category_id):
        return self._dao.query.filter(category_id=str(category_id)).all().items

    def get_many(self, product_ids):
        """Return a dict of products keyed by id for the ids that exist."""
        ids = sorted({str(product_id) for product_id in product_ids})
        if not ids:
            return {}
        products = self._dao.query.filter(id__in=ids).limit(len(ids)).all().items
        return {str(product.id): product for product in products}
