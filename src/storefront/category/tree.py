"""In-memory view of the category tree.

The whole category table is loaded once and indexed by parent, so walking a
subtree costs one query no matter how deep it goes. Every walk tracks the ids
it has visited and stops at a repeat, so stored cycles cannot loop forever.
"""

from collections import defaultdict

from protean.utils.globals import current_domain

from storefront.category.category import Category


class CategoryTree:
    def __init__(self, categories):
        self._by_id = {str(category.id): category for category in categories}
        self._children = defaultdict(list)
        for category in categories:
            parent_id = str(category.parent_id) if category.parent_id else None
            self._children[parent_id].append(str(category.id))

    @classmethod
    def load(cls):
        return cls(current_domain.repository_for(Category).load_all())

    def __contains__(self, category_id):
        return str(category_id) in self._by_id

    def get(self, category_id):
        return self._by_id.get(str(category_id))

    def children_of(self, category_id):
        return [self._by_id[child_id] for child_id in self._children.get(str(category_id), [])]

    def roots(self):
        return [self._by_id[root_id] for root_id in self._children.get(None, [])]

    def descendant_ids(self, category_id):
        """Return `category_id` plus the ids of every category below it."""
        start = str(category_id)
        collected = set()
        stack = [start]
        while stack:
            current = stack.pop()
            if current in collected:
                continue
            collected.add(current)
            stack.extend(self._children.get(current, []))
        return collected

    def ancestor_ids(self, category_id):
        """Walk parent links upward from `category_id`, excluding the category itself."""
        ancestors = []
        seen = {str(category_id)}
        node = self.get(category_id)
        while node is not None and node.parent_id:
            parent_id = str(node.parent_id)
            if parent_id in seen:
                break
            seen.add(parent_id)
            ancestors.append(parent_id)
            node = self.get(parent_id)
        return ancestors

    def would_create_cycle(self, category_id, new_parent_id):
        """True when placing `category_id` under `new_parent_id` makes it its own ancestor."""
        if new_parent_id is None:
            return False
        if str(new_parent_id) == str(category_id):
            return True
        return str(category_id) in self.ancestor_ids(new_parent_id)

    def nested(self, category_id, _path=None):
        """Return a category and its subtree as nested dicts."""
        path = (_path or set()) | {str(category_id)}
        category = self.get(category_id)
        return {
            "id": str(category.id),
            "name": category.name,
            "slug": category.slug,
            "description": category.description,
            "parent_id": str(category.parent_id) if category.parent_id else None,
            "children": [
                self.nested(child.id, path) for child in self.children_of(category_id) if str(child.id) not in path
            ],
        }
