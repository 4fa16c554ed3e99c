"""Category aggregate root: a node in the single-parent catalogue tree."""

import re
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from storefront.category.events import CategoryCreated, CategoryUpdated
from storefront.domain import storefront

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text):
    """Lowercase `text` and collapse every run of non-alphanumerics into one hyphen."""
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


@storefront.aggregate
class Category:
    """A grouping of products.

    Categories form a tree through `parent_id`. A category with no parent is a
    root. Cycles are rejected when a category is moved, see
    `storefront.category.management`.
    """

    name: String(required=True, max_length=255, sanitize=False)
    slug: String(required=True, max_length=255)
    description: Text(sanitize=False)
    parent_id: Identifier()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def slug_must_be_url_safe(self):
        if self.slug and not _SLUG_PATTERN.match(self.slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

    @invariant.post
    def cannot_be_its_own_parent(self):
        if self.parent_id and str(self.parent_id) == str(self.id):
            raise ValidationError({"parent_id": ["A category cannot be its own parent"]})

    @classmethod
    def create(cls, name, slug=None, description=None, parent_id=None):
        now = datetime.now()
        category = cls(
            name=name,
            slug=slug or slugify(name),
            description=description,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                slug=category.slug,
                parent_id=parent_id,
            )
        )
        return category

    def update_details(self, name=None, slug=None, description=None):
        if name is not None:
            self.name = name
        if slug is not None:
            self.slug = slug
        if description is not None:
            self.description = description

        self._touch()

    def move_under(self, parent_id):
        """Re-parent this category. `None` turns it into a root."""
        self.parent_id = parent_id
        self._touch()

    def _touch(self):
        self.updated_at = datetime.now()
        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                slug=self.slug,
                parent_id=self.parent_id,
            )
        )
