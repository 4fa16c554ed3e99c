"""Tests for the Category aggregate and the in-memory category tree."""

import pytest
from protean.exceptions import ValidationError

from storefront.category.category import Category, slugify
from storefront.category.tree import CategoryTree


def _tree():
    """electronics -> audio -> headphones, electronics -> cameras, home"""
    electronics = Category.create(name="Electronics")
    audio = Category.create(name="Audio", parent_id=electronics.id)
    headphones = Category.create(name="Headphones", parent_id=audio.id)
    cameras = Category.create(name="Cameras", parent_id=electronics.id)
    home = Category.create(name="Home")
    categories = [electronics, audio, headphones, cameras, home]
    return CategoryTree(categories), {c.slug: c for c in categories}


class TestSlugs:
    @pytest.mark.parametrize(
        "name, slug",
        [
            ("Electronics", "electronics"),
            ("Home & Garden", "home-garden"),
            ("  Kids' Toys  ", "kids-toys"),
            ("4K TVs", "4k-tvs"),
        ],
    )
    def test_slugify(self, name, slug):
        assert slugify(name) == slug

    def test_slug_defaults_to_slugified_name(self):
        category = Category.create(name="Home & Garden")
        assert category.slug == "home-garden"

    def test_invalid_slug_rejected(self):
        with pytest.raises(ValidationError):
            Category.create(name="Audio", slug="Not A Slug")


class TestCategoryAggregate:
    def test_cannot_be_its_own_parent(self):
        category = Category.create(name="Audio")
        with pytest.raises(ValidationError):
            category.move_under(category.id)

    def test_move_to_root(self):
        parent = Category.create(name="Electronics")
        child = Category.create(name="Audio", parent_id=parent.id)
        child.move_under(None)
        assert child.parent_id is None


class TestCategoryTree:
    def test_roots(self):
        tree, by_slug = _tree()
        assert {c.slug for c in tree.roots()} == {"electronics", "home"}

    def test_children_of(self):
        tree, by_slug = _tree()
        children = tree.children_of(by_slug["electronics"].id)
        assert {c.slug for c in children} == {"audio", "cameras"}

    def test_descendant_ids_include_self_and_all_levels(self):
        tree, by_slug = _tree()
        ids = tree.descendant_ids(by_slug["electronics"].id)
        assert ids == {
            str(by_slug["electronics"].id),
            str(by_slug["audio"].id),
            str(by_slug["headphones"].id),
            str(by_slug["cameras"].id),
        }

    def test_descendant_ids_of_leaf(self):
        tree, by_slug = _tree()
        assert tree.descendant_ids(by_slug["headphones"].id) == {str(by_slug["headphones"].id)}

    def test_ancestor_ids(self):
        tree, by_slug = _tree()
        assert tree.ancestor_ids(by_slug["headphones"].id) == [
            str(by_slug["audio"].id),
            str(by_slug["electronics"].id),
        ]

    def test_would_create_cycle(self):
        tree, by_slug = _tree()
        electronics, headphones, home = by_slug["electronics"], by_slug["headphones"], by_slug["home"]

        assert tree.would_create_cycle(electronics.id, headphones.id)
        assert tree.would_create_cycle(electronics.id, electronics.id)
        assert not tree.would_create_cycle(headphones.id, home.id)
        assert not tree.would_create_cycle(headphones.id, None)

    def test_nested(self):
        tree, by_slug = _tree()
        node = tree.nested(by_slug["electronics"].id)

        assert node["slug"] == "electronics"
        assert {child["slug"] for child in node["children"]} == {"audio", "cameras"}
        audio = next(child for child in node["children"] if child["slug"] == "audio")
        assert [child["slug"] for child in audio["children"]] == ["headphones"]

    def test_stored_cycle_terminates(self):
        first = Category.create(name="First")
        second = Category.create(name="Second", parent_id=first.id)
        # Simulate corrupted data: first points back at second.
        first.parent_id = second.id
        tree = CategoryTree([first, second])

        assert tree.descendant_ids(first.id) == {str(first.id), str(second.id)}
        assert tree.ancestor_ids(first.id) == [str(second.id)]
        assert tree.nested(first.id)["children"][0]["children"] == []
