"""Integration tests for wishlist endpoints."""

import pytest
from factories import build_app, create_product, user_headers
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    return TestClient(build_app())


class TestWishlistEndpoints:
    def test_requires_identity(self, client):
        assert client.get("/wishlist").status_code == 401

    def test_empty_wishlist(self, client):
        response = client.get("/wishlist", headers=user_headers())
        assert response.status_code == 200
        assert response.json() == []

    def test_add_and_list(self, client):
        product_id = create_product(name="Kettle")

        response = client.post("/wishlist", json={"product_id": product_id}, headers=user_headers())
        assert response.status_code == 201
        assert response.json() == {"message": "Product added to wishlist"}

        products = client.get("/wishlist", headers=user_headers()).json()
        assert [p["name"] for p in products] == ["Kettle"]

    def test_duplicate_add_conflicts(self, client):
        product_id = create_product()
        client.post("/wishlist", json={"product_id": product_id}, headers=user_headers())

        response = client.post("/wishlist", json={"product_id": product_id}, headers=user_headers())
        assert response.status_code == 409

    def test_add_unknown_product(self, client):
        response = client.post("/wishlist", json={"product_id": "missing"}, headers=user_headers())
        assert response.status_code == 404

    def test_remove(self, client):
        product_id = create_product()
        client.post("/wishlist", json={"product_id": product_id}, headers=user_headers())

        response = client.delete(f"/wishlist/{product_id}", headers=user_headers())
        assert response.status_code == 200
        assert client.get("/wishlist", headers=user_headers()).json() == []

    def test_remove_missing_entry(self, client):
        product_id = create_product()
        response = client.delete(f"/wishlist/{product_id}", headers=user_headers())
        assert response.status_code == 404

    def test_wishlists_are_per_user(self, client):
        product_id = create_product()
        client.post("/wishlist", json={"product_id": product_id}, headers=user_headers("user-001"))

        assert client.get("/wishlist", headers=user_headers("user-002")).json() == []
