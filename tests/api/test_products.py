"""Tests for Product API endpoints."""

import pytest
from fastapi.testclient import TestClient


class TestListProducts:
    """Tests for GET /api/products endpoint."""

    def test_defaults(self, client: TestClient) -> None:
        """Defaults to page 1 of size 10."""
        response = client.get("/api/products")
        assert response.status_code == 200

        data = response.json()
        assert data["totalItems"] == 5
        assert data["pageNumber"] == 1
        assert data["pageSize"] == 10
        assert [item["id"] for item in data["items"]] == [1, 2, 3, 4, 5]

    def test_camel_case_product_fields(self, client: TestClient) -> None:
        """Product fields are serialized in camelCase."""
        response = client.get("/api/products", params={"pageSize": 1})
        item = response.json()["items"][0]

        assert item["id"] == 1
        assert item["name"] == "Red Shirt"
        assert item["description"] == "Soft cotton tee"
        assert item["price"] == 1999
        assert item["isDesired"] is False
        assert "imageUrl" in item
        assert "createdAt" in item
        assert "is_desired" not in item

    def test_second_page(self, client: TestClient) -> None:
        response = client.get("/api/products", params={"pageNumber": 2, "pageSize": 2})
        assert response.status_code == 200

        data = response.json()
        assert data["totalItems"] == 5
        assert data["pageNumber"] == 2
        assert data["pageSize"] == 2
        assert [item["id"] for item in data["items"]] == [3, 4]

    def test_page_past_end(self, client: TestClient) -> None:
        """Out-of-range page is an empty success."""
        response = client.get("/api/products", params={"pageNumber": 50})
        assert response.status_code == 200

        data = response.json()
        assert data["items"] == []
        assert data["totalItems"] == 5

    @pytest.mark.parametrize(
        "params",
        [
            {"pageNumber": 0},
            {"pageNumber": -1},
            {"pageSize": 0},
            {"pageSize": 101},
            {"pageNumber": "abc"},
        ],
    )
    def test_invalid_pagination_rejected(self, client: TestClient, params: dict) -> None:
        response = client.get("/api/products", params=params)
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("page_number", [2**31, 2**62, 10**20])
    def test_page_number_beyond_int32_rejected(self, client: TestClient, page_number: int) -> None:
        """Huge page numbers are a validation error, not a database overflow."""
        response = client.get("/api/products", params={"pageNumber": page_number, "pageSize": 10})
        assert response.status_code == 422

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "pageNumber"

    def test_largest_page_number_is_empty_page(self, client: TestClient) -> None:
        response = client.get("/api/products", params={"pageNumber": 2**31 - 1, "pageSize": 100})
        assert response.status_code == 200

        data = response.json()
        assert data["items"] == []
        assert data["totalItems"] == 5
        assert data["hasNext"] is False

    def test_page_navigation_fields(self, client: TestClient) -> None:
        """Responses carry totalPages, hasNext and hasPrev."""
        first = client.get("/api/products", params={"pageNumber": 1, "pageSize": 2}).json()
        middle = client.get("/api/products", params={"pageNumber": 2, "pageSize": 2}).json()
        last = client.get("/api/products", params={"pageNumber": 3, "pageSize": 2}).json()

        assert first["totalPages"] == 3
        assert (first["hasPrev"], first["hasNext"]) == (False, True)
        assert (middle["hasPrev"], middle["hasNext"]) == (True, True)
        assert (last["hasPrev"], last["hasNext"]) == (True, False)


class TestSearchProducts:
    """Tests for GET /api/products/search endpoint."""

    def test_search_by_name(self, client: TestClient) -> None:
        response = client.get("/api/products/search", params={"query": "hat"})
        assert response.status_code == 200

        data = response.json()
        assert data["totalItems"] == 1
        assert data["items"][0]["name"] == "Blue Hat"

    def test_search_matches_description(self, client: TestClient) -> None:
        response = client.get("/api/products/search", params={"query": "SHIRT"})

        data = response.json()
        assert data["totalItems"] == 2
        assert [item["id"] for item in data["items"]] == [1, 4]

    def test_search_paginates_filtered_set(self, client: TestClient) -> None:
        response = client.get(
            "/api/products/search",
            params={"query": "shirt", "pageNumber": 2, "pageSize": 1},
        )

        data = response.json()
        assert data["totalItems"] == 2
        assert [item["id"] for item in data["items"]] == [4]

    def test_search_without_query_lists_all(self, client: TestClient) -> None:
        """No query parameter returns the same page as the list endpoint."""
        searched = client.get("/api/products/search", params={"pageSize": 3}).json()
        listed = client.get("/api/products", params={"pageSize": 3}).json()

        assert searched == listed

    def test_search_blank_query_lists_all(self, client: TestClient) -> None:
        response = client.get("/api/products/search", params={"query": "  "})

        assert response.json()["totalItems"] == 5

    def test_search_no_results(self, client: TestClient) -> None:
        response = client.get("/api/products/search", params={"query": "xyz123notfound"})
        assert response.status_code == 200

        data = response.json()
        assert data["totalItems"] == 0
        assert data["items"] == []

    def test_search_percent_is_literal(self, client: TestClient) -> None:
        response = client.get("/api/products/search", params={"query": "%"})

        data = response.json()
        assert data["totalItems"] == 1
        assert data["items"][0]["name"] == "Green Mug"


class TestGetProduct:
    """Tests for GET /api/products/{id} endpoint."""

    def test_get_existing(self, client: TestClient) -> None:
        response = client.get("/api/products/2")
        assert response.status_code == 200

        data = response.json()
        assert data["id"] == 2
        assert data["name"] == "Blue Hat"

    def test_get_missing(self, client: TestClient) -> None:
        """Missing products return 404 with the error envelope."""
        response = client.get("/api/products/999")
        assert response.status_code == 404

        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert "999" in data["message"]
        assert data["request_id"] is not None

    def test_get_non_integer_id(self, client: TestClient) -> None:
        response = client.get("/api/products/not-a-number")
        assert response.status_code == 422

    @pytest.mark.parametrize("product_id", [0, -1, 2**31, 10**20, -(10**20)])
    def test_id_outside_key_range_is_not_found(self, client: TestClient, product_id: int) -> None:
        """IDs the key column cannot hold are simply missing."""
        response = client.get(f"/api/products/{product_id}")
        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"


class TestWishlist:
    """Tests for wishlist endpoints."""

    def test_wishlist_starts_empty(self, client: TestClient) -> None:
        response = client.get("/api/products/Wishlist")
        assert response.status_code == 200
        assert response.json() == []

    def test_add_to_wishlist(self, client: TestClient) -> None:
        response = client.post("/api/products/addWishlist/3")
        assert response.status_code == 204
        assert response.content == b""

        wishlist = client.get("/api/products/Wishlist").json()
        assert [item["id"] for item in wishlist] == [3]
        assert wishlist[0]["isDesired"] is True

        assert client.get("/api/products/3").json()["isDesired"] is True

    def test_remove_from_wishlist(self, client: TestClient) -> None:
        client.post("/api/products/addWishlist/1")
        client.post("/api/products/addWishlist/2")

        response = client.post("/api/products/removeWishlist/1")
        assert response.status_code == 204

        wishlist = client.get("/api/products/Wishlist").json()
        assert [item["id"] for item in wishlist] == [2]

    def test_lowercase_wishlist_path(self, client: TestClient) -> None:
        client.post("/api/products/addWishlist/5")

        response = client.get("/api/products/wishlist")
        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [5]

    @pytest.mark.parametrize("product_id", [999, 2**31, 10**20])
    @pytest.mark.parametrize("action", ["addWishlist", "removeWishlist"])
    def test_missing_product(self, client: TestClient, action: str, product_id: int) -> None:
        response = client.post(f"/api/products/{action}/{product_id}")
        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"

        assert client.get("/api/products/Wishlist").json() == []

    def test_wishlist_flag_visible_in_listing(self, client: TestClient) -> None:
        client.post("/api/products/addWishlist/4")

        items = client.get("/api/products").json()["items"]
        assert [item["id"] for item in items if item["isDesired"]] == [4]
