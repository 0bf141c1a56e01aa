"""Unit tests for menu API endpoints."""


class TestMenuAPI:
    """Test GET /api/menu."""

    def test_get_menu_first_page(self, test_client):
        """Test default page uses the configured page size."""
        response = test_client.get("/api/menu")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["items"]] == ["margherita-pizza", "cheeseburger"]
        assert data["pagination"] == {
            "page": 1,
            "pageSize": 2,
            "total": 5,
            "totalPages": 3,
        }

    def test_menu_item_fields(self, test_client):
        data = test_client.get("/api/menu").json()
        pizza = data["items"][0]
        assert pizza == {
            "id": "margherita-pizza",
            "name": "Margherita Pizza",
            "description": "Classic pizza with fresh mozzarella, basil, and tomato sauce.",
            "price": 10.99,
            "image": "/images/margherita.jpg",
        }

    def test_get_menu_last_page(self, test_client):
        data = test_client.get("/api/menu", params={"page": 3}).json()
        assert [item["id"] for item in data["items"]] == ["caesar-salad"]
        assert data["pagination"]["page"] == 3

    def test_get_menu_past_last_page(self, test_client):
        response = test_client.get("/api/menu", params={"page": 9})
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["pagination"]["total"] == 5

    def test_get_menu_page_clamped(self, test_client):
        data = test_client.get("/api/menu", params={"page": 0}).json()
        assert data["pagination"]["page"] == 1
        assert len(data["items"]) == 2

    def test_get_menu_page_size(self, test_client):
        data = test_client.get("/api/menu", params={"pageSize": 10}).json()
        assert len(data["items"]) == 5
        assert data["pagination"]["totalPages"] == 1

    def test_get_menu_invalid_page_size(self, test_client):
        response = test_client.get("/api/menu", params={"pageSize": 0})
        assert response.status_code == 422

    def test_search_menu(self, test_client):
        data = test_client.get("/api/menu", params={"search": "Pizza"}).json()
        assert [item["id"] for item in data["items"]] == ["margherita-pizza", "pepperoni-pizza"]
        assert data["pagination"]["total"] == 2
        assert data["pagination"]["totalPages"] == 1

    def test_search_no_matches(self, test_client):
        data = test_client.get("/api/menu", params={"search": "sushi"}).json()
        assert data["items"] == []
        assert data["pagination"]["total"] == 0
        assert data["pagination"]["totalPages"] == 0

    def test_blank_search_lists_everything(self, test_client):
        data = test_client.get("/api/menu", params={"search": "   "}).json()
        assert data["pagination"]["total"] == 5

    def test_page_beyond_sql_integer_range(self, test_client):
        """Test an enormous page number reads as an empty page."""
        response = test_client.get("/api/menu", params={"page": 10**19})

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["pagination"]["total"] == 5


class TestMenuAPIStoreFailure:
    """Test GET /api/menu when the backing store fails."""

    def test_menu_store_failure(self, failing_store):
        response = failing_store.get("/api/menu")
        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching menu"

    def test_search_store_failure(self, failing_store):
        response = failing_store.get("/api/menu", params={"search": "pizza"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching menu"
