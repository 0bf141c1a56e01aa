"""Unit tests for order API endpoints."""


class TestCreateOrderAPI:
    """Test POST /api/orders."""

    def test_create_order(self, test_client, order_payload):
        response = test_client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"].startswith("ord_")
        assert data["status"] == "ORDER_RECEIVED"
        assert data["items"] == [
            {"itemId": "margherita-pizza", "name": "Margherita Pizza", "price": 10.99, "quantity": 2}
        ]
        assert data["customer"] == order_payload["customer"]
        assert data["total"] == 21.98
        assert "createdAt" in data

    def test_create_order_snake_case_body(self, test_client, order_payload):
        order_payload["items"] = [{"item_id": "cheeseburger", "quantity": 1}]
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 201
        assert response.json()["items"][0]["itemId"] == "cheeseburger"

    def test_empty_order(self, test_client, order_payload):
        order_payload["items"] = []
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Order must contain at least one item"

    def test_blank_customer_field(self, test_client, order_payload):
        order_payload["customer"]["phone"] = "  "
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 400
        assert "customer" in response.json()["detail"].lower()
        assert "phone" in response.json()["detail"]

    def test_missing_customer(self, test_client, order_payload):
        del order_payload["customer"]
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 400

    def test_unknown_item(self, test_client, order_payload):
        order_payload["items"] = [{"itemId": "does-not-exist", "quantity": 1}]
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 400
        assert "does-not-exist" in response.json()["detail"]

    def test_invalid_quantity(self, test_client, order_payload):
        order_payload["items"][0]["quantity"] = 0
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 400
        assert "quantity" in response.json()["detail"].lower()

    def test_malformed_line(self, test_client, order_payload):
        order_payload["items"] = [{"itemId": "cheeseburger", "quantity": "lots"}]
        response = test_client.post("/api/orders", json=order_payload)
        assert response.status_code == 422


class TestGetOrderAPI:
    """Test GET /api/orders/{id}."""

    def test_get_order(self, test_client, order_payload):
        created = test_client.post("/api/orders", json=order_payload).json()

        response = test_client.get(f"/api/orders/{created['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["status"] == "ORDER_RECEIVED"
        assert data["items"] == created["items"]

    def test_get_order_not_found(self, test_client):
        response = test_client.get("/api/orders/ord_0_missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Order not found"


class TestOrdersAPIStoreFailure:
    """Test order endpoints when the backing store fails."""

    def test_create_order_store_failure(self, failing_store, order_payload):
        response = failing_store.post("/api/orders", json=order_payload)
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to create order"

    def test_get_order_store_failure(self, failing_store):
        response = failing_store.get("/api/orders/ord_0_anything")
        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching order"
