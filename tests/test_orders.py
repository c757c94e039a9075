"""
Tests for checkout and order status updates.
"""

from decimal import Decimal

import pytest


def money(value) -> Decimal:
    return Decimal(str(value))


@pytest.fixture
def shop(make_user, make_restaurant, make_food):
    user = make_user()
    restaurant = make_restaurant(name="Pizza Place")
    return {
        "user": user,
        "restaurant": restaurant,
        "margherita": make_food(restaurant["id"], name="Margherita", price="10.00"),
        "pepperoni": make_food(restaurant["id"], name="Pepperoni", price="12.50"),
    }


def order_payload(shop, **overrides):
    payload = {
        "user_id": shop["user"]["id"],
        "restaurant_id": shop["restaurant"]["id"],
        "items": [
            {"food_id": shop["margherita"]["id"], "quantity": 2},
            {"food_id": shop["pepperoni"]["id"], "quantity": 1, "food_name": "Pepperoni XL", "price": "15.00"},
        ],
        "total": "35.00",
        "customer_name": "Ann",
        "customer_address": "12 Main St",
        "customer_phone": "+15550001",
        "restaurant_name": "Pizza Place",
        "restaurant_address": "1 Oven Rd",
        "restaurant_phone": "+15559999",
    }
    payload.update(overrides)
    return payload


def place(client, shop, **overrides):
    return client.post("/orders", json=order_payload(shop, **overrides))


class TestPlaceOrder:

    def test_place_order(self, client, shop):
        response = place(client, shop)
        assert response.status_code == 201

        order = response.json()
        assert order["status"] == "Pending"
        assert order["customer_phone"] == "+15550001"
        assert order["restaurant_name"] == "Pizza Place"
        assert order["count_items"] == 3
        first, second = order["items"]
        assert first["food_name"] == "Margherita"
        assert money(first["price"]) == Decimal("10.00")
        assert second["food_name"] == "Pepperoni XL"
        assert money(second["price"]) == Decimal("15.00")

    def test_total_is_taken_from_request(self, client, shop):
        order = place(client, shop, total="99.99").json()
        assert money(order["total"]) == Decimal("99.99")

    def test_missing_customer_phone_rejected(self, client, shop):
        payload = order_payload(shop)
        del payload["customer_phone"]

        response = client.post("/orders", json=payload)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"
        assert client.get("/orders").json() == []

    def test_blank_field_rejected(self, client, shop):
        response = place(client, shop, customer_name="   ")
        assert response.status_code == 400

    def test_empty_items_rejected(self, client, shop):
        assert place(client, shop, items=[]).status_code == 400

    def test_missing_restaurant(self, client, shop):
        response = place(client, shop, restaurant_id=999)
        assert response.status_code == 404
        assert response.json() == {"message": "Restaurant not found"}

    def test_unknown_food_rejected(self, client, shop):
        response = place(client, shop, items=[{"food_id": 999, "quantity": 1}])
        assert response.status_code == 400
        assert client.get("/orders").json() == []

    def test_order_is_linked_to_restaurant(self, client, shop):
        order = place(client, shop).json()

        restaurant = client.get(f"/restaurants/{shop['restaurant']['id']}").json()
        assert [o["id"] for o in restaurant["orders"]] == [order["id"]]

        orders = client.get(f"/restaurants/{shop['restaurant']['id']}/orders").json()
        assert [o["id"] for o in orders] == [order["id"]]
        assert orders[0]["items"][0]["food"]["name"] == "Margherita"

    def test_place_order_clears_cart(self, client, shop):
        user_id = shop["user"]["id"]
        client.post(
            f"/users/{user_id}/cart",
            json={"restaurant_id": shop["restaurant"]["id"], "food_id": shop["margherita"]["id"], "quantity": 1},
        )

        assert place(client, shop).status_code == 201
        assert client.get(f"/users/{user_id}/cart").status_code == 404


class TestCheckoutCart:

    def test_checkout_from_cart(self, client, shop):
        user_id = shop["user"]["id"]
        for food_key, quantity in (("margherita", 2), ("pepperoni", 2)):
            client.post(
                f"/users/{user_id}/cart",
                json={"restaurant_id": shop["restaurant"]["id"], "food_id": shop[food_key]["id"], "quantity": quantity},
            )

        response = client.post(f"/users/{user_id}/orders")
        assert response.status_code == 201

        order = response.json()
        assert order["status"] == "Pending"
        assert money(order["total"]) == Decimal("45.00")
        assert order["customer_name"] == "Ann"
        assert order["customer_address"] == "12 Main St"
        assert order["customer_phone"] == "+15550001"
        assert order["restaurant_name"] == "Pizza Place"
        assert order["restaurant_phone"] == "+15559999"
        assert [(i["food_name"], i["quantity"]) for i in order["items"]] == [
            ("Margherita", 2),
            ("Pepperoni", 2),
        ]
        assert client.get(f"/users/{user_id}/cart").status_code == 404

    def test_checkout_without_cart(self, client, shop):
        response = client.post(f"/users/{shop['user']['id']}/orders")
        assert response.status_code == 404
        assert response.json() == {"message": "Cart not found"}

    def test_checkout_of_emptied_cart(self, client, shop):
        user_id = shop["user"]["id"]
        client.post(
            f"/users/{user_id}/cart",
            json={"restaurant_id": shop["restaurant"]["id"], "food_id": shop["margherita"]["id"], "quantity": 1},
        )
        client.delete(f"/users/{user_id}/cart/items/{shop['margherita']['id']}")

        response = client.post(f"/users/{user_id}/orders")
        assert response.status_code == 400
        assert response.json() == {"message": "Cart is empty"}
        assert client.get("/orders").json() == []
        assert client.get(f"/users/{user_id}/cart").json()["items"] == []

    def test_checkout_unknown_user(self, client):
        assert client.post("/users/999/orders").status_code == 404


class TestOrderStatus:

    def test_any_transition_is_accepted(self, client, shop):
        order = place(client, shop).json()

        response = client.put(f"/orders/{order['id']}/status", json={"status": "Delivered"})
        assert response.status_code == 200
        assert response.json()["status"] == "Delivered"

    def test_second_delivery_confirmation_rejected(self, client, shop):
        order = place(client, shop).json()
        url = f"/orders/{order['id']}/status"

        assert client.put(url, json={"status": "Confirmed_by_delivery"}).status_code == 200

        response = client.put(url, json={"status": "Confirmed_by_delivery"})
        assert response.status_code == 400
        assert response.json() == {"message": "Order already confirmed by delivery"}

        response = client.put(url, json={"status": "Delivered"})
        assert response.status_code == 200
        assert response.json()["status"] == "Delivered"

    def test_missing_order(self, client):
        response = client.put("/orders/999/status", json={"status": "Delivered"})
        assert response.status_code == 404
        assert response.json() == {"message": "Order not found"}

    def test_empty_status_rejected(self, client, shop):
        order = place(client, shop).json()
        assert client.put(f"/orders/{order['id']}/status", json={"status": ""}).status_code == 400


class TestListOrders:

    def test_list_orders_resolves_nested_detail(self, client, shop):
        place(client, shop)

        orders = client.get("/orders").json()
        assert len(orders) == 1
        order = orders[0]
        assert order["restaurant"]["name"] == "Pizza Place"
        assert order["user"]["email"] == "ann@example.com"
        assert order["items"][0]["food"]["name"] == "Margherita"

    def test_get_order(self, client, shop):
        order = place(client, shop).json()
        response = client.get(f"/orders/{order['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == order["id"]

    def test_get_missing_order(self, client):
        assert client.get("/orders/999").status_code == 404

    def test_orders_for_missing_restaurant(self, client):
        assert client.get("/restaurants/999/orders").status_code == 404
