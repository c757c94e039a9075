"""
Tests for restaurants, menus and rankings.
"""

import base64
from decimal import Decimal

from conftest import PNG_BYTES


class TestRestaurants:

    def test_list_restaurants_empty(self, client):
        response = client.get("/restaurants")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_restaurant_with_images(self, client):
        response = client.post(
            "/restaurants",
            data={"name": "Sushi Bar", "rating": "4.5", "love_count": "12", "cuisine_type": "Japanese"},
            files={
                "image": ("logo.png", PNG_BYTES, "image/png"),
                "ad_image": ("ad.jpg", b"ad-bytes", "image/jpeg"),
            },
        )
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Sushi Bar"
        assert body["rating"] == 4.5
        assert body["love_count"] == 12
        assert base64.b64decode(body["image"]["data"]) == PNG_BYTES
        assert body["image"]["contentType"] == "image/png"
        assert body["ad_image"]["contentType"] == "image/jpeg"

    def test_restaurant_without_image_has_null_image(self, client, make_restaurant):
        make_restaurant()
        body = client.get("/restaurants").json()
        assert body[0]["image"] is None
        assert body[0]["ad_image"] is None

    def test_get_restaurant_includes_orders(self, client, make_restaurant):
        restaurant = make_restaurant()
        response = client.get(f"/restaurants/{restaurant['id']}")
        assert response.status_code == 200
        assert response.json()["orders"] == []

    def test_get_missing_restaurant(self, client):
        response = client.get("/restaurants/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Restaurant not found"}


class TestFoods:

    def test_foods_for_restaurant(self, client, make_restaurant, make_food):
        restaurant = make_restaurant()
        other = make_restaurant(name="Burger Joint")
        make_food(restaurant["id"], name="Margherita", price="10.00")
        make_food(restaurant["id"], name="Pepperoni", price="12.50")
        make_food(other["id"], name="Cheeseburger", price="8.00")

        response = client.get(f"/restaurants/{restaurant['id']}/foods")
        assert response.status_code == 200
        foods = response.json()
        assert [f["name"] for f in foods] == ["Margherita", "Pepperoni"]
        assert Decimal(str(foods[1]["price"])) == Decimal("12.50")

    def test_foods_read_is_idempotent(self, client, make_restaurant, make_food):
        restaurant = make_restaurant()
        for name in ("A", "B", "C"):
            make_food(restaurant["id"], name=name)

        first = client.get(f"/restaurants/{restaurant['id']}/foods").json()
        second = client.get(f"/restaurants/{restaurant['id']}/foods").json()
        assert first == second

    def test_foods_for_missing_restaurant(self, client):
        response = client.get("/restaurants/999/foods")
        assert response.status_code == 404

    def test_create_food_for_missing_restaurant(self, client):
        response = client.post("/restaurants/999/foods", data={"name": "Ghost", "price": "1"})
        assert response.status_code == 404

    def test_negative_price_rejected(self, client, make_restaurant):
        restaurant = make_restaurant()
        response = client.post(
            f"/restaurants/{restaurant['id']}/foods", data={"name": "Refund", "price": "-1"}
        )
        assert response.status_code == 400

    def test_food_image_round_trip(self, client, make_restaurant):
        restaurant = make_restaurant()
        response = client.post(
            f"/restaurants/{restaurant['id']}/foods",
            data={"name": "Calzone", "price": "9"},
            files={"image": ("calzone.png", PNG_BYTES, "image/png")},
        )
        assert response.status_code == 201
        food = client.get("/foods").json()[0]
        assert food["image"] == {"data": base64.b64encode(PNG_BYTES).decode(), "contentType": "image/png"}

    def test_list_all_foods(self, client, make_restaurant, make_food):
        first = make_restaurant()
        second = make_restaurant(name="Burger Joint")
        make_food(first["id"], name="Margherita")
        make_food(second["id"], name="Cheeseburger")

        foods = client.get("/foods").json()
        assert [f["name"] for f in foods] == ["Margherita", "Cheeseburger"]


class TestRankings:

    def test_top_empty_returns_404(self, client):
        response = client.get("/top")
        assert response.status_code == 404
        assert response.json() == {"message": "No top restaurants found"}

    def test_popular_empty_returns_404(self, client):
        assert client.get("/popular").status_code == 404

    def test_top_sorted_by_rating(self, client, make_restaurant):
        make_restaurant(name="Average", rating="3.1")
        make_restaurant(name="Best", rating="4.9")
        make_restaurant(name="Good", rating="4.2")

        names = [r["name"] for r in client.get("/top").json()]
        assert names == ["Best", "Good", "Average"]

    def test_top_respects_limit(self, client, make_restaurant):
        for i in range(12):
            make_restaurant(name=f"R{i}", rating=str(i))

        top = client.get("/top").json()
        assert len(top) == 10
        assert top[0]["name"] == "R11"
        assert len(client.get("/top", params={"limit": 3}).json()) == 3

    def test_popular_sorted_by_love_count(self, client, make_restaurant):
        make_restaurant(name="Quiet", love_count="1")
        make_restaurant(name="Loved", love_count="100")

        names = [r["name"] for r in client.get("/popular").json()]
        assert names == ["Loved", "Quiet"]
