import pytest
from storefront.extensions import db
from storefront.models.favourite import Favourite


class TestFavouriteRoutes:
    """Test favourite endpoints"""

    def test_toggle_on_and_off(self, client, item):
        """Test toggling twice"""
        body = {"itemId": item.id, "anonymousUserId": "user_1700000000000_abc"}

        first = client.post("/api/favourites", json=body)
        assert first.status_code == 200
        assert first.json == {"favourited": True}
        assert Favourite.query.count() == 1

        second = client.post("/api/favourites", json=body)
        assert second.json == {"favourited": False}
        assert Favourite.query.count() == 0

    def test_toggle_unknown_item(self, client):
        """Test toggling a missing item"""
        response = client.post(
            "/api/favourites", json={"itemId": "missing", "anonymousUserId": "user_1"}
        )

        assert response.status_code == 404

    @pytest.mark.parametrize(
        "body",
        [{"itemId": "x"}, {"anonymousUserId": "user_1"}, {"itemId": "x", "anonymousUserId": ""}],
    )
    def test_toggle_invalid_body(self, client, item, body):
        """Test missing identifiers"""
        response = client.post("/api/favourites", json=body)

        assert response.status_code == 400

    def test_list_favourites(self, client, item, make_favourite):
        """Test listing favourites for one user"""
        make_favourite(item, "user_1")
        make_favourite(item, "user_2")

        response = client.get("/api/favourites?userId=user_1")

        assert response.status_code == 200
        favourites = response.json["favourites"]
        assert len(favourites) == 1
        assert favourites[0]["anonymousUserId"] == "user_1"
        assert favourites[0]["itemId"] == item.id
        assert favourites[0]["item"] == {
            "id": item.id,
            "slug": "ankara-tote-bag-abc123",
            "name": "Ankara Tote Bag",
        }

    @pytest.mark.parametrize("query", ["?userId=stranger", ""])
    def test_list_favourites_unknown_user(self, client, item, make_favourite, query):
        """Test unknown users get an empty list"""
        make_favourite(item, "user_1")

        response = client.get(f"/api/favourites{query}")

        assert response.status_code == 200
        assert response.json["favourites"] == []

    def test_list_favourites_degrades_on_store_failure(self, client, item, make_favourite):
        """Test store failure renders an empty list"""
        make_favourite(item, "user_1")
        Favourite.__table__.drop(db.engine)

        response = client.get("/api/favourites?userId=user_1")

        assert response.status_code == 200
        assert response.json["favourites"] == []
