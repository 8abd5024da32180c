import pytest
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from storefront.extensions import db
from storefront.models.item import Item
from storefront.models.category import Category, normalize_name
from storefront.models.favourite import Favourite


class TestItemModel:
    """Test Item model"""

    def test_defaults(self, app):
        """Test description, category and media defaults"""
        item = Item(name="Scarf", slug="scarf-aaaaaa", price=Decimal("500.00"))
        db.session.add(item)
        db.session.commit()

        assert item.category == "all"
        assert item.description == "all"
        assert item.media == []
        assert item.created_at is not None

    def test_slug_unique(self, app, make_item):
        """Test slug unique constraint"""
        make_item(slug="same-slug")

        with pytest.raises(IntegrityError):
            make_item(slug="same-slug")
        db.session.rollback()

    def test_cover_url_prefers_image(self, app, item):
        """Test cover_url picks the first image"""
        assert item.cover_url() == "https://cdn.test/tote.jpg"

    def test_cover_url_falls_back_to_video(self, app, make_item):
        """Test cover_url with videos only"""
        item = make_item(media=[{"type": "video", "url": "https://cdn.test/clip.mp4"}])
        assert item.cover_url() == "https://cdn.test/clip.mp4"

    def test_cover_url_without_media(self, app, make_item):
        """Test cover_url with no media"""
        assert make_item().cover_url() is None


class TestCategoryModel:
    """Test Category model"""

    def test_name_key_derived(self, app):
        """Test name_key is the lower-cased trimmed name"""
        category = Category(name="Evening Wear")
        assert category.name_key == "evening wear"
        assert normalize_name("  Bags ") == "bags"

    def test_name_unique_case_insensitive(self, app, category):
        """Test store rejects names differing only by case"""
        db.session.add(Category(name="BAGS"))

        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


class TestFavouriteModel:
    """Test Favourite model"""

    def test_pair_unique(self, app, item, make_favourite):
        """Test one favourite per (user, item) pair"""
        make_favourite(item, "user_1")

        with pytest.raises(IntegrityError):
            make_favourite(item, "user_1")
        db.session.rollback()

        assert Favourite.query.count() == 1

    def test_same_item_many_users(self, app, item, make_favourite):
        """Test different users may favourite the same item"""
        make_favourite(item, "user_1")
        make_favourite(item, "user_2")

        assert item.favourites.count() == 2
