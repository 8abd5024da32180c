import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from storefront import create_app, db
from storefront.config import TestingConfig
from storefront.models.item import Item
from storefront.models.category import Category
from storefront.models.favourite import Favourite

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


# Data fixtures
@pytest.fixture
def make_item(app):
    """Factory inserting items directly, bypassing the service"""
    counter = {"n": 0}

    def _make_item(name="Leather Bag", category="bags", price="15000.00", minutes=0, **kwargs):
        counter["n"] += 1
        item = Item(
            name=name,
            slug=kwargs.pop("slug", f"item-{counter['n']}"),
            category=category,
            price=Decimal(price),
            description=kwargs.pop("description", f"{name} description"),
            media=kwargs.pop("media", []),
            created_at=BASE_TIME + timedelta(minutes=minutes),
            **kwargs,
        )
        db.session.add(item)
        db.session.commit()
        return item

    return _make_item


@pytest.fixture
def make_favourite(app):
    """Factory inserting favourites directly"""

    def _make_favourite(item, user_id="user_1"):
        favourite = Favourite(item_id=item.id, anonymous_user_id=user_id)
        db.session.add(favourite)
        db.session.commit()
        return favourite

    return _make_favourite


@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(name="Bags")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def item(make_item):
    """Create a test item"""
    return make_item(
        name="Ankara Tote Bag",
        category="bags",
        price="25000.00",
        slug="ankara-tote-bag-abc123",
        media=[
            {"type": "video", "url": "https://cdn.test/tote.mp4"},
            {"type": "image", "url": "https://cdn.test/tote.jpg"},
        ],
    )
