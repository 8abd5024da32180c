import logging
from decimal import Decimal, InvalidOperation
from sqlalchemy import asc, desc, func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from storefront.models.item import Item, DEFAULT_CATEGORY
from storefront.extensions import db
from storefront.enums import SortField, SortOrder
from storefront.exceptions import ValidationError, ConflictError, NotFoundError, StoreError
from storefront.services.slug_service import SlugService
from storefront.services.favourite_service import FavouriteService

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "all"


def _parse_sort(sort) -> SortField:
    try:
        return SortField(sort)
    except ValueError:
        return SortField.LATEST


class ItemService:
    """Item listing and creation"""

    @staticmethod
    def list_items(category: str = None, sort: str = "latest", order: str = "desc", search: str = None) -> list[Item]:
        """List items with a derived ``favourite_count`` attribute.

        ``category`` of None or "all" disables the filter. Unknown sort fields
        fall back to latest, and any order other than "asc" sorts descending.
        Sorting by likes breaks ties newest first whatever the order.
        """
        sort_field = _parse_sort(sort)
        direction = asc if order == SortOrder.ASC.value else desc

        counts = FavouriteService.count_subquery()
        favourite_count = func.coalesce(counts.c.favourite_count, 0).label("favourite_count")

        query = db.session.query(Item, favourite_count).outerjoin(
            counts, counts.c.item_id == Item.id
        )

        if category and category != DEFAULT_CATEGORY:
            query = query.filter(Item.category == category)

        if search:
            query = query.filter(
                or_(
                    Item.name.icontains(search, autoescape=True),
                    Item.description.icontains(search, autoescape=True),
                )
            )

        if sort_field == SortField.LIKES:
            query = query.order_by(direction(favourite_count), Item.created_at.desc())
        elif sort_field == SortField.PRICE:
            query = query.order_by(direction(Item.price))
        else:
            query = query.order_by(direction(Item.created_at))

        try:
            rows = query.all()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to list items: {e}", exc_info=True)
            raise StoreError("Failed to fetch items") from e

        items = []
        for item, count in rows:
            item.favourite_count = count
            items.append(item)
        return items

    @staticmethod
    def create_item(name: str, price, category: str, description: str = None, media: list = None) -> Item:
        """Create item with a unique slug"""
        if not name or not str(name).strip():
            raise ValidationError("Missing required fields")
        if price is None or price == "":
            raise ValidationError("Missing required fields")
        if not category or not str(category).strip():
            raise ValidationError("Missing required fields")

        try:
            price = Decimal(str(price))
        except InvalidOperation:
            raise ValidationError("Price must be a number")
        if not price.is_finite():
            raise ValidationError("Price must be a number")
        if price < 0:
            raise ValidationError("Price must not be negative")

        try:
            slug = SlugService.ensure_unique_slug(name)
            item = Item(
                name=name,
                slug=slug,
                price=price,
                category=category,
                description=DEFAULT_DESCRIPTION if description is None else description,
                media=[{"type": m["type"], "url": m["url"]} for m in media or []],
            )
            db.session.add(item)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Slug for item {name!r} rejected by unique index")
            raise ConflictError("Item slug already in use") from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to create item: {e}", exc_info=True)
            raise StoreError("Failed to create item") from e

        logger.info(f"Created item {item.slug} ({item.id})")
        return item

    @staticmethod
    def get_item_by_slug(slug: str) -> Item:
        """Get item by slug"""
        try:
            item = Item.query.filter_by(slug=slug).first()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to fetch item {slug}: {e}", exc_info=True)
            raise StoreError("Failed to fetch item") from e

        if not item:
            raise NotFoundError("Item not found")
        return item
