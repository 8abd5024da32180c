import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from storefront.models.category import Category, normalize_name
from storefront.models.item import Item
from storefront.extensions import db
from storefront.enums import CategorySource
from storefront.exceptions import ValidationError, ConflictError, StoreError

logger = logging.getLogger(__name__)


class CategoryService:
    """Category registry with a fallback to categories observed on items"""

    @staticmethod
    def list_categories() -> dict:
        """Return ``{"categories": [...], "source": CategorySource}``.

        Registered categories are authoritative as soon as one exists. Stores
        that predate the registry fall back to the distinct item categories.
        Both branches sort by code point, independent of database collation.
        """
        try:
            names = [name for (name,) in db.session.query(Category.name).all()]
            if names:
                return {"categories": sorted(names), "source": CategorySource.COLLECTION}

            rows = (
                db.session.query(Item.category)
                .filter(Item.category.isnot(None), Item.category != "")
                .distinct()
                .all()
            )
            return {
                "categories": sorted(category for (category,) in rows),
                "source": CategorySource.ITEMS,
            }
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to list categories: {e}", exc_info=True)
            raise StoreError("Failed to fetch categories") from e

    @staticmethod
    def _find_by_name(name: str):
        return Category.query.filter_by(name_key=normalize_name(name)).first()

    @staticmethod
    def create_category(name: str) -> Category:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Category name is required")

        category_name = name.strip()

        try:
            if CategoryService._find_by_name(category_name):
                raise ConflictError("Category already exists")

            category = Category(name=category_name)
            db.session.add(category)
            db.session.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent insert of the same name
            db.session.rollback()
            logger.warning(f"Category {category_name!r} rejected by unique index")
            raise ConflictError("Category already exists") from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to create category: {e}", exc_info=True)
            raise StoreError("Failed to create category") from e

        logger.info(f"Created category {category.name} ({category.id})")
        return category
