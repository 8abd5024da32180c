"""Per-user favourites keyed by a caller-issued anonymous identifier.

The identifier is an unauthenticated token; nothing here checks who issued it.
The (anonymous_user_id, item_id) unique constraint is what keeps concurrent
toggles from creating duplicates, so the losing insert is resolved here
instead of surfacing as an error.
"""
import logging
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import contains_eager
from storefront.models.favourite import Favourite
from storefront.models.item import Item
from storefront.extensions import db
from storefront.exceptions import ValidationError, NotFoundError, StoreError

logger = logging.getLogger(__name__)


class FavouriteService:
    @staticmethod
    def count_subquery():
        """Favourite count per item id, for joining into listings"""
        return (
            db.session.query(
                Favourite.item_id.label("item_id"),
                func.count(Favourite.id).label("favourite_count"),
            )
            .group_by(Favourite.item_id)
            .subquery()
        )

    @staticmethod
    def list_favourites(anonymous_user_id: str) -> list[Favourite]:
        """Favourites of one user with their items loaded, newest first"""
        if not anonymous_user_id:
            return []

        try:
            return (
                Favourite.query.join(Favourite.item)
                .options(contains_eager(Favourite.item))
                .filter(Favourite.anonymous_user_id == anonymous_user_id)
                .order_by(Favourite.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to list favourites: {e}", exc_info=True)
            raise StoreError("Failed to fetch favourites") from e

    @staticmethod
    def _find_favourite(item_id: str, anonymous_user_id: str):
        return Favourite.query.filter_by(
            item_id=item_id, anonymous_user_id=anonymous_user_id
        ).first()

    @staticmethod
    def toggle_favourite(item_id: str, anonymous_user_id: str) -> bool:
        """Flip the favourite state of one (user, item) pair.

        Returns True when the pair ends up favourited.
        """
        if not anonymous_user_id or not anonymous_user_id.strip():
            raise ValidationError("anonymousUserId is required")
        if not item_id:
            raise ValidationError("itemId is required")

        try:
            if db.session.get(Item, item_id) is None:
                raise NotFoundError("Item not found")

            if FavouriteService._find_favourite(item_id, anonymous_user_id):
                return FavouriteService._remove(item_id, anonymous_user_id)
            return FavouriteService._add(item_id, anonymous_user_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to toggle favourite: {e}", exc_info=True)
            raise StoreError("Failed to toggle favourite") from e

    @staticmethod
    def _remove(item_id: str, anonymous_user_id: str) -> bool:
        deleted = Favourite.query.filter_by(
            item_id=item_id, anonymous_user_id=anonymous_user_id
        ).delete()
        db.session.commit()

        if not deleted:
            logger.warning(
                f"Favourite {anonymous_user_id}/{item_id} already removed by a concurrent toggle"
            )
        else:
            logger.info(f"User {anonymous_user_id} unfavourited item {item_id}")
        return False

    @staticmethod
    def _add(item_id: str, anonymous_user_id: str) -> bool:
        try:
            db.session.add(Favourite(item_id=item_id, anonymous_user_id=anonymous_user_id))
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.warning(
                f"Favourite {anonymous_user_id}/{item_id} already created by a concurrent toggle"
            )
            return True

        logger.info(f"User {anonymous_user_id} favourited item {item_id}")
        return True
