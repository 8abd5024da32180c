import logging
from flask import current_app
from storefront.models.item import Item
from storefront.extensions import db
from storefront.utils.helpers import slugify, random_suffix

logger = logging.getLogger(__name__)

FALLBACK_SLUG = "item"
# Leaves room for the suffix inside the 255 character column
MAX_BASE_LENGTH = 200


class SlugService:
    """Derives unique item slugs from display names"""

    @staticmethod
    def generate_candidate(name: str) -> str:
        """Slugified name plus a random suffix, e.g. ``red-bag-x7k2qa``.

        The suffix makes repeated calls with the same name yield different
        candidates, so a uniqueness loop cannot spin on one value.
        """
        base = slugify(name, max_length=MAX_BASE_LENGTH) or FALLBACK_SLUG
        length = current_app.config.get("SLUG_SUFFIX_LENGTH", 6)
        return f"{base}-{random_suffix(length)}"

    @staticmethod
    def slug_exists(slug: str) -> bool:
        return db.session.query(Item.id).filter_by(slug=slug).first() is not None

    @staticmethod
    def ensure_unique_slug(name: str) -> str:
        """Generate candidates until one is unused. Read-only."""
        attempts = 1
        slug = SlugService.generate_candidate(name)
        while SlugService.slug_exists(slug):
            logger.info(f"Slug {slug} already taken, regenerating")
            slug = SlugService.generate_candidate(name)
            attempts += 1

        if attempts > 1:
            logger.info(f"Resolved slug {slug} after {attempts} attempts")
        return slug
