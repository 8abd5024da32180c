from storefront.models.base import BaseModel
from storefront.extensions import db

DEFAULT_CATEGORY = "all"


class Item(BaseModel):
    __tablename__ = "items"

    name = db.Column(db.String(255), nullable=False, index=True)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default=DEFAULT_CATEGORY)
    price = db.Column(db.Numeric(15, 2), nullable=False)
    category = db.Column(db.String(255), default=DEFAULT_CATEGORY, index=True)
    media = db.Column(db.JSON, default=list, nullable=False)  # [{"type": "image"|"video", "url": ...}]

    # Relationships
    favourites = db.relationship("Favourite", back_populates="item", lazy="dynamic")

    def cover_url(self):
        """First image, falling back to the first media entry of any type"""
        media = self.media or []
        for entry in media:
            if entry.get("type") == "image":
                return entry.get("url")
        return media[0].get("url") if media else None
