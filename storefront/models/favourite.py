from storefront.models.base import BaseModel
from storefront.extensions import db


class Favourite(BaseModel):
    __tablename__ = "favourites"
    __table_args__ = (
        db.UniqueConstraint("anonymous_user_id", "item_id", name="uq_favourites_user_item"),
    )

    anonymous_user_id = db.Column(db.String(255), nullable=False, index=True)
    item_id = db.Column(
        db.String(36),
        db.ForeignKey("items.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    item = db.relationship("Item", back_populates="favourites")
