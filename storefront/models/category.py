from storefront.models.base import BaseModel
from storefront.extensions import db


def normalize_name(name: str) -> str:
    return name.strip().lower()


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(255), nullable=False)
    # Lower-cased name; the unique index makes "Bags" and "bags" collide in the store
    name_key = db.Column(db.String(255), unique=True, nullable=False, index=True)

    def __init__(self, **kwargs):
        if "name" in kwargs and "name_key" not in kwargs:
            kwargs["name_key"] = normalize_name(kwargs["name"])
        super().__init__(**kwargs)
