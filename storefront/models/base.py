from storefront.extensions import db
from datetime import datetime, timezone
import uuid


class BaseModel(db.Model):
    """Base model with common fields"""

    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(
        db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False
    )

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id}>"
