from marshmallow import Schema, fields, validate, EXCLUDE
from storefront.enums import MediaType
from .catalog_schema import (
    ItemSchema,
    ItemSummarySchema,
    CategorySchema,
    FavouriteSchema,
)


class MediaSchema(Schema):
    type = fields.Str(
        required=True, validate=validate.OneOf([m.value for m in MediaType])
    )
    url = fields.Str(required=True, validate=validate.Length(min=1, max=2048))


class CategoryCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(max=255))


class ItemCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str(allow_none=True)
    price = fields.Decimal(required=True, places=2, validate=validate.Range(min=0))
    media = fields.List(fields.Nested(MediaSchema))
    category = fields.Str(required=True, validate=validate.Length(min=1, max=255))


class FavouriteToggleSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    item_id = fields.Str(required=True, data_key="itemId")
    anonymous_user_id = fields.Str(required=True, data_key="anonymousUserId")


__all__ = [
    "MediaSchema",
    "CategoryCreateSchema",
    "ItemCreateSchema",
    "FavouriteToggleSchema",
    "ItemSchema",
    "ItemSummarySchema",
    "CategorySchema",
    "FavouriteSchema",
]
