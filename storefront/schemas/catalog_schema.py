"""Response schemas; attribute names stay snake_case, wire keys are camelCase."""
from marshmallow import fields
from storefront.extensions import ma


class MediaEntrySchema(ma.Schema):
    type = fields.Str()
    url = fields.Str()


class ItemSchema(ma.Schema):
    id = fields.Str()
    name = fields.Str()
    slug = fields.Str()
    description = fields.Str(allow_none=True)
    price = fields.Float()
    category = fields.Str(allow_none=True)
    media = fields.List(fields.Nested(MediaEntrySchema))
    created_at = fields.DateTime(data_key="createdAt")
    # Transient attribute set by the listing engine, omitted when absent
    favourite_count = fields.Int(data_key="favouriteCount")


class ItemSummarySchema(ma.Schema):
    id = fields.Str()
    slug = fields.Str()
    name = fields.Str()


class CategorySchema(ma.Schema):
    id = fields.Str()
    name = fields.Str()


class FavouriteSchema(ma.Schema):
    id = fields.Str()
    anonymous_user_id = fields.Str(data_key="anonymousUserId")
    item_id = fields.Str(data_key="itemId")
    created_at = fields.DateTime(data_key="createdAt")
    item = fields.Nested(ItemSummarySchema)
