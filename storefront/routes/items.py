from flask import Blueprint, request, jsonify, current_app
from storefront.services.item_service import ItemService
from storefront.utils.validators import validate_schema, validate_listing_args
from storefront.utils.helpers import get_share_url, build_inquiry_url
from storefront.schemas import ItemCreateSchema, ItemSchema
from storefront.exceptions import StoreError

item_bp = Blueprint("items", __name__)


@item_bp.route("", methods=["GET"])
def list_items():
    """List items with favourite counts"""
    category, sort, order, search = validate_listing_args()

    try:
        items = ItemService.list_items(category=category, sort=sort, order=order, search=search)
    except StoreError as e:
        current_app.logger.error(f"Error fetching items: {e}")
        return jsonify({"items": []}), 200

    return jsonify({"items": ItemSchema(many=True).dump(items)}), 200


@item_bp.route("", methods=["POST"])
@validate_schema(ItemCreateSchema)
def create_item():
    """Create item"""
    data = request.validated_data
    item = ItemService.create_item(**data)

    return jsonify({"item": ItemSchema().dump(item)}), 201


@item_bp.route("/<slug>", methods=["GET"])
def get_item(slug):
    """Item detail with links for sharing and inquiries"""
    item = ItemService.get_item_by_slug(slug)

    return (
        jsonify(
            {
                "item": ItemSchema().dump(item),
                "coverUrl": item.cover_url(),
                "shareUrl": get_share_url(item.slug),
                "inquiryUrl": build_inquiry_url(item.name, item.price, item.slug),
            }
        ),
        200,
    )
