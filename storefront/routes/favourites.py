from flask import Blueprint, request, jsonify, current_app
from storefront.services.favourite_service import FavouriteService
from storefront.utils.validators import validate_schema
from storefront.schemas import FavouriteToggleSchema, FavouriteSchema
from storefront.exceptions import StoreError

favourite_bp = Blueprint("favourites", __name__)


@favourite_bp.route("", methods=["GET"])
def list_favourites():
    """Favourites of one anonymous user; unknown users get an empty list"""
    user_id = request.args.get("userId", "")
    try:
        favourites = FavouriteService.list_favourites(user_id)
    except StoreError as e:
        current_app.logger.error(f"Error fetching favourites: {e}")
        return jsonify({"favourites": []}), 200

    return jsonify({"favourites": FavouriteSchema(many=True).dump(favourites)}), 200


@favourite_bp.route("", methods=["POST"])
@validate_schema(FavouriteToggleSchema)
def toggle_favourite():
    """Toggle favourite"""
    data = request.validated_data
    favourited = FavouriteService.toggle_favourite(
        data["item_id"], data["anonymous_user_id"]
    )
    return jsonify({"favourited": favourited}), 200
