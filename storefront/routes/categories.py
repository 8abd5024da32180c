from flask import Blueprint, request, jsonify, current_app
from storefront.services.category_service import CategoryService
from storefront.utils.validators import validate_schema
from storefront.schemas import CategoryCreateSchema, CategorySchema
from storefront.enums import CategorySource
from storefront.exceptions import StoreError

category_bp = Blueprint("categories", __name__)


@category_bp.route("", methods=["GET"])
def list_categories():
    """List categories, reporting which source answered"""
    try:
        result = CategoryService.list_categories()
    except StoreError as e:
        # Page rendering continues without categories
        current_app.logger.error(f"Error fetching categories: {e}")
        return jsonify({"categories": []}), 200

    source = result["source"]
    body = {"categories": result["categories"], "source": source.value}
    if source == CategorySource.COLLECTION:
        body["fromCollection"] = True
    else:
        body["fromItems"] = True
    return jsonify(body), 200


@category_bp.route("", methods=["POST"])
@validate_schema(CategoryCreateSchema)
def create_category():
    """Register a category"""
    data = request.validated_data
    category = CategoryService.create_category(data["name"])

    return (
        jsonify(
            {
                "success": True,
                "message": "Category created successfully",
                "category": CategorySchema().dump(category),
            }
        ),
        201,
    )
