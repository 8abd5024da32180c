from flask import jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException
from storefront.exceptions import CatalogError, StoreError


def register_error_handlers(app):
    """Map catalog, database and HTTP errors to JSON bodies"""

    @app.errorhandler(CatalogError)
    def handle_catalog_error(error):
        if isinstance(error, StoreError):
            app.logger.error(f"Store error: {error}")
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        return (
            jsonify({"error": "Database integrity error", "details": str(error.orig)}),
            409,
        )

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        app.logger.error(f"Database error: {error}")
        return jsonify({"error": "Database error"}), 500

    # Unknown routes, wrong methods, unsupported media types
    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.error(f"Unhandled exception: {error}", exc_info=True)
        return jsonify({"error": "An unexpected error occurred"}), 500
