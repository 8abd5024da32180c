from storefront.routes.categories import category_bp
from storefront.routes.items import item_bp
from storefront.routes.favourites import favourite_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(category_bp, url_prefix='/api/categories')
    app.register_blueprint(item_bp, url_prefix='/api/items')
    app.register_blueprint(favourite_bp, url_prefix='/api/favourites')
