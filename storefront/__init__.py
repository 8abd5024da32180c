import logging
from flask import Flask
from .extensions import db, migrate, ma
from .config import Config
from storefront.utils.error_handlers import register_error_handlers
from storefront.routes import register_blueprints
from storefront.commands import register_commands


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.url_map.strict_slashes = False

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Models must be imported before create_all / migrations see the metadata
    from storefront import models  # noqa: F401

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
