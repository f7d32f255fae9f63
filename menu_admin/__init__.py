from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from .config import Config
from .extensions import cors, init_storage


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Extensions
    cors.init_app(app)
    init_storage(app)

    for collection in app.extensions["json_store"].collections():
        app.logger.debug("Loaded collection %s from %s", collection.name, collection.path)

    # Bodies over MAX_CONTENT_LENGTH are refused before Werkzeug buffers them
    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large(e):
        limit = app.config.get("MAX_CONTENT_LENGTH")
        app.logger.warning("Rejected request body over %s bytes", limit)
        return jsonify({"error": f"Request body exceeds the {limit} byte limit"}), 413

    # Blueprints
    from .routes.menu_api import bp as menu_api
    from .routes.orders_api import bp as orders_api
    from .routes.reviews_api import bp as reviews_api
    from .routes.carts_api import bp as carts_api
    from .routes.restaurants_api import bp as restaurants_api
    from .routes.uploads_api import bp as uploads_api
    from .routes.admin_api import bp as admin_api
    from .routes.pages import bp as pages_bp

    app.register_blueprint(menu_api, url_prefix="/api")
    app.register_blueprint(orders_api, url_prefix="/api")
    app.register_blueprint(reviews_api, url_prefix="/api")
    app.register_blueprint(carts_api, url_prefix="/api")
    app.register_blueprint(restaurants_api, url_prefix="/api")
    app.register_blueprint(uploads_api, url_prefix="/api")
    app.register_blueprint(admin_api, url_prefix="/api")
    app.register_blueprint(pages_bp)

    return app
