import atexit
import logging
import os

from flask import Flask, send_file, current_app
from flask_swagger_ui import get_swaggerui_blueprint

from .api.v1 import v1_bp
from .catalog.cache import CatalogCache
from .catalog.client import CatalogClient
from .catalog.reviews import ReviewClient
from .catalog.service import ProductCatalog
from .config import config_by_name
from .errors import register_error_handlers
from .extensions import PAGE_STORE_KEY, PRODUCT_CATALOG_KEY, REVIEW_CLIENT_KEY, db, migrate
from .storage.backends import SqlAlchemyBackend
from .storage.store import DocumentStore


def create_app(config_name: str = "development", **overrides) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.config.update(overrides)

    logging.basicConfig()
    logging.getLogger("pagebuilder").setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    durable = None
    if app.config.get("SQLALCHEMY_DATABASE_URI"):
        db.init_app(app)
        migrate.init_app(app, db)
        durable = SqlAlchemyBackend(db)

        if app.config.get("CREATE_TABLES"):
            with app.app_context():
                db.create_all()

    # -------------------------------------------------
    # Page store and product catalog
    # -------------------------------------------------
    app.extensions[PAGE_STORE_KEY] = app.config.get("PAGE_STORE") or DocumentStore.create(
        durable,
        strict=app.config["PAGE_STORE_STRICT"],
    )

    client = CatalogClient(
        app.config["CATALOG_API_BASE"],
        auth=app.config.get("CATALOG_API_AUTH"),
        timeout=app.config["CATALOG_TIMEOUT_SECONDS"],
        transport=app.config.get("CATALOG_TRANSPORT"),
    )
    app.extensions[PRODUCT_CATALOG_KEY] = ProductCatalog(
        client,
        CatalogCache(),
        ttl_seconds=app.config["CATALOG_CACHE_TTL_SECONDS"],
    )
    app.extensions[REVIEW_CLIENT_KEY] = ReviewClient(
        app.config["REVIEW_API_BASE"],
        timeout=app.config["CATALOG_TIMEOUT_SECONDS"],
        transport=app.config.get("REVIEW_TRANSPORT"),
    )

    # Close the httpx connection pools at interpreter exit
    atexit.register(app.extensions[PRODUCT_CATALOG_KEY].close)
    atexit.register(app.extensions[REVIEW_CLIENT_KEY].close)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/pagebuilder.yaml", methods=["GET"], endpoint="openapi_pagebuilder")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "pagebuilder_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("pagebuilder_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/pagebuilder.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Page Builder API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
