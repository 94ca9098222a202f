from flask import current_app
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
migrate = Migrate()

PAGE_STORE_KEY = "pagebuilder.page_store"
PRODUCT_CATALOG_KEY = "pagebuilder.product_catalog"
REVIEW_CLIENT_KEY = "pagebuilder.review_client"


def get_page_store():
    return current_app.extensions[PAGE_STORE_KEY]


def get_product_catalog():
    return current_app.extensions[PRODUCT_CATALOG_KEY]


def get_review_client():
    return current_app.extensions[REVIEW_CLIENT_KEY]
