from flask import jsonify, request

from pagebuilder.domain.exceptions import ValidationError
from pagebuilder.extensions import get_product_catalog
from . import v1_bp


@v1_bp.route("/products", methods=["GET"])
def get_products():
    raw = request.args.get("ids", "")
    ids = [pid.strip() for pid in raw.split(",") if pid.strip()]

    if not ids:
        raise ValidationError("Query parameter 'ids' is required")

    products = get_product_catalog().get_products_by_ids(ids)

    return jsonify({
        "items": [product.to_dict() for product in products],
    })


@v1_bp.route("/cities/search", methods=["GET"])
def search_cities():
    keyword = request.args.get("keyword", "").strip()

    if not keyword:
        raise ValidationError("Query parameter 'keyword' is required")

    return jsonify({
        "cities": get_product_catalog().search_cities(keyword),
    })
