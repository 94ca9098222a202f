from flask import jsonify, request

from pagebuilder.domain.exceptions import ValidationError
from pagebuilder.extensions import get_review_client
from . import v1_bp

MAX_REVIEWS = 20


def _product_code():
    product_code = request.args.get("productCode", "").strip()
    if not product_code:
        raise ValidationError("Query parameter 'productCode' is required")
    return product_code


@v1_bp.route("/reviews", methods=["GET"])
def list_reviews():
    try:
        limit = int(request.args.get("limit", 4))
    except ValueError:
        raise ValidationError("Query parameter 'limit' must be an integer") from None
    if not 1 <= limit <= MAX_REVIEWS:
        raise ValidationError(f"Query parameter 'limit' must be between 1 and {MAX_REVIEWS}")

    reviews = get_review_client().fetch_reviews(_product_code(), limit=limit)

    return jsonify({"items": reviews})


@v1_bp.route("/reviews/best", methods=["GET"])
def best_review():
    """Single review for a product card; `review` is null when there are none."""
    review = get_review_client().fetch_best_review(_product_code())

    return jsonify({"review": review})
