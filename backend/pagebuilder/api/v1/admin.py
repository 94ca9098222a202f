from flask import jsonify, request

from pagebuilder.extensions import get_product_catalog
from . import v1_bp


@v1_bp.route("/admin/cache/clear", methods=["POST"])
def clear_catalog_cache():
    """Drop cached catalog lookups; `pattern` limits it to matching keys."""
    data = request.get_json(silent=True) or {}
    pattern = data.get("pattern") or request.args.get("pattern")

    removed = get_product_catalog().cache.clear(pattern)

    return jsonify({
        "ok": True,
        "removed": removed,
    })
