from flask import jsonify

from pagebuilder.extensions import get_page_store
from . import v1_bp


@v1_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "pagebuilder",
        "store": get_page_store().describe(),
    })
