# pagebuilder/api/v1/pages.py
from flask import request, jsonify

from pagebuilder.application.cms.delete_page import delete_page
from pagebuilder.application.cms.get_page import get_page, get_published_page, list_pages
from pagebuilder.application.cms.publish_page import publish_page
from pagebuilder.application.cms.render_page import render_page
from pagebuilder.application.cms.save_page import save_page
from pagebuilder.application.cms.unpublish_page import revert_to_draft
from pagebuilder.domain.exceptions import ValidationError
from pagebuilder.domain.page import PageStatus
from pagebuilder.extensions import get_page_store, get_product_catalog
from pagebuilder.normalizers.page import normalize_page
from pagebuilder.normalizers.pagination import normalize_pagination
from . import v1_bp


def _positive_int_arg(name):
    value = request.args.get(name)
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        raise ValidationError(f"Query parameter '{name}' must be an integer") from None
    if number < 1:
        raise ValidationError(f"Query parameter '{name}' must be at least 1")
    return number


def _status_arg():
    value = request.args.get("status")
    if not value:
        return None
    try:
        return PageStatus(value.upper())
    except ValueError:
        raise ValidationError(f"Unknown page status: {value!r}") from None


# ------------------------
# Pages (editor)
# ------------------------

@v1_bp.route("/pages", methods=["POST"])
def save_page_route():
    data = request.get_json(silent=True) or {}

    page = save_page(
        store=get_page_store(),
        data=data,
        if_unmodified_since=request.headers.get("If-Unmodified-Since"),
    )

    return jsonify({
        "ok": True,
        "slug": page.slug,
        "updatedAt": page.updatedAt.isoformat(),
    })


@v1_bp.route("/pages", methods=["GET"])
def list_pages_route():
    pages = list_pages(store=get_page_store(), status=_status_arg())

    return jsonify(normalize_pagination(
        pages,
        lambda page: normalize_page(page, admin=True),
        page=_positive_int_arg("page"),
        per_page=_positive_int_arg("per_page"),
    ))


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page_route(slug):
    page = get_page(store=get_page_store(), slug=slug)
    return jsonify(normalize_page(page, admin=True))


@v1_bp.route("/pages/<slug>", methods=["DELETE"])
def delete_page_route(slug):
    delete_page(store=get_page_store(), slug=slug)
    return "", 204


@v1_bp.route("/pages/<slug>/publish", methods=["POST"])
def publish_page_route(slug):
    page = publish_page(store=get_page_store(), slug=slug)
    return jsonify(normalize_page(page, admin=True))


@v1_bp.route("/pages/<slug>/draft", methods=["POST"])
def revert_to_draft_route(slug):
    page = revert_to_draft(store=get_page_store(), slug=slug)
    return jsonify(normalize_page(page, admin=True))


# ------------------------
# Pages (public)
# ------------------------

@v1_bp.route("/public/pages/<slug>", methods=["GET"])
def public_page_route(slug):
    page = get_published_page(store=get_page_store(), slug=slug)
    return jsonify(render_page(page=page, catalog=get_product_catalog()))
