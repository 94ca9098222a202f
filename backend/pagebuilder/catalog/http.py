# pagebuilder/catalog/http.py
from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from pagebuilder.domain.exceptions import CatalogError

logger = logging.getLogger(__name__)


def request_json(client: httpx.Client, method: str, path: str, *, service: str, **kwargs: Any) -> Any:
    """
    Send one request and return the decoded JSON body.

    Network failures, error statuses, non-JSON content and undecodable
    bodies all raise CatalogError.
    """
    try:
        response = client.request(method, path, **kwargs)
    except httpx.RequestError as exc:
        raise CatalogError(f"Network error while calling {service}: {exc}") from exc

    if response.status_code >= 400:
        logger.error("%s returned %s: %s", service, response.status_code, response.text[:200])
        raise CatalogError(f"{service} call failed ({response.status_code})")

    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        logger.error("%s returned non-JSON content (%s)", service, content_type)
        raise CatalogError(f"{service} returned non-JSON content: {content_type}")

    try:
        return response.json()
    except ValueError as exc:
        raise CatalogError(f"{service} returned invalid JSON") from exc


def extract_list(body: Any, keys: Iterable[str], *, service: str) -> list[dict[str, Any]]:
    """Records from a bare JSON list or from the first list-valued key of an object."""
    if isinstance(body, list):
        items = body
    elif isinstance(body, dict):
        for key in keys:
            if isinstance(body.get(key), list):
                items = body[key]
                break
        else:
            raise CatalogError(f"{service} response has no record list")
    else:
        raise CatalogError(f"{service} response must be a JSON list or object")

    return [item for item in items if isinstance(item, dict)]
