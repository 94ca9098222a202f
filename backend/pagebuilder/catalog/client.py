# pagebuilder/catalog/client.py
from __future__ import annotations

from typing import Any, Sequence

import httpx

from .http import extract_list, request_json

SEARCH_PATH = "/rest/product/_search"
CITY_SEARCH_PATH = "/rest/area/city"
SERVICE = "Product catalog"


class CatalogClient:
    """Looks up raw product and city records on the product catalog API."""

    def __init__(
        self,
        base_url: str,
        *,
        auth: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        if auth:
            headers["Authorization"] = auth

        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def fetch_products(self, product_ids: Sequence[str]) -> list[dict[str, Any]]:
        if not product_ids:
            return []

        body = request_json(
            self._client,
            "GET",
            SEARCH_PATH,
            service=SERVICE,
            params={"product_ids": ",".join(product_ids)},
        )
        # { total, offset, count, list: [...] } is the documented shape
        return extract_list(body, ("list", "data", "products"), service=SERVICE)

    def search_cities(self, keyword: str, count: int = 10) -> list[dict[str, Any]]:
        """City records ({id, city, nation, aliases}) matching `keyword`."""
        keyword = (keyword or "").strip()
        if not keyword:
            return []

        body = request_json(
            self._client,
            "GET",
            CITY_SEARCH_PATH,
            service=SERVICE,
            params={"keyword": keyword, "count": count},
        )
        return extract_list(body, ("list",), service=SERVICE)

    def close(self) -> None:
        self._client.close()
