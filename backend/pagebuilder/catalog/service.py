# pagebuilder/catalog/service.py
import logging
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError as PydanticValidationError

from .cache import CatalogCache
from .client import CatalogClient
from .normalize import NormalizedProduct, normalize_product

logger = logging.getLogger(__name__)

PRODUCT_KEY_PREFIX = "products:"


def product_cache_key(product_ids: Iterable[str]) -> str:
    """Same id set, same key, whatever the order or duplicates."""
    return PRODUCT_KEY_PREFIX + ",".join(sorted(set(product_ids)))


def _normalize_all(records: Iterable[Dict[str, Any]]) -> List[NormalizedProduct]:
    products = []
    for raw in records:
        try:
            products.append(normalize_product(raw))
        except PydanticValidationError as exc:
            logger.warning(
                "Skipping malformed catalog product %r: %s",
                raw.get("product_id") or raw.get("id"), exc.errors()[0]["msg"],
            )
    return products


class ProductCatalog:
    def __init__(self, client: CatalogClient, cache: CatalogCache, ttl_seconds: float = 30):
        self._client = client
        self._cache = cache
        self._ttl = ttl_seconds

    @property
    def cache(self) -> CatalogCache:
        return self._cache

    def get_products_by_ids(self, product_ids: Iterable[str]) -> List[NormalizedProduct]:
        """
        Normalized products in the order requested.

        Ids the catalog does not know are skipped, and so are records that
        cannot be normalized.
        """
        requested = list(dict.fromkeys(pid for pid in product_ids if pid))
        if not requested:
            return []

        id_set = sorted(requested)
        products = self._cache.with_cache(
            product_cache_key(id_set),
            self._ttl,
            lambda: _normalize_all(self._client.fetch_products(id_set)),
        )

        by_id = {product.id: product for product in products}
        return [by_id[pid] for pid in requested if pid in by_id]

    def search_cities(self, keyword: str) -> List[Dict[str, Any]]:
        return self._client.search_cities(keyword)

    def close(self) -> None:
        self._client.close()
