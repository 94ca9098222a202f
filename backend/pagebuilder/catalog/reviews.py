# pagebuilder/catalog/reviews.py
from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from .http import extract_list, request_json

logger = logging.getLogger(__name__)

REVIEW_LIST_PATH = "/api/review/reviewList"
SERVICE = "Review API"
BEST_SCORE = 5.0


class ReviewClient:
    """Reads customer reviews for a product from the review API."""

    def __init__(
        self,
        base_url: str,
        *,
        brand: str = "TOURVIS",
        product_category: str = "TNT",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._brand = brand
        self._product_category = product_category
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"accept": "application/json", "Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def fetch_reviews(
        self,
        product_code: str,
        *,
        limit: int = 4,
        offset: int = 0,
        best_only: bool = True,
    ) -> list[dict[str, Any]]:
        """At most `limit` raw review records, in the order the API returns them."""
        if not product_code:
            raise ValueError("product_code is required")

        body = request_json(
            self._client,
            "POST",
            REVIEW_LIST_PATH,
            service=SERVICE,
            json={
                "brand": self._brand,
                "prodCat": self._product_category,
                "prodCd": product_code,
                "bestYn": "Y" if best_only else "N",
                "limit": limit,
                "offset": offset,
            },
        )
        reviews = extract_list(body, ("reviews", "data", "list", "items"), service=SERVICE)
        return reviews[:limit]

    def fetch_best_review(self, product_code: str, *, limit: int = 10) -> dict[str, Any] | None:
        return select_best_review(self.fetch_reviews(product_code, limit=limit))

    def close(self) -> None:
        self._client.close()


def _is_best(review: dict[str, Any]) -> bool:
    score = review.get("reviewScore")
    if score is not None:
        try:
            return float(score) >= BEST_SCORE
        except (TypeError, ValueError):
            pass
    return review.get("bestYn") in ("Y", True, "true")


def select_best_review(reviews: Sequence[dict[str, Any]]) -> dict[str, Any] | None:
    """
    The first review scored 5 or above. A review without a usable score
    counts when it is flagged best. Falls back to the first review.
    """
    if not reviews:
        return None

    for review in reviews:
        if _is_best(review):
            return review

    logger.debug("No review scored %s or flagged best, using the first one", BEST_SCORE)
    return reviews[0]
