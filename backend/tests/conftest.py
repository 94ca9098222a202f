import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from pagebuilder import create_app
from pagebuilder.storage.backends import InMemoryBackend
from pagebuilder.storage.store import DocumentStore


CATALOG_PRODUCTS = {
    "A": {
        "product_id": "A",
        "name": "Han River Cruise",
        "display_price": {"price2": 25000},
        "primary_image": {"origin": "https://img.test/a.jpg", "og": "https://img.test/a-og.jpg"},
        "areas": [{"scope": "city", "name": "Seoul"}],
        "review": {"review_score": 4.8, "review_count": 120},
    },
    "B": {
        "product_id": "B",
        "name": "Palace Night Tour",
        "price": {"amount": 18000, "currency": "KRW"},
        "display_images": [{"origin": "https://img.test/b.jpg"}],
        "sold_out": True,
    },
}


CITIES = [
    {"id": "SEL", "city": "Seoul", "nation": "South Korea", "aliases": "seoul,서울"},
    {"id": "PUS", "city": "Busan", "nation": "South Korea", "aliases": "busan,부산"},
]

REVIEWS = [
    {"prodNm": "Han River Cruise", "reviewCont": "Fine", "reviewScore": 4.0, "bestYn": "Y", "imageList": []},
    {"prodNm": "Han River Cruise", "reviewCont": "Great night", "reviewScore": 5.0, "bestYn": "Y", "imageList": []},
    {"prodNm": "Han River Cruise", "reviewCont": "Lovely", "reviewScore": 5.0, "bestYn": "N", "imageList": []},
]


class StepClock:
    """Wall clock that moves forward one second per reading."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now = self.now + timedelta(seconds=1)
        return self.now


class FakeMonotonic:
    def __init__(self):
        self.value = 1000.0

    def __call__(self):
        return self.value

    def advance(self, seconds):
        self.value += seconds


class CatalogStub:
    """httpx handler serving CATALOG_PRODUCTS and CITIES and counting calls."""

    def __init__(self, products=None):
        self.products = CATALOG_PRODUCTS if products is None else products
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/rest/area/city":
            keyword = request.url.params.get("keyword", "").lower()
            found = [c for c in CITIES if keyword in c["city"].lower() or keyword in c["aliases"].lower()]
            return httpx.Response(200, json={"total": len(found), "offset": 0, "count": len(found), "list": found})

        ids = request.url.params.get("product_ids", "").split(",")
        found = [self.products[pid] for pid in ids if pid in self.products]
        return httpx.Response(200, json={"total": len(found), "list": found})


class ReviewStub:
    """httpx handler for the review list endpoint; records request bodies."""

    def __init__(self, reviews=None):
        self.reviews = REVIEWS if reviews is None else reviews
        self.bodies = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.bodies.append(body)
        return httpx.Response(200, json={"reviews": self.reviews[:body["limit"]]})


def make_page(slug="seoul", status="DRAFT", content=None, **extra):
    page = {
        "slug": slug,
        "cityCode": "SEL",
        "status": status,
        "seo": {"title": "Seoul", "description": "Things to do in Seoul"},
        "content": content if content is not None else [
            {"type": "ProductGrid", "title": "Top Picks", "productIds": ["A", "B"], "columns": 4},
        ],
    }
    page.update(extra)
    return page


@pytest.fixture()
def clock():
    return StepClock()


@pytest.fixture()
def memory_backend():
    return InMemoryBackend()


@pytest.fixture()
def store(memory_backend, clock):
    return DocumentStore.create(memory_backend, strict=True, clock=clock)


@pytest.fixture()
def catalog_stub():
    return CatalogStub()


@pytest.fixture()
def review_stub():
    return ReviewStub()


@pytest.fixture()
def app(catalog_stub, review_stub):
    app = create_app(
        "testing",
        CATALOG_TRANSPORT=httpx.MockTransport(catalog_stub),
        REVIEW_TRANSPORT=httpx.MockTransport(review_stub),
    )
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture(name="page_payload")
def page_payload_fixture():
    return make_page
