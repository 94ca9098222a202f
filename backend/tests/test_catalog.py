import httpx
import pytest

from pagebuilder.catalog.cache import CatalogCache
from pagebuilder.catalog.client import CatalogClient
from pagebuilder.catalog.normalize import DEFAULT_CURRENCY, normalize_product
from pagebuilder.catalog.service import ProductCatalog
from pagebuilder.domain.exceptions import CatalogError

from conftest import CATALOG_PRODUCTS, CatalogStub


def _catalog(handler):
    client = CatalogClient("http://catalog.test/", auth="Bearer t", transport=httpx.MockTransport(handler))
    return ProductCatalog(client, CatalogCache(), ttl_seconds=30)


def test_normalize_nested_record():
    product = normalize_product(CATALOG_PRODUCTS["A"])

    assert product.id == "A"
    assert product.name == "Han River Cruise"
    assert product.price == 25000
    assert product.currency == DEFAULT_CURRENCY
    assert product.thumbnail == "https://img.test/a.jpg"
    assert product.ogImage == "https://img.test/a-og.jpg"
    assert product.region == "Seoul"
    assert product.reviewScore == 4.8
    assert product.soldOut is False


def test_normalize_flat_record():
    product = normalize_product(CATALOG_PRODUCTS["B"])

    assert product.price == 18000
    assert product.currency == "KRW"
    assert product.images == ["https://img.test/b.jpg"]
    assert product.soldOut is True
    assert product.region is None


def test_region_only_for_city_scope():
    product = normalize_product({"product_id": "C", "name": "x", "areas": [{"scope": "country", "name": "Korea"}]})

    assert product.region is None


def test_products_come_back_in_requested_order():
    stub = CatalogStub()
    catalog = _catalog(stub)

    products = catalog.get_products_by_ids(["B", "missing", "A", "B"])

    assert [p.id for p in products] == ["B", "A"]
    request = stub.requests[0]
    assert request.url.path == "/rest/product/_search"
    assert request.url.params["product_ids"] == "A,B,missing"
    assert request.headers["Authorization"] == "Bearer t"


def test_same_id_set_hits_the_cache():
    stub = CatalogStub()
    catalog = _catalog(stub)

    catalog.get_products_by_ids(["A", "B"])
    catalog.get_products_by_ids(["B", "A"])

    assert len(stub.requests) == 1


def test_empty_request_does_not_call_the_catalog():
    stub = CatalogStub()

    assert _catalog(stub).get_products_by_ids([]) == []
    assert stub.requests == []


def test_error_status_raises_catalog_error():
    catalog = _catalog(lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(CatalogError):
        catalog.get_products_by_ids(["A"])


def test_non_json_response_raises_catalog_error():
    catalog = _catalog(lambda request: httpx.Response(200, text="<html/>", headers={"content-type": "text/html"}))

    with pytest.raises(CatalogError):
        catalog.get_products_by_ids(["A"])


def test_network_error_raises_catalog_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(CatalogError):
        _catalog(handler).get_products_by_ids(["A"])


def test_plain_list_body_is_accepted():
    catalog = _catalog(lambda request: httpx.Response(200, json=[CATALOG_PRODUCTS["A"]]))

    assert [p.id for p in catalog.get_products_by_ids(["A"])] == ["A"]


def test_malformed_product_is_skipped():
    broken = dict(CATALOG_PRODUCTS["A"], display_price={"price2": "25,000"})
    catalog = _catalog(CatalogStub(products={"A": broken, "B": CATALOG_PRODUCTS["B"]}))

    assert [p.id for p in catalog.get_products_by_ids(["A", "B"])] == ["B"]


def test_city_search():
    stub = CatalogStub()
    client = CatalogClient("http://catalog.test", transport=httpx.MockTransport(stub))

    cities = client.search_cities(" seoul ")

    assert [c["id"] for c in cities] == ["SEL"]
    assert stub.requests[0].url.path == "/rest/area/city"
    assert stub.requests[0].url.params["keyword"] == "seoul"
    assert stub.requests[0].url.params["count"] == "10"


def test_blank_city_keyword_does_not_call_the_catalog():
    stub = CatalogStub()
    client = CatalogClient("http://catalog.test", transport=httpx.MockTransport(stub))

    assert client.search_cities("  ") == []
    assert stub.requests == []


def test_city_search_without_list_raises_catalog_error():
    client = CatalogClient(
        "http://catalog.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"total": 0})),
    )

    with pytest.raises(CatalogError):
        client.search_cities("seoul")
