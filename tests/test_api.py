# tests/test_api.py
import httpx
import pytest
from conftest import AMAZON_URL
from fastapi.testclient import TestClient

from product_scraper import main
from product_scraper.adapters.fetch_client import FetchClient
from product_scraper.errors import FetchError, ScrapeError
from product_scraper.layers.extraction import ExtractionLayer
from product_scraper.models.product import Platform, ScrapedProduct
from product_scraper.storage import ProductStorage


SCRAPED = ScrapedProduct(
    title="Wireless Mouse",
    description="Silent clicks and an ergonomic shape for all-day use",
    image_url="https://m.media-amazon.com/images/I/mouse-main.jpg",
    original_price="2000.00",
    sale_price="1200.00",
    discount=40,
    category="Computers & Laptops",
    platform=Platform.AMAZON,
    product_url=AMAZON_URL,
)


class _FakeExtractionLayer:
    def __init__(self, result=SCRAPED, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def extract(self, url: str) -> ScrapedProduct:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_layer(monkeypatch):
    layer = _FakeExtractionLayer()
    monkeypatch.setattr(main, "extraction_layer", layer)
    monkeypatch.setattr(main, "storage", ProductStorage())
    return layer


@pytest.fixture
def client(fake_layer) -> TestClient:
    return TestClient(main.app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_scrape_stores_product(client, fake_layer):
    response = client.post("/api/products/scrape", json={"url": AMAZON_URL})

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Wireless Mouse"
    assert body["salePrice"] == "1200.00"
    assert body["originalPrice"] == "2000.00"
    assert body["discount"] == 40
    assert body["platform"] == "amazon"
    assert body["productUrl"] == AMAZON_URL
    assert body["id"]
    assert body["createdAt"]
    assert fake_layer.calls == [AMAZON_URL]

    listed = client.get("/api/products").json()
    assert [p["id"] for p in listed] == [body["id"]]
    assert client.get(f"/api/products/{body['id']}").json()["title"] == "Wireless Mouse"


def test_unsupported_platform_is_rejected_without_scraping(client, fake_layer):
    response = client.post("/api/products/scrape", json={"url": "https://www.ebay.com/itm/123"})

    assert response.status_code == 400
    assert "Unsupported platform" in response.json()["detail"]
    assert fake_layer.calls == []


def test_invalid_url_is_a_bad_request(client, fake_layer):
    response = client.post("/api/products/scrape", json={"url": "amazon.in/dp/123"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid URL format"
    assert fake_layer.calls == []


@pytest.mark.parametrize(
    "error",
    [
        FetchError("Failed to fetch product page: 503", status_code=503),
        ScrapeError("Failed to scrape product: bad markup"),
    ],
)
def test_typed_failures_are_client_errors(client, fake_layer, error):
    fake_layer.error = error

    response = client.post("/api/products/scrape", json={"url": AMAZON_URL})

    assert response.status_code == 400
    assert response.json()["detail"] == error.message
    assert client.get("/api/products").json() == []


def test_unexpected_failure_is_a_server_error(client, fake_layer):
    fake_layer.error = RuntimeError("boom")

    response = client.post("/api/products/scrape", json={"url": AMAZON_URL})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to process product URL"


def test_get_and_delete_unknown_product(client):
    assert client.get("/api/products/does-not-exist").status_code == 404
    assert client.delete("/api/products/does-not-exist").status_code == 404


def test_delete_product(client):
    created = client.post("/api/products/scrape", json={"url": AMAZON_URL}).json()

    response = client.delete(f"/api/products/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Product deleted successfully"}
    assert client.get(f"/api/products/{created['id']}").status_code == 404


def test_malformed_url_is_a_client_error(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html></html>")

    layer = ExtractionLayer(
        fetch_client=FetchClient(timeout=2, transport=httpx.MockTransport(handler))
    )
    monkeypatch.setattr(main, "extraction_layer", layer)
    monkeypatch.setattr(main, "storage", ProductStorage())

    response = TestClient(main.app).post(
        "/api/products/scrape", json={"url": "https://www.amazon.in/dp/\x7fB0"}
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Failed to fetch product page")
