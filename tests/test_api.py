"""
tests/test_api.py

HTTP contracts for /convert, /api/search-product, and health endpoints.
Services are swapped through FastAPI dependency overrides; no network.
"""

from __future__ import annotations

import base64
from collections.abc import Iterator
from io import BytesIO
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient
from PIL import Image

from app.imaging.brands import BrandRegistry
from app.imaging.converter import ImageConverter, RemoteImageConverter
from app.imaging.errors import DownloadError, EncodeError, NotFoundError, UpstreamError
from app.imaging.extractor import ImageExtractor
from app.imaging.locator import ProductLocator
from app.imaging.scrapers import PageScraper
from app.imaging.types import PageContent
from app.main import app
from app.services.image_conversion_service import (
    ImageConversionService,
    get_image_conversion_service,
)
from app.services.product_search_service import (
    ProductSearchService,
    get_product_search_service,
)

CDN_LINK = (
    "https://cdn11.bigcommerce.com/s-fg8rw4u4uq/images/stencil/1280x1280/"
    "products/70/310/4641__31337.1515075711.png?c=2"
)


class _DownloadResponse:
    status_code = 200

    def __init__(self, content: bytes) -> None:
        self.content = content

    def raise_for_status(self) -> None:
        return None


class _DownloadSession:
    def __init__(self, content: bytes | None = None, error: Exception | None = None) -> None:
        self._content = content
        self._error = error

    def get(self, url: str, **kwargs: Any) -> _DownloadResponse:
        if self._error is not None:
            raise self._error
        return _DownloadResponse(self._content or b"")


class _StubScraper(PageScraper):
    def __init__(self, content: PageContent | None = None, error: Exception | None = None) -> None:
        super().__init__(timeout_seconds=1.0)
        self._content = content
        self._error = error
        self.urls: list[str] = []

    def scrape(self, url: str) -> PageContent:
        self.urls.append(url)
        if self._error is not None:
            raise self._error
        assert self._content is not None
        return self._content


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _use_converter(session: _DownloadSession) -> None:
    service = ImageConversionService(converter=ImageConverter(session=session))  # type: ignore[arg-type]
    app.dependency_overrides[get_image_conversion_service] = lambda: service


def _use_scraper(scraper: _StubScraper) -> None:
    service = ProductSearchService(
        registry=BrandRegistry(),
        locator=ProductLocator(scraper=scraper),
        extractor=ImageExtractor(),
    )
    app.dependency_overrides[get_product_search_service] = lambda: service


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


def test_health_reports_healthy(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_lists_endpoints(client: TestClient) -> None:
    body = client.get("/").json()
    assert body["status"] == "running"
    assert "convert" in body["endpoints"]


# ---------------------------------------------------------------------------
# POST /convert
# ---------------------------------------------------------------------------


class TestConvertEndpoint:
    def test_returns_webp_payload(self, client: TestClient, png_bytes: bytes) -> None:
        _use_converter(_DownloadSession(content=png_bytes))

        response = client.post("/convert", json={"imageUrl": "https://cdn.example.com/a.png", "quality": 80})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["format"] == "webp"
        assert body["dataUrl"] == f"data:image/webp;base64,{body['base64']}"
        decoded = base64.b64decode(body["base64"])
        assert body["size"] == len(decoded)
        with Image.open(BytesIO(decoded)) as image:
            assert image.format == "WEBP"

    def test_missing_image_url_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/convert", json={"quality": 80})
        assert response.status_code == 400
        assert response.json() == {"error": "imageUrl is required"}

    def test_request_without_body_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/convert")
        assert response.status_code == 400
        assert response.json() == {"error": "imageUrl is required"}

    def test_unreachable_image_is_server_error(self, client: TestClient) -> None:
        _use_converter(_DownloadSession(error=requests.ConnectionError("no route to host")))

        response = client.post("/convert", json={"imageUrl": "https://unreachable.invalid/a.png"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Conversion failed"
        assert "no route to host" in body["message"]
        assert body["errorKind"] == "DownloadError"
        assert "base64" not in body

    def test_out_of_range_quality_is_bad_request(self, client: TestClient, png_bytes: bytes) -> None:
        _use_converter(_DownloadSession(content=png_bytes))
        response = client.post("/convert", json={"imageUrl": "https://cdn.example.com/a.png", "quality": 0})
        assert response.status_code == 400
        assert "quality" in response.json()["error"]


# ---------------------------------------------------------------------------
# POST /api/search-product
# ---------------------------------------------------------------------------


class TestSearchProductEndpoint:
    def test_returns_product_and_image_urls(self, client: TestClient) -> None:
        scraper = _StubScraper(PageContent(url="u", links=(CDN_LINK,)))
        _use_scraper(scraper)

        response = client.post("/api/search-product", json={"itemNumber": "4641"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "itemNumber": "4641",
            "brand": "johnsens",
            "productUrl": "https://www.johnsens.com/all/4641",
            "imageUrl": CDN_LINK,
        }
        assert scraper.urls == ["https://www.johnsens.com/all/4641"]

    def test_unknown_brand_is_bad_request(self, client: TestClient) -> None:
        scraper = _StubScraper(PageContent(url="u"))
        _use_scraper(scraper)

        response = client.post(
            "/api/search-product", json={"itemNumber": "4641", "brand": "unknownbrand"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Unsupported brand")
        assert scraper.urls == []

    def test_missing_item_number_is_bad_request(self, client: TestClient) -> None:
        _use_scraper(_StubScraper(PageContent(url="u")))
        response = client.post("/api/search-product", json={"brand": "johnsens"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Item number is required"}

    def test_request_without_body_is_bad_request(self, client: TestClient) -> None:
        _use_scraper(_StubScraper(PageContent(url="u")))
        response = client.post("/api/search-product")
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Item number is required"}

    def test_numeric_item_number_reaches_brand_check(self, client: TestClient) -> None:
        _use_scraper(_StubScraper(PageContent(url="u")))
        response = client.post("/api/search-product", json={"itemNumber": 2212, "brand": "nope"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Unsupported brand")

    def test_numeric_item_number_is_searched_as_text(self, client: TestClient) -> None:
        scraper = _StubScraper(PageContent(url="u", links=(CDN_LINK,)))
        _use_scraper(scraper)

        response = client.post("/api/search-product", json={"itemNumber": 4641})

        assert response.status_code == 200
        assert response.json()["itemNumber"] == "4641"
        assert scraper.urls == ["https://www.johnsens.com/all/4641"]

    @pytest.mark.parametrize("error", [NotFoundError("404"), UpstreamError("timeout")])
    def test_scrape_failure_is_not_found(self, client: TestClient, error: Exception) -> None:
        _use_scraper(_StubScraper(error=error))
        response = client.post("/api/search-product", json={"itemNumber": "9999"})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Failed to scrape product page"}

    def test_missing_image_is_not_found(self, client: TestClient) -> None:
        _use_scraper(_StubScraper(PageContent(url="u", markdown="no pictures here")))
        response = client.post(
            "/api/search-product", json={"itemNumber": "4641", "brand": "bluemagic"}
        )
        assert response.status_code == 404
        assert response.json()["error"] == "Product image not found"


# ---------------------------------------------------------------------------
# RemoteImageConverter against this service
# ---------------------------------------------------------------------------


class _ServiceResponse:
    def __init__(self, response: Any) -> None:
        self.status_code = response.status_code
        self.ok = response.is_success
        self._response = response

    def json(self) -> Any:
        return self._response.json()


class _ServiceSession:
    """
    Routes RemoteImageConverter posts into the in-process app.
    """

    def __init__(self, client: TestClient) -> None:
        self._client = client

    def post(self, url: str, **kwargs: Any) -> _ServiceResponse:
        return _ServiceResponse(self._client.post("/convert", json=kwargs["json"]))


class TestRemoteConverterAgainstService:
    def _remote(self, client: TestClient) -> RemoteImageConverter:
        return RemoteImageConverter(
            api_url="http://testserver/convert",
            session=_ServiceSession(client),  # type: ignore[arg-type]
        )

    def test_unreachable_source_stays_download_error(self, client: TestClient) -> None:
        _use_converter(_DownloadSession(error=requests.ConnectionError("no route to host")))

        with pytest.raises(DownloadError, match="no route to host"):
            self._remote(client).convert("https://unreachable.invalid/a.png", 80)

    def test_undecodable_source_stays_encode_error(self, client: TestClient) -> None:
        _use_converter(_DownloadSession(content=b"<html>login</html>"))

        with pytest.raises(EncodeError):
            self._remote(client).convert("https://cdn.example.com/a.png", 80)

    def test_successful_conversion_round_trips(self, client: TestClient, png_bytes: bytes) -> None:
        _use_converter(_DownloadSession(content=png_bytes))

        encoded = self._remote(client).convert("https://cdn.example.com/a.png", 80)

        assert encoded.data[:4] == b"RIFF"
