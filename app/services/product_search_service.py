"""
app/services/product_search_service.py

Locates a product page and its image URL for one item number.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from app.config import get_image_pipeline_settings
from app.imaging.brands import BrandRegistry
from app.imaging.extractor import ImageExtractor
from app.imaging.locator import ProductLocator
from app.services.product_image_factory import build_brand_registry, build_page_scraper


@dataclass(frozen=True)
class ProductSearchResult:
    """
    Located product page and extracted image URL.
    """

    item_number: str
    brand: str
    product_url: str
    image_url: str


class ProductSearchService:
    """
    Runs the locate and extract stages for a single item.
    """

    def __init__(
        self,
        *,
        registry: BrandRegistry | None = None,
        locator: ProductLocator | None = None,
        extractor: ImageExtractor | None = None,
    ) -> None:
        settings = get_image_pipeline_settings()
        self._registry = registry or build_brand_registry(settings)
        self._locator = locator or ProductLocator(scraper=build_page_scraper(settings))
        self._extractor = extractor or ImageExtractor()

    @property
    def registry(self) -> BrandRegistry:
        return self._registry

    def search(self, *, item_number: str, brand: str | None = None) -> ProductSearchResult:
        """
        Raises UnsupportedBrandError, NotFoundError, UpstreamError or ImageNotFoundError.
        """

        profile = self._registry.get(brand)
        content = self._locator.locate(item_number, profile)
        image_url = self._extractor.extract(content, profile)
        return ProductSearchResult(
            item_number=item_number,
            brand=profile.brand_key,
            product_url=profile.product_url(item_number),
            image_url=image_url,
        )


@lru_cache(maxsize=1)
def get_product_search_service() -> ProductSearchService:
    """
    Build and cache the product search service.
    """

    return ProductSearchService()
