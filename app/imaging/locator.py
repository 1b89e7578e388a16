"""
Product page locator.
"""

from __future__ import annotations

import logging

from app.imaging.brands import BrandProfile
from app.imaging.logging_utils import log_event
from app.imaging.scrapers import PageScraper
from app.imaging.types import PageContent

logger = logging.getLogger(__name__)


class ProductLocator:
    """
    Builds a brand-specific product URL and fetches its structured content.

    One outbound scrape per call; retries are left to callers.
    """

    def __init__(self, *, scraper: PageScraper) -> None:
        self._scraper = scraper

    def locate(self, identifier: str, profile: BrandProfile) -> PageContent:
        product_url = profile.product_url(identifier)
        log_event(
            logger,
            logging.INFO,
            "product_page_requested",
            identifier=identifier,
            brand=profile.brand_key,
            product_url=product_url,
        )
        return self._scraper.scrape(product_url)
