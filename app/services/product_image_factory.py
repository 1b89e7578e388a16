"""
app/services/product_image_factory.py

Builds pipeline collaborators from runtime settings.
"""

from __future__ import annotations

import requests

from app.config import ImagePipelineSettings
from app.imaging.brands import BrandRegistry
from app.imaging.converter import BaseImageConverter, ImageConverter, RemoteImageConverter
from app.imaging.scrapers import FirecrawlScraper, HTMLPageScraper, PageScraper


def build_brand_registry(settings: ImagePipelineSettings) -> BrandRegistry:
    return BrandRegistry(default_brand=settings.default_brand)


def build_page_scraper(
    settings: ImagePipelineSettings,
    *,
    session: requests.Session | None = None,
) -> PageScraper:
    """
    Use the scraping API when a key is configured, else fetch pages directly.
    """

    if settings.scrape_api_key:
        return FirecrawlScraper(
            base_url=settings.scrape_api_base_url,
            api_key=settings.scrape_api_key,
            timeout_seconds=settings.scrape_timeout_seconds,
            session=session,
        )
    return HTMLPageScraper(
        timeout_seconds=settings.scrape_timeout_seconds,
        user_agent=settings.user_agent,
        session=session,
    )


def build_local_converter(
    settings: ImagePipelineSettings,
    *,
    session: requests.Session | None = None,
) -> ImageConverter:
    return ImageConverter(
        session=session,
        timeout_seconds=settings.download_timeout_seconds,
        user_agent=settings.user_agent,
    )


def build_batch_converter(
    settings: ImagePipelineSettings,
    *,
    session: requests.Session | None = None,
) -> BaseImageConverter:
    """
    Batch runs use the remote conversion service when one is configured.
    """

    if settings.converter_api_url:
        return RemoteImageConverter(
            api_url=settings.converter_api_url,
            session=session,
            timeout_seconds=settings.download_timeout_seconds,
        )
    return build_local_converter(settings, session=session)
