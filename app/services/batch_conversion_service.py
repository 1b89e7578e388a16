"""
app/services/batch_conversion_service.py

Service orchestration for batch catalog image conversion.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import requests

from app.config import ImagePipelineSettings, get_image_pipeline_settings
from app.domain.product_images import BatchSummary, CatalogItem
from app.imaging.catalog import load_catalog_items
from app.imaging.extractor import ImageExtractor
from app.imaging.locator import ProductLocator
from app.imaging.orchestrator import BatchOrchestrator
from app.imaging.pipeline import ItemPipeline
from app.imaging.rate_limiter import RequestPacer
from app.imaging.storage import ImageFileWriter
from app.services.product_image_factory import (
    build_batch_converter,
    build_brand_registry,
    build_page_scraper,
)


class BatchConversionService:
    """
    Wires the pipeline from settings and runs one batch.
    """

    def __init__(
        self,
        settings: ImagePipelineSettings | None = None,
        *,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._settings = settings or get_image_pipeline_settings()
        self._session = session or requests.Session()
        self._sleep = sleep

    def build_orchestrator(
        self,
        *,
        brand: str | None = None,
        output_dir: str | None = None,
        quality: int | None = None,
    ) -> BatchOrchestrator:
        settings = self._settings
        profile = build_brand_registry(settings).get(brand)
        target_dir = output_dir or settings.output_dir
        writer = ImageFileWriter()
        pipeline = ItemPipeline(
            locator=ProductLocator(scraper=build_page_scraper(settings, session=self._session)),
            extractor=ImageExtractor(),
            converter=build_batch_converter(settings, session=self._session),
            writer=writer,
            output_dir=target_dir,
            quality=settings.image_quality if quality is None else quality,
        )
        pacer_kwargs = {"sleep": self._sleep} if self._sleep is not None else {}
        return BatchOrchestrator(
            pipeline=pipeline,
            profile=profile,
            pacer=RequestPacer(interval_seconds=settings.pacing_interval_seconds, **pacer_kwargs),
            writer=writer,
            output_dir=target_dir,
        )

    def run(
        self,
        *,
        items: Sequence[CatalogItem] | None = None,
        brand: str | None = None,
        output_dir: str | None = None,
        quality: int | None = None,
    ) -> BatchSummary:
        selected = (
            list(items)
            if items is not None
            else load_catalog_items(catalog_path=self._settings.catalog_path)
        )
        orchestrator = self.build_orchestrator(brand=brand, output_dir=output_dir, quality=quality)
        return orchestrator.run(selected)
