"""
Per-item pipeline: locate, extract, convert, persist.
"""

from __future__ import annotations

import logging

from app.domain.product_images import CatalogItem, ItemOutcome, PipelineStage
from app.imaging.brands import BrandProfile
from app.imaging.converter import BaseImageConverter
from app.imaging.errors import PipelineStageError
from app.imaging.extractor import ImageExtractor
from app.imaging.locator import ProductLocator
from app.imaging.logging_utils import log_event
from app.imaging.storage import ImageFileWriter

logger = logging.getLogger(__name__)


class ItemPipeline:
    """
    Runs one catalog item through every stage and reports a single outcome.

    The first failing stage ends the run. Stage errors never escape `run`;
    they are folded into a failed `ItemOutcome`.
    """

    def __init__(
        self,
        *,
        locator: ProductLocator,
        extractor: ImageExtractor,
        converter: BaseImageConverter,
        writer: ImageFileWriter,
        output_dir: str,
        quality: int = 80,
    ) -> None:
        self._locator = locator
        self._extractor = extractor
        self._converter = converter
        self._writer = writer
        self._output_dir = output_dir
        self._quality = quality

    def run(self, item: CatalogItem, profile: BrandProfile) -> ItemOutcome:
        identifier = item.identifier
        stage = PipelineStage.LOCATE
        try:
            content = self._locator.locate(identifier, profile)

            stage = PipelineStage.EXTRACT
            image_url = self._extractor.extract(content, profile)

            stage = PipelineStage.CONVERT
            encoded = self._converter.convert(image_url, self._quality)

            stage = PipelineStage.PERSIST
            storage_path = self._writer.persist(encoded, identifier, self._output_dir)
        except PipelineStageError as exc:
            return self._failed(item=item, stage=stage, error_kind=exc.error_kind, exc=exc)
        except Exception as exc:
            return self._failed(item=item, stage=stage, error_kind=type(exc).__name__, exc=exc)

        log_event(
            logger,
            logging.INFO,
            "item_converted",
            identifier=identifier,
            brand=profile.brand_key,
            image_url=image_url,
            storage_path=storage_path,
            size_bytes=encoded.size_bytes,
        )
        return ItemOutcome.succeeded(
            identifier=identifier,
            storage_path=storage_path,
            size_bytes=encoded.size_bytes,
        )

    @staticmethod
    def _failed(
        *,
        item: CatalogItem,
        stage: PipelineStage,
        error_kind: str,
        exc: Exception,
    ) -> ItemOutcome:
        log_event(
            logger,
            logging.WARNING,
            "item_failed",
            identifier=item.identifier,
            stage=stage.value,
            error_kind=error_kind,
            error=str(exc),
        )
        return ItemOutcome.failed(
            identifier=item.identifier,
            stage=stage,
            error_kind=error_kind,
            error_message=str(exc),
        )
