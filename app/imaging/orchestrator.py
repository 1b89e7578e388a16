"""
Batch conversion orchestrator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.domain.product_images import BatchSummary, CatalogItem
from app.imaging.brands import BrandProfile
from app.imaging.logging_utils import log_event
from app.imaging.pipeline import ItemPipeline
from app.imaging.rate_limiter import RequestPacer
from app.imaging.storage import ImageFileWriter

logger = logging.getLogger(__name__)


class BatchOrchestrator:
    """
    Drives catalog items through the item pipeline one at a time.

    Items run in source order with a fixed pause between consecutive items.
    Item failures are counted, never raised; only a failure to write the
    final summary propagates.
    """

    def __init__(
        self,
        *,
        pipeline: ItemPipeline,
        profile: BrandProfile,
        pacer: RequestPacer,
        writer: ImageFileWriter,
        output_dir: str,
    ) -> None:
        self._pipeline = pipeline
        self._profile = profile
        self._pacer = pacer
        self._writer = writer
        self._output_dir = output_dir
        self.summary_path: str | None = None

    def run(self, items: Sequence[CatalogItem]) -> BatchSummary:
        log_event(
            logger,
            logging.INFO,
            "batch_started",
            brand=self._profile.brand_key,
            total_items=len(items),
            pacing_seconds=self._pacer.interval_seconds,
        )

        summary = BatchSummary()
        for index, item in enumerate(items):
            if index > 0:
                self._pacer.wait()
            summary.record(self._pipeline.run(item, self._profile))

        self.summary_path = self._writer.write_summary(summary, self._output_dir)
        log_event(
            logger,
            logging.INFO,
            "batch_completed",
            brand=self._profile.brand_key,
            total_count=summary.total_count,
            success_count=summary.success_count,
            failure_count=summary.failure_count,
            summary_path=self.summary_path,
        )
        return summary
