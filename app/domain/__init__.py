"""
app/domain package marker.
"""

from app.domain.product_images import BatchSummary, CatalogItem, ItemOutcome, PipelineStage

__all__ = [
    "BatchSummary",
    "CatalogItem",
    "ItemOutcome",
    "PipelineStage",
]
