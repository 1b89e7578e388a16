"""
Product image pipeline exports.
"""

from app.imaging.brands import BrandProfile, BrandRegistry
from app.imaging.converter import ImageConverter, RemoteImageConverter
from app.imaging.extractor import ImageExtractor
from app.imaging.locator import ProductLocator
from app.imaging.orchestrator import BatchOrchestrator
from app.imaging.pipeline import ItemPipeline
from app.imaging.storage import ImageFileWriter

__all__ = [
    "BatchOrchestrator",
    "BrandProfile",
    "BrandRegistry",
    "ImageConverter",
    "ImageExtractor",
    "ImageFileWriter",
    "ItemPipeline",
    "ProductLocator",
    "RemoteImageConverter",
]
