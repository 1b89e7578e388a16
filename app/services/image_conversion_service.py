"""
app/services/image_conversion_service.py

Service wrapper for single-image WebP conversion.
"""

from __future__ import annotations

from functools import lru_cache

from app.config import get_image_pipeline_settings
from app.imaging.converter import BaseImageConverter
from app.imaging.types import EncodedImage
from app.services.product_image_factory import build_local_converter


class ImageConversionService:
    """
    Converts one image URL to WebP with the in-process encoder.
    """

    def __init__(self, converter: BaseImageConverter | None = None) -> None:
        self._settings = get_image_pipeline_settings()
        self._converter = converter or build_local_converter(self._settings)

    @property
    def default_quality(self) -> int:
        return self._settings.image_quality

    def convert(self, *, image_url: str, quality: int | None = None) -> EncodedImage:
        effective_quality = self.default_quality if quality is None else quality
        return self._converter.convert(image_url, effective_quality)


@lru_cache(maxsize=1)
def get_image_conversion_service() -> ImageConversionService:
    """
    Build and cache the image conversion service.
    """

    return ImageConversionService()
