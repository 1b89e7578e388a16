"""
app/services package marker.
"""

from app.services.batch_conversion_service import BatchConversionService
from app.services.image_conversion_service import (
    ImageConversionService,
    get_image_conversion_service,
)
from app.services.product_search_service import (
    ProductSearchResult,
    ProductSearchService,
    get_product_search_service,
)

__all__ = [
    "BatchConversionService",
    "ImageConversionService",
    "get_image_conversion_service",
    "ProductSearchResult",
    "ProductSearchService",
    "get_product_search_service",
]
