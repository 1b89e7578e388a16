"""
app/schemas package marker.
"""

from app.schemas.image_conversion import (
    ConversionErrorResponse,
    ConvertImageRequest,
    ConvertImageResponse,
)
from app.schemas.product_search import (
    ProductSearchErrorResponse,
    ProductSearchRequest,
    ProductSearchResponse,
)

__all__ = [
    "ConversionErrorResponse",
    "ConvertImageRequest",
    "ConvertImageResponse",
    "ProductSearchErrorResponse",
    "ProductSearchRequest",
    "ProductSearchResponse",
]
