"""
app/api/routers package marker.
"""

from app.api.routers.image_conversion import router as image_conversion_router
from app.api.routers.product_search import router as product_search_router

__all__ = [
    "image_conversion_router",
    "product_search_router",
]
