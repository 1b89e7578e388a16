"""
app/api/routers/product_search.py

Product page and image lookup endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from app.imaging.errors import (
    ImageNotFoundError,
    NotFoundError,
    UnsupportedBrandError,
    UpstreamError,
)
from app.schemas.product_search import (
    ProductSearchErrorResponse,
    ProductSearchRequest,
    ProductSearchResponse,
)
from app.services.product_search_service import (
    ProductSearchService,
    get_product_search_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["product-search"])


@router.post(
    "/search-product",
    response_model=ProductSearchResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ProductSearchErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ProductSearchErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ProductSearchErrorResponse},
    },
)
def search_product(
    payload: ProductSearchRequest | None = Body(default=None),
    search_service: ProductSearchService = Depends(get_product_search_service),
) -> ProductSearchResponse | JSONResponse:
    """
    Resolve a brand product page for an item number and extract its image URL.
    """

    payload = payload or ProductSearchRequest()
    item_number = "" if payload.item_number is None else str(payload.item_number).strip()
    if not item_number:
        return _error(status.HTTP_400_BAD_REQUEST, "Item number is required")

    try:
        result = search_service.search(item_number=item_number, brand=payload.brand)
    except UnsupportedBrandError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except (NotFoundError, UpstreamError) as exc:
        logger.warning("Product page scrape failed item_number=%s error=%s", item_number, exc)
        return _error(status.HTTP_404_NOT_FOUND, "Failed to scrape product page")
    except ImageNotFoundError as exc:
        logger.info("Product image not found item_number=%s error=%s", item_number, exc)
        return _error(status.HTTP_404_NOT_FOUND, "Product image not found")
    except Exception as exc:
        logger.exception("Product search failed item_number=%s", item_number)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    return ProductSearchResponse(
        item_number=result.item_number,
        brand=result.brand,
        product_url=result.product_url,
        image_url=result.image_url,
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )
