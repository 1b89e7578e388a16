"""
app/api/routers/image_conversion.py

Image to WebP conversion endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from app.imaging.encoders import validate_quality
from app.imaging.errors import PipelineStageError
from app.schemas.image_conversion import (
    ConversionErrorResponse,
    ConvertImageRequest,
    ConvertImageResponse,
)
from app.services.image_conversion_service import (
    ImageConversionService,
    get_image_conversion_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["image-conversion"])


@router.post(
    "/convert",
    response_model=ConvertImageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ConversionErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ConversionErrorResponse},
    },
)
def convert_image(
    payload: ConvertImageRequest | None = Body(default=None),
    conversion_service: ImageConversionService = Depends(get_image_conversion_service),
) -> ConvertImageResponse | JSONResponse:
    """
    Download an image and return it re-encoded as WebP.
    """

    payload = payload or ConvertImageRequest()
    image_url = (payload.image_url or "").strip()
    if not image_url:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "imageUrl is required"},
        )

    quality = conversion_service.default_quality if payload.quality is None else payload.quality
    try:
        validate_quality(quality)
    except ValueError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    try:
        encoded = conversion_service.convert(image_url=image_url, quality=quality)
    except PipelineStageError as exc:
        logger.warning(
            "Conversion failed image_url=%s error_kind=%s error=%s",
            image_url,
            exc.error_kind,
            exc,
        )
        return _conversion_failed(str(exc), exc.error_kind)
    except Exception as exc:
        logger.exception("Unexpected conversion error image_url=%s", image_url)
        return _conversion_failed(str(exc), type(exc).__name__)

    return ConvertImageResponse(
        size=encoded.size_bytes,
        base64=encoded.to_base64(),
        data_url=encoded.data_url(),
    )


def _conversion_failed(message: str, error_kind: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Conversion failed", "message": message, "errorKind": error_kind},
    )
