"""
app/schemas/image_conversion.py

Request and response schemas for image conversion.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConvertImageRequest(BaseModel):
    """
    Body of `POST /convert`.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_url: str | None = Field(default=None, alias="imageUrl")
    quality: int | None = None


class ConvertImageResponse(BaseModel):
    """
    Successful conversion payload with the WebP bytes inlined as base64.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    format: str = "webp"
    size: int = Field(..., ge=0)
    base64: str
    data_url: str = Field(..., alias="dataUrl")


class ConversionErrorResponse(BaseModel):
    """
    Error payload for failed conversions.
    """

    error: str
    message: str | None = None
    error_kind: str | None = Field(default=None, alias="errorKind")
