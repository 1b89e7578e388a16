"""
app/schemas/product_search.py

Request and response schemas for product image search.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductSearchRequest(BaseModel):
    """
    Body of `POST /api/search-product`.
    """

    model_config = ConfigDict(populate_by_name=True)

    item_number: str | int | None = Field(default=None, alias="itemNumber")
    brand: str | None = None


class ProductSearchResponse(BaseModel):
    """
    Located product page and image URL.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    item_number: str = Field(..., alias="itemNumber")
    brand: str
    product_url: str = Field(..., alias="productUrl")
    image_url: str = Field(..., alias="imageUrl")


class ProductSearchErrorResponse(BaseModel):
    """
    Failure payload for product search.
    """

    success: bool = False
    error: str
