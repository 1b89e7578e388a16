"""
Error taxonomy for the product image pipeline.

Every stage failure carries an `error_kind` string that ends up verbatim in
the item's outcome and in the persisted batch summary.
"""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """
    Base class for expected, per-item stage failures.
    """

    error_kind = "PipelineStageError"


class NotFoundError(PipelineStageError):
    """
    The scraping backend answered but could not reach or render the page.
    """

    error_kind = "NotFoundError"


class UpstreamError(PipelineStageError):
    """
    Transport or service failure while contacting the scraping backend.
    """

    error_kind = "UpstreamError"


class ImageNotFoundError(PipelineStageError):
    """
    No image URL could be extracted from the page content.
    """

    error_kind = "ImageNotFoundError"


class DownloadError(PipelineStageError):
    """
    The source image could not be fetched.
    """

    error_kind = "DownloadError"


class EncodeError(PipelineStageError):
    """
    The downloaded bytes could not be decoded or re-encoded.
    """

    error_kind = "EncodeError"


class PersistenceError(PipelineStageError):
    """
    Filesystem failure while writing an image or the batch summary.
    """

    error_kind = "IOError"


class UnsupportedBrandError(ValueError):
    """
    Raised when a brand key has no registered profile.
    """

    def __init__(self, brand_key: str) -> None:
        super().__init__(f"Unsupported brand: {brand_key}")
        self.brand_key = brand_key
