"""
Image encoding backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from app.imaging.errors import EncodeError
from app.imaging.types import EncodedImage


def validate_quality(quality: int) -> int:
    """
    Return `quality` if it is an integer in [1, 100], else raise ValueError.
    """

    if isinstance(quality, bool) or not isinstance(quality, int):
        raise ValueError(f"quality must be an integer, got {quality!r}")
    if not 1 <= quality <= 100:
        raise ValueError(f"quality must be between 1 and 100, got {quality}")
    return quality


class ImageEncoder(ABC):
    """
    Converts raw image bytes into a compressed representation.
    """

    @abstractmethod
    def encode(self, raw: bytes, *, quality: int) -> EncodedImage:
        """
        Encode `raw` at `quality` or raise EncodeError.
        """


class PillowWebPEncoder(ImageEncoder):
    """
    WebP encoder backed by Pillow.
    """

    def __init__(self, *, method: int = 4) -> None:
        self._method = method

    def encode(self, raw: bytes, *, quality: int) -> EncodedImage:
        validate_quality(quality)
        if not raw:
            raise EncodeError("Downloaded image is empty.")

        try:
            # Animated sources open on frame 0; only that frame is encoded.
            with Image.open(BytesIO(raw)) as source:
                has_alpha = source.mode in ("RGBA", "LA") or "transparency" in source.info
                image = source.convert("RGBA" if has_alpha else "RGB")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
            raise EncodeError(f"Downloaded bytes are not a decodable image: {exc}") from exc

        buffer = BytesIO()
        try:
            image.save(buffer, format="WEBP", quality=quality, method=self._method)
        except (OSError, ValueError) as exc:
            raise EncodeError(f"WebP encoding failed: {exc}") from exc
        return EncodedImage(data=buffer.getvalue(), mime_type="webp")
