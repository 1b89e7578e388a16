"""
Image download and conversion.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import requests

from app.imaging.encoders import ImageEncoder, PillowWebPEncoder, validate_quality
from app.imaging.errors import DownloadError, EncodeError
from app.imaging.logging_utils import log_event
from app.imaging.types import EncodedImage

logger = logging.getLogger(__name__)

DEFAULT_DOWNLOAD_TIMEOUT_SECONDS = 30.0


class BaseImageConverter(ABC):
    """
    Turns an image URL into WebP bytes.
    """

    @abstractmethod
    def convert(self, image_url: str, quality: int) -> EncodedImage:
        """
        Download `image_url` and encode it at `quality`.
        """


class ImageConverter(BaseImageConverter):
    """
    Downloads the source image and delegates encoding to an `ImageEncoder`.
    """

    def __init__(
        self,
        *,
        encoder: ImageEncoder | None = None,
        session: requests.Session | None = None,
        timeout_seconds: float = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
        user_agent: str | None = None,
    ) -> None:
        self._encoder = encoder or PillowWebPEncoder()
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds
        self._headers = {"User-Agent": user_agent} if user_agent else {}

    def convert(self, image_url: str, quality: int) -> EncodedImage:
        validate_quality(quality)
        raw = self.download(image_url)
        encoded = self._encoder.encode(raw, quality=quality)
        log_event(
            logger,
            logging.INFO,
            "image_encoded",
            image_url=image_url,
            quality=quality,
            source_bytes=len(raw),
            encoded_bytes=encoded.size_bytes,
        )
        return encoded

    def download(self, image_url: str) -> bytes:
        try:
            response = self._session.get(
                image_url,
                headers=self._headers,
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise DownloadError(f"Image download returned status={status_code} url={image_url}") from exc
        except requests.RequestException as exc:
            raise DownloadError(f"Image download failed url={image_url}: {exc}") from exc
        return response.content


class RemoteImageConverter(BaseImageConverter):
    """
    Delegates download and encoding to a deployed `POST /convert` service.
    """

    def __init__(
        self,
        *,
        api_url: str,
        session: requests.Session | None = None,
        timeout_seconds: float = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
    ) -> None:
        self._api_url = api_url
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds

    def convert(self, image_url: str, quality: int) -> EncodedImage:
        validate_quality(quality)
        try:
            response = self._session.post(
                self._api_url,
                json={"imageUrl": image_url, "quality": quality},
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise DownloadError(f"Conversion service unreachable: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise EncodeError(
                f"Conversion service returned status={response.status_code} without JSON."
            ) from exc

        if not response.ok or not isinstance(payload, dict) or not payload.get("success"):
            details = payload if isinstance(payload, dict) else {}
            message = details.get("message") or details.get("error")
            error_cls = DownloadError if details.get("errorKind") == DownloadError.error_kind else EncodeError
            raise error_cls(f"Conversion failed status={response.status_code} message={message}")

        try:
            return EncodedImage.from_data_url(str(payload.get("dataUrl", "")))
        except ValueError as exc:
            raise EncodeError(f"Conversion service returned an unusable dataUrl: {exc}") from exc
