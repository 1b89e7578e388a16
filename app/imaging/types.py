"""
Shared runtime data models for the image pipeline.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

_DATA_URL_PATTERN = re.compile(r"^data:image/(?P<format>[a-z0-9.+-]+);base64,(?P<payload>.*)$", re.S)


@dataclass(frozen=True)
class PageContent:
    """
    Structured content of one scraped product page.
    """

    url: str
    links: tuple[str, ...] = ()
    markdown: str = ""


@dataclass(frozen=True)
class EncodedImage:
    """
    Compressed image bytes ready to be persisted.
    """

    data: bytes
    mime_type: str = "webp"

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def data_url(self) -> str:
        return f"data:image/{self.mime_type};base64,{self.to_base64()}"

    @classmethod
    def from_data_url(cls, data_url: str) -> "EncodedImage":
        """
        Decode a `data:image/<format>;base64,...` string.

        Raises ValueError when the string is not a base64 image data URL.
        """

        match = _DATA_URL_PATTERN.match(data_url.strip())
        if match is None:
            raise ValueError("Expected a base64 image data URL.")
        try:
            data = base64.b64decode(match.group("payload"), validate=True)
        except binascii.Error as exc:
            raise ValueError("Data URL payload is not valid base64.") from exc
        return cls(data=data, mime_type=match.group("format"))
