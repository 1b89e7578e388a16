"""
Image URL extraction from scraped product pages.
"""

from __future__ import annotations

import re

from app.imaging.brands import BrandProfile
from app.imaging.errors import ImageNotFoundError
from app.imaging.types import PageContent

# Full-resolution product images on the BigCommerce CDN: host, size folder, cache-busting query.
CDN_IMAGE_LINK_PATTERN = re.compile(
    r"^https?://cdn11\.bigcommerce\.com/.*/1280x1280/.*\.png\?c=2$",
    re.IGNORECASE,
)


class ImageExtractor:
    """
    Picks the best candidate image URL for a page.

    Structured page links are checked first against the CDN shape; the
    brand's markdown rule is the fallback.
    """

    def __init__(self, *, cdn_link_pattern: re.Pattern[str] = CDN_IMAGE_LINK_PATTERN) -> None:
        self._cdn_link_pattern = cdn_link_pattern

    def extract(self, content: PageContent, profile: BrandProfile) -> str:
        for link in content.links:
            if self._cdn_link_pattern.match(link.strip()):
                return link.strip()

        if content.markdown:
            candidate = profile.extract_image_url(content.markdown)
            if candidate:
                return candidate

        raise ImageNotFoundError(
            f"No product image found brand={profile.brand_key} url={content.url}"
        )
