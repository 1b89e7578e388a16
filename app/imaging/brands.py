"""
Brand profiles and the registry that resolves them by key.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Optional

from app.imaging.errors import UnsupportedBrandError

UrlPattern = Callable[[str], str]
ExtractionRule = Callable[[str], Optional[str]]

JOHNSENS_STENCIL_PATTERN = re.compile(
    r"https://cdn11\.bigcommerce\.com/s-fg8rw4u4uq/images/stencil/1280x1280/[^\"\s()<>]+\.png\?c=2"
)
GENERIC_IMAGE_PATTERN = re.compile(
    r"https?://[^\s\"'()<>]+?\.(?:jpg|png|webp)(?![a-z0-9])",
    re.IGNORECASE,
)


def first_match_rule(pattern: re.Pattern[str]) -> ExtractionRule:
    """
    Build an extraction rule returning the first match of `pattern`.
    """

    def rule(text: str) -> str | None:
        match = pattern.search(text or "")
        return match.group(0) if match else None

    return rule


def path_url_pattern(base_url: str, path_prefix: str) -> UrlPattern:
    """
    Build a URL pattern of the form `{base_url}/{path_prefix}/{identifier}`.
    """

    root = f"{base_url.rstrip('/')}/{path_prefix.strip('/')}"

    def pattern(identifier: str) -> str:
        return f"{root}/{identifier.strip()}"

    return pattern


@dataclass(frozen=True)
class BrandProfile:
    """
    How to build a product URL and pull an image URL for one vendor.
    """

    brand_key: str
    base_url: str
    url_pattern: UrlPattern
    image_extraction_rule: ExtractionRule

    def product_url(self, identifier: str) -> str:
        return self.url_pattern(identifier)

    def extract_image_url(self, markdown: str) -> str | None:
        return self.image_extraction_rule(markdown)


def _storefront_profile(brand_key: str, base_url: str) -> BrandProfile:
    return BrandProfile(
        brand_key=brand_key,
        base_url=base_url,
        url_pattern=path_url_pattern(base_url, "products"),
        image_extraction_rule=first_match_rule(GENERIC_IMAGE_PATTERN),
    )


def builtin_profiles() -> dict[str, BrandProfile]:
    johnsens_base = "https://www.johnsens.com"
    profiles = [
        BrandProfile(
            brand_key="johnsens",
            base_url=johnsens_base,
            url_pattern=path_url_pattern(johnsens_base, "all"),
            image_extraction_rule=first_match_rule(JOHNSENS_STENCIL_PATTERN),
        ),
        _storefront_profile("bluemagic", "https://www.bluemagicusa.com"),
        _storefront_profile("quiksteel", "https://www.quiksteel.com"),
        _storefront_profile("purecitrus", "https://www.purecitrus.com"),
        _storefront_profile("turbo108", "https://www.turbo108.com"),
        _storefront_profile("sprayx", "https://www.spray-x.com"),
    ]
    return {profile.brand_key: profile for profile in profiles}


class BrandRegistry:
    """
    Brand profile registry keyed by lower-cased brand key.
    """

    def __init__(
        self,
        registrations: Mapping[str, BrandProfile] | None = None,
        *,
        default_brand: str = "johnsens",
    ) -> None:
        profiles = builtin_profiles()
        if registrations:
            profiles.update({key.strip().lower(): value for key, value in registrations.items()})
        self._profiles = profiles
        self._default_brand = default_brand.strip().lower()

    @property
    def default_brand(self) -> str:
        return self._default_brand

    def register(self, profile: BrandProfile) -> None:
        self._profiles[profile.brand_key.strip().lower()] = profile

    def brand_keys(self) -> list[str]:
        return sorted(self._profiles)

    def __contains__(self, brand_key: object) -> bool:
        return isinstance(brand_key, str) and brand_key.strip().lower() in self._profiles

    def get(self, brand_key: str | None = None) -> BrandProfile:
        """
        Resolve a profile, falling back to the default brand when unset.
        """

        key = (brand_key or "").strip().lower() or self._default_brand
        profile = self._profiles.get(key)
        if profile is None:
            raise UnsupportedBrandError(brand_key or key)
        return profile
