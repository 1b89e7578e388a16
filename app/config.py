"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class ImagePipelineSettings:
    """
    Runtime settings for product lookup, conversion, and batch runs.
    """

    scrape_api_base_url: str = "https://api.firecrawl.dev/v1"
    scrape_api_key: str | None = None
    scrape_timeout_seconds: float = 30.0
    download_timeout_seconds: float = 30.0
    image_quality: int = 80
    output_dir: str = "./converted-images"
    pacing_interval_seconds: float = 2.0
    default_brand: str = "johnsens"
    converter_api_url: str | None = None
    catalog_path: str | None = None
    user_agent: str = "ProductImageBot/1.0"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_image_pipeline_settings() -> ImagePipelineSettings:
    """
    Return cached pipeline settings from environment variables.
    """

    return ImagePipelineSettings(
        scrape_api_base_url=_get_str_env(
            "SCRAPE_API_BASE_URL", "https://api.firecrawl.dev/v1"
        ).rstrip("/"),
        scrape_api_key=_get_optional_str_env("SCRAPE_API_KEY"),
        scrape_timeout_seconds=max(1.0, _get_float_env("SCRAPE_TIMEOUT_SECONDS", 30.0)),
        download_timeout_seconds=max(
            1.0, _get_float_env("IMAGE_DOWNLOAD_TIMEOUT_SECONDS", 30.0)
        ),
        image_quality=min(100, max(1, _get_int_env("IMAGE_QUALITY", 80))),
        output_dir=_get_str_env("IMAGE_OUTPUT_DIR", "./converted-images"),
        pacing_interval_seconds=max(0.0, _get_float_env("BATCH_PACING_SECONDS", 2.0)),
        default_brand=_get_str_env("DEFAULT_BRAND", "johnsens").lower(),
        converter_api_url=_get_optional_str_env("CONVERTER_API_URL"),
        catalog_path=_get_optional_str_env("CATALOG_PATH"),
        user_agent=_get_str_env("SCRAPER_USER_AGENT", "ProductImageBot/1.0"),
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
    )
