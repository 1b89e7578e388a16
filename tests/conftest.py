from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image

from app.config import get_image_pipeline_settings


def make_png_bytes(*, mode: str = "RGB", size: tuple[int, int] = (32, 24)) -> bytes:
    color = (200, 40, 40, 128) if mode == "RGBA" else (200, 40, 40)
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return make_png_bytes()


@pytest.fixture()
def rgba_png_bytes() -> bytes:
    return make_png_bytes(mode="RGBA")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_image_pipeline_settings.cache_clear()
    yield
    get_image_pipeline_settings.cache_clear()
