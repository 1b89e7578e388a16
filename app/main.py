from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from app.config import get_image_pipeline_settings, load_env_files
from app.imaging.brands import BrandRegistry
from app.imaging.logging_utils import configure_logging


def _validate_env() -> None:
    """
    Validate pipeline environment variables at startup.

    Raises RuntimeError listing every invalid variable so the operator can
    fix all problems in one restart cycle.

    Rules:
    - DEFAULT_BRAND must name a registered brand profile.
    - IMAGE_QUALITY, when set, must be an integer in [1, 100].
    - BATCH_PACING_SECONDS, when set, must be a non-negative number.
    """

    load_env_files()

    errors: list[str] = []

    # --- Default brand --------------------------------------------------
    default_brand = os.getenv("DEFAULT_BRAND", "johnsens").strip().lower() or "johnsens"
    registry = BrandRegistry()
    if default_brand not in registry:
        errors.append(
            f"DEFAULT_BRAND='{default_brand}' is not a known brand. "
            f"Allowed values: {registry.brand_keys()}."
        )

    # --- Image quality --------------------------------------------------
    raw_quality = os.getenv("IMAGE_QUALITY")
    if raw_quality is not None and raw_quality.strip():
        try:
            quality = int(raw_quality)
        except ValueError:
            errors.append(f"IMAGE_QUALITY='{raw_quality}' is not an integer.")
        else:
            if not 1 <= quality <= 100:
                errors.append(f"IMAGE_QUALITY={quality} must be between 1 and 100.")

    # --- Pacing ---------------------------------------------------------
    raw_pacing = os.getenv("BATCH_PACING_SECONDS")
    if raw_pacing is not None and raw_pacing.strip():
        try:
            pacing = float(raw_pacing)
        except ValueError:
            errors.append(f"BATCH_PACING_SECONDS='{raw_pacing}' is not a number.")
        else:
            if pacing < 0:
                errors.append(f"BATCH_PACING_SECONDS={pacing} must not be negative.")

    if errors:
        raise RuntimeError(
            "Startup validation failed - invalid environment variables:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    configure_logging(get_image_pipeline_settings().log_level)

    application = FastAPI(
        title="Product Image Pipeline API",
        version="1.0.0",
    )

    from app.api.routers import image_conversion_router, product_search_router

    application.include_router(image_conversion_router)
    application.include_router(product_search_router)

    @application.get("/")
    def service_info() -> dict:
        return {
            "status": "running",
            "service": "Product Image Pipeline",
            "endpoints": {
                "convert": "POST /convert - Convert image to WebP",
                "search_product": "POST /api/search-product - Locate a product image",
                "health": "GET /health - Health check",
            },
        }

    @application.get("/health")
    def healthcheck() -> dict:
        return {"status": "healthy", "service": "product-image-pipeline"}

    logging.getLogger(__name__).info("Product image API configured")
    return application


app = create_app()
