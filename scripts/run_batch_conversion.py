"""
Run a batch catalog image conversion from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging

from app.config import get_image_pipeline_settings
from app.imaging.catalog import load_catalog_items
from app.imaging.errors import PersistenceError, UnsupportedBrandError
from app.imaging.logging_utils import configure_logging
from app.services.batch_conversion_service import BatchConversionService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert catalog product images to WebP.")
    parser.add_argument(
        "--brand",
        dest="brand",
        default=None,
        help="Brand profile key. Defaults to DEFAULT_BRAND.",
    )
    parser.add_argument(
        "--catalog",
        dest="catalog",
        default=None,
        help="Optional JSON catalog file. Defaults to CATALOG_PATH or the built-in list.",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory for WebP files and conversion-results.json.",
    )
    parser.add_argument(
        "--quality",
        dest="quality",
        type=int,
        default=None,
        help="WebP quality between 1 and 100.",
    )
    args = parser.parse_args(argv)

    settings = get_image_pipeline_settings()
    configure_logging(settings.log_level)

    if args.quality is not None and not 1 <= args.quality <= 100:
        parser.error("--quality must be between 1 and 100")

    items = load_catalog_items(catalog_path=args.catalog or settings.catalog_path)
    service = BatchConversionService(settings)
    try:
        summary = service.run(
            items=items,
            brand=args.brand,
            output_dir=args.output_dir,
            quality=args.quality,
        )
    except UnsupportedBrandError as exc:
        parser.error(str(exc))
    except PersistenceError as exc:
        logger.critical("Batch results could not be saved: %s", exc)
        return 1

    print(json.dumps(summary.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
