"""
Filesystem persistence for converted images and batch summaries.
"""

from __future__ import annotations

import json
import os

from app.domain.product_images import BatchSummary
from app.imaging.errors import PersistenceError
from app.imaging.types import EncodedImage

SUMMARY_FILENAME = "conversion-results.json"


class ImageFileWriter:
    """
    Writes one file per identifier under an output directory.

    Writing the same identifier twice replaces the earlier file.
    """

    def __init__(self, *, extension: str = "webp") -> None:
        self._extension = extension.lstrip(".")

    def storage_path(self, identifier: str, output_dir: str) -> str:
        return os.path.join(output_dir, f"{identifier}.{self._extension}")

    def persist(self, encoded: EncodedImage, identifier: str, output_dir: str) -> str:
        path = self.storage_path(identifier, output_dir)
        try:
            os.makedirs(output_dir, exist_ok=True)
            with open(path, "wb") as handle:
                handle.write(encoded.data)
        except OSError as exc:
            raise PersistenceError(f"Failed to write {path}: {exc}") from exc
        return path

    def write_summary(
        self,
        summary: BatchSummary,
        output_dir: str,
        *,
        filename: str = SUMMARY_FILENAME,
    ) -> str:
        path = os.path.join(output_dir, filename)
        try:
            os.makedirs(output_dir, exist_ok=True)
            with open(path, "w", encoding="utf-8") as handle:
                json.dump(summary.to_dict(), handle, indent=2)
                handle.write("\n")
        except OSError as exc:
            raise PersistenceError(f"Failed to write batch summary {path}: {exc}") from exc
        return path
