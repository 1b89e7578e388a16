from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from app.domain.product_images import BatchSummary, ItemOutcome, PipelineStage
from app.imaging.errors import PersistenceError
from app.imaging.storage import ImageFileWriter
from app.imaging.types import EncodedImage


def test_persist_creates_directory_and_names_file_by_identifier(tmp_path: Path) -> None:
    output_dir = str(tmp_path / "nested" / "converted-images")

    path = ImageFileWriter().persist(EncodedImage(data=b"webp-1"), "2212", output_dir)

    assert path == os.path.join(output_dir, "2212.webp")
    assert Path(path).read_bytes() == b"webp-1"


def test_persist_same_identifier_twice_keeps_last_write(tmp_path: Path) -> None:
    writer = ImageFileWriter()

    first = writer.persist(EncodedImage(data=b"first"), "2212", str(tmp_path))
    second = writer.persist(EncodedImage(data=b"second"), "2212", str(tmp_path))

    assert first == second
    assert sorted(p.name for p in tmp_path.iterdir()) == ["2212.webp"]
    assert Path(second).read_bytes() == b"second"


def test_persist_keeps_relative_output_dir_prefix(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = ImageFileWriter().persist(EncodedImage(data=b"x"), "2212", "./converted-images")
    assert path == "./converted-images/2212.webp"


def test_persist_filesystem_failure_raises_io_error_kind(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied")

    with pytest.raises(PersistenceError) as exc_info:
        ImageFileWriter().persist(EncodedImage(data=b"x"), "2212", str(blocker))
    assert exc_info.value.error_kind == "IOError"


def test_write_summary_serializes_counts_and_outcomes(tmp_path: Path) -> None:
    summary = BatchSummary()
    summary.record(ItemOutcome.succeeded(identifier="2212", storage_path="a/2212.webp", size_bytes=10))
    summary.record(
        ItemOutcome.failed(
            identifier="9999",
            stage=PipelineStage.LOCATE,
            error_kind="NotFoundError",
            error_message="Page returned status=404",
        )
    )

    path = ImageFileWriter().write_summary(summary, str(tmp_path))

    assert Path(path).name == "conversion-results.json"
    written = json.loads(Path(path).read_text(encoding="utf-8"))
    assert written["total_count"] == 2
    assert written["success_count"] == 1
    assert written["failure_count"] == 1
    assert [o["identifier"] for o in written["outcomes"]] == ["2212", "9999"]
    assert written["outcomes"][1]["error_kind"] == "NotFoundError"
    assert written["outcomes"][1]["failed_stage"] == "locate"


def test_write_summary_failure_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("occupied")
    with pytest.raises(PersistenceError):
        ImageFileWriter().write_summary(BatchSummary(), str(blocker))
