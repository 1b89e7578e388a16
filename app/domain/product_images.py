"""
app/domain/product_images.py

Domain models for catalog image conversion runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PipelineStage(str, Enum):
    """
    Ordered stages each catalog item passes through.
    """

    LOCATE = "locate"
    EXTRACT = "extract"
    CONVERT = "convert"
    PERSIST = "persist"


@dataclass(frozen=True)
class CatalogItem:
    """
    One catalog entry to fetch an image for.
    """

    identifier: str
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.identifier or not self.identifier.strip():
            raise ValueError("CatalogItem identifier must be non-empty.")


@dataclass(frozen=True)
class ItemOutcome:
    """
    Terminal result of one item's pipeline run.
    """

    identifier: str
    success: bool
    storage_path: str | None = None
    size_bytes: int | None = None
    error_kind: str | None = None
    failed_stage: PipelineStage | None = None
    error_message: str | None = None

    @classmethod
    def succeeded(cls, *, identifier: str, storage_path: str, size_bytes: int) -> "ItemOutcome":
        return cls(
            identifier=identifier,
            success=True,
            storage_path=storage_path,
            size_bytes=size_bytes,
        )

    @classmethod
    def failed(
        cls,
        *,
        identifier: str,
        stage: PipelineStage,
        error_kind: str,
        error_message: str | None = None,
    ) -> "ItemOutcome":
        return cls(
            identifier=identifier,
            success=False,
            error_kind=error_kind,
            failed_stage=stage,
            error_message=error_message,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "success": self.success,
            "storage_path": self.storage_path,
            "size_bytes": self.size_bytes,
            "error_kind": self.error_kind,
            "failed_stage": self.failed_stage.value if self.failed_stage else None,
            "error_message": self.error_message,
        }


@dataclass
class BatchSummary:
    """
    Aggregate counts and ordered outcomes for one batch run.

    Only `record` mutates the summary, which keeps
    `total_count == success_count + failure_count == len(outcomes)`.
    """

    total_count: int = 0
    success_count: int = 0
    failure_count: int = 0
    outcomes: list[ItemOutcome] = field(default_factory=list)

    def record(self, outcome: ItemOutcome) -> None:
        self.outcomes.append(outcome)
        self.total_count += 1
        if outcome.success:
            self.success_count += 1
        else:
            self.failure_count += 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_count": self.total_count,
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }
