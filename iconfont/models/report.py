"""Per-icon results and the batch processing report."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from pydantic import BaseModel, Field


class IconState(str, enum.Enum):
    PENDING = "pending"
    EXTRACTED = "extracted"
    ASSOCIATED = "associated"
    ASSEMBLED = "assembled"
    OPTIMIZED = "optimized"
    WRITTEN = "written"
    SKIPPED = "skipped"


class SkipReason(BaseModel):
    name: str
    # Last state reached before the failure
    step: IconState
    reason: str
    message: str = ""


class IconResult(BaseModel):
    """Outcome of one icon's trip through the pipeline."""

    name: str
    state: IconState = IconState.PENDING
    skip: SkipReason | None = None
    svg: str = ""

    @property
    def ok(self) -> bool:
        return self.state == IconState.WRITTEN


class ProcessingReport(BaseModel):
    processed: int = 0
    skipped: int = 0
    skip_reasons: list[SkipReason] = Field(default_factory=list)

    @classmethod
    def merge(cls, results: Iterable[IconResult]) -> ProcessingReport:
        """Fold per-icon results (in enumeration order) into one report."""
        report = cls()
        for result in results:
            report = report.add(result)
        return report

    def add(self, result: IconResult) -> ProcessingReport:
        if result.ok:
            return self.model_copy(update={"processed": self.processed + 1})
        reasons = list(self.skip_reasons)
        if result.skip is not None:
            reasons.append(result.skip)
        return self.model_copy(
            update={"skipped": self.skipped + 1, "skip_reasons": reasons}
        )

    def summary(self) -> str:
        return f"Processed {self.processed} icons, skipped {self.skipped}"
