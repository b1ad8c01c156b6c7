"""Shared Pydantic models for css-dedup."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class DedupStats(BaseModel):
    """What one deduplication run removed."""

    rules_removed: int = 0
    at_rules_removed: int = 0
    declarations_removed: int = 0
    rules_emptied: int = 0
    containers_removed: int = 0

    @property
    def total_removed(self) -> int:
        return (
            self.rules_removed
            + self.at_rules_removed
            + self.declarations_removed
            + self.rules_emptied
            + self.containers_removed
        )


class FileResult(BaseModel):
    path: Path
    size_before: int
    size_after: int
    stats: DedupStats = Field(default_factory=DedupStats)
    written: bool = False

    @property
    def reduction(self) -> int:
        return self.size_before - self.size_after

    @property
    def reduction_pct(self) -> float:
        return _percent(self.reduction, self.size_before)


class BatchResult(BaseModel):
    directory: Path
    files: list[FileResult] = Field(default_factory=list)

    @property
    def size_before(self) -> int:
        return sum(f.size_before for f in self.files)

    @property
    def size_after(self) -> int:
        return sum(f.size_after for f in self.files)

    @property
    def reduction(self) -> int:
        return self.size_before - self.size_after

    @property
    def reduction_pct(self) -> float:
        return _percent(self.reduction, self.size_before)


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole > 0 else 0.0
