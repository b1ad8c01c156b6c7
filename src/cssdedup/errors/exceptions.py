"""Custom exception hierarchy for css-dedup."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CssDedupError(Exception):
    """Base exception for all css-dedup errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class CssParseError(CssDedupError):
    """Malformed style-sheet text, raised by the parser and never repaired.

    Carries the position reported by tinycss2 (1-based line and column).
    """

    def __init__(
        self,
        message: str = "",
        line: int | None = None,
        column: int | None = None,
        kind: str = "invalid",
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
        self.kind = kind

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class BatchError(CssDedupError):
    """Batch run aborted: directory unreadable or holds no matching files."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason
