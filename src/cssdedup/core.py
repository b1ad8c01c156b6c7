"""Top-level entry points: deduplicate(), deduplicate_text(), CssDedup."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from cssdedup.config.schema import DedupSettings
from cssdedup.dedup.engine import DedupEngine
from cssdedup.errors.exceptions import BatchError
from cssdedup.tree.nodes import Root
from cssdedup.tree.parser import parse_css
from cssdedup.tree.printer import print_css
from cssdedup.types import BatchResult, DedupStats, FileResult

logger = logging.getLogger(__name__)


class CssDedup:
    """Deduplicator bound to one set of settings.

    Every call is an isolated run: no state carries over between documents.
    """

    def __init__(self, settings: DedupSettings | None = None) -> None:
        self._settings = settings or DedupSettings()
        self._engine = DedupEngine(hash_fingerprints=self._settings.hash_fingerprints)

    @property
    def settings(self) -> DedupSettings:
        return self._settings

    def deduplicate(self, root: Root) -> DedupStats:
        """Deduplicate a parsed tree in place."""
        return self._engine.run(root)

    def deduplicate_text(self, css: str) -> tuple[str, DedupStats]:
        """Parse → deduplicate → print. Parse errors propagate unchanged."""
        root = parse_css(css)
        stats = self._engine.run(root)
        return print_css(root, indent=self._settings.indent), stats

    def deduplicate_file(self, path: str | Path, write: bool = True) -> FileResult:
        """Deduplicate one file, overwriting it unless *write* is False."""
        path = Path(path)
        original = path.read_text(encoding="utf-8")
        output, stats = self.deduplicate_text(original)

        if write:
            path.write_text(output, encoding="utf-8")

        result = FileResult(
            path=path,
            size_before=len(original.encode("utf-8")),
            size_after=len(output.encode("utf-8")),
            stats=stats,
            written=write,
        )
        logger.info(
            "%s: %d → %d bytes (%.1f%% saved)",
            path.name,
            result.size_before,
            result.size_after,
            result.reduction_pct,
        )
        return result

    def deduplicate_directory(
        self,
        directory: str | Path,
        extensions: Iterable[str] | None = None,
        write: bool = True,
    ) -> BatchResult:
        """Deduplicate every matching file directly inside *directory*.

        Raises:
            BatchError: if the directory cannot be read or holds no matching files.
        """
        directory = Path(directory)
        files = find_stylesheets(directory, extensions or self._settings.extensions)

        batch = BatchResult(directory=directory)
        for file in files:
            batch.files.append(self.deduplicate_file(file, write=write))
        return batch


def find_stylesheets(directory: Path, extensions: Iterable[str]) -> list[Path]:
    """List files in *directory* (non-recursive, sorted) with a matching suffix."""
    suffixes = {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions}
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise BatchError(
            f"Could not read directory: {directory}", path=directory, reason=str(e)
        ) from e

    files = [p for p in entries if p.is_file() and p.suffix.lower() in suffixes]
    if not files:
        wanted = ", ".join(sorted(suffixes))
        raise BatchError(
            f"No {wanted} files found in {directory}", path=directory, reason="no matching files"
        )
    return files


# ── Module-level convenience functions ──


def deduplicate(root: Root, settings: DedupSettings | None = None) -> Root:
    """Deduplicate *root* in place and return the same tree."""
    CssDedup(settings).deduplicate(root)
    return root


def deduplicate_text(css: str, indent: str | None = None) -> str:
    """Deduplicate CSS text and return the printed result."""
    settings = DedupSettings() if indent is None else DedupSettings(indent=indent)
    output, _ = CssDedup(settings).deduplicate_text(css)
    return output


def deduplicate_directory(
    directory: str | Path,
    extensions: Iterable[str] | None = None,
    write: bool = True,
) -> BatchResult:
    """Deduplicate every matching file in *directory* with default settings."""
    return CssDedup().deduplicate_directory(directory, extensions=extensions, write=write)
