"""Catalog storage infrastructure for CatalogManager.

Provides the storage protocol the manager reads catalogs through, a
filesystem implementation, and result/summary data structures for
tracking load attempts.

Components:
    CatalogStorage - Protocol for listing and opening catalog files
    DirectoryCatalogStorage - pathlib-backed storage
    CatalogLoadResult - Immutable result of a single catalog load attempt
    LoadSummary - Immutable aggregate of all load results

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol

from polexengine.enums import LoadStatus

if TYPE_CHECKING:
    from polexengine.diagnostics import Diagnostic
    from polexengine.runtime import CatalogLoadReport
    from polexengine.types import CatalogName, LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogStorage",
    # Concrete storage
    "DirectoryCatalogStorage",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


class CatalogStorage(Protocol):
    """Protocol for reading catalog files.

    The manager never touches the filesystem directly: it lists directory
    contents and opens files only through this interface, so catalogs can
    come from package resources, archives or in-memory fixtures.

    Example:
        >>> class MemoryStorage:
        ...     def __init__(self, files: dict[str, bytes]) -> None:
        ...         self.files = files
        ...     def list_entries(self, directory: str) -> list[str]:
        ...         prefix = directory.rstrip("/") + "/"
        ...         return [p.removeprefix(prefix) for p in self.files if p.startswith(prefix)]
        ...     def open(self, path: str) -> BinaryIO:
        ...         return io.BytesIO(self.files[path])
    """

    def list_entries(self, directory: str) -> list[CatalogName]:
        """Return the file names directly inside directory.

        An unreadable or missing directory yields an empty list.
        """
        ...

    def open(self, path: str) -> BinaryIO:
        """Open a file for binary reading.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        ...


@dataclass(frozen=True, slots=True)
class DirectoryCatalogStorage:
    """CatalogStorage over the local filesystem.

    Only regular files are listed, sorted by name so that candidate
    selection is deterministic across platforms.

    Attributes:
        root: Base directory relative directory arguments are resolved
              against (None: current working directory)
    """

    root: str | None = None

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if self.root is not None and not candidate.is_absolute():
            candidate = Path(self.root) / candidate
        return candidate

    def list_entries(self, directory: str) -> list[CatalogName]:
        base = self._resolve(directory)
        try:
            return sorted(entry.name for entry in base.iterdir() if entry.is_file())
        except OSError as e:
            logger.debug("Cannot list catalog directory %s: %s", base, e)
            return []

    def open(self, path: str) -> BinaryIO:
        return self._resolve(path).open("rb")


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading one catalog file into a dictionary.

    Attributes:
        locale: Requested locale (POSIX form)
        source_path: Directory-qualified catalog path, "" when nothing matched
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        report: Dictionary load report when the catalog was parsed
    """

    locale: LocaleCode
    source_path: str
    status: LoadStatus
    error: Exception | None = None
    report: CatalogLoadReport | None = None

    @property
    def is_success(self) -> bool:
        """Check if the catalog loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if no catalog matched (expected for untranslated locales)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Non-fatal diagnostics from parsing and merging."""
        return self.report.warnings if self.report is not None else ()


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog load results.

    All statistics are computed properties derived from ``results``.

    Attributes:
        results: All individual load results in attempt order

    Example:
        >>> summary = manager.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors}, "
            f"warnings={self.warning_count})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of requests no catalog matched."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def warning_count(self) -> int:
        """Total non-fatal diagnostics across all loads."""
        return sum(len(r.warnings) for r in self.results)

    def get_errors(self) -> tuple[CatalogLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_successful(self) -> tuple[CatalogLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[CatalogLoadResult, ...]:
        """Get all results for a specific requested locale."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def has_errors(self) -> bool:
        """Check if any catalog failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check that every attempt found and loaded a catalog."""
        return self.errors == 0 and self.not_found == 0
