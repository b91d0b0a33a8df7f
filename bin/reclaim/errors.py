#!/usr/bin/env python3
"""Error taxonomy for disk space reclamation."""

from __future__ import annotations

from pathlib import Path


class CleanupError(RuntimeError):
    """Base class for every failure raised while reclaiming space.

    Carries the path the failure concerns and what was being done at the time.
    """

    def __init__(self, path: Path | str, context: str, reason: str | None = None):
        self.path = Path(path)
        self.context = context
        self.reason = reason
        message = f"while {context} {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PathResolutionError(CleanupError):
    """The root directory is missing or cannot be resolved."""


class FilesystemQueryError(CleanupError):
    """Filesystem statistics are unavailable or nonsensical."""


class ScanEntryError(CleanupError):
    """A single entry (or subtree) could not be read during a scan. Recoverable."""


class DeletionError(CleanupError):
    """A candidate file could not be removed."""
