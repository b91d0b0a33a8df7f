#!/usr/bin/env python3
"""Delete the oldest matching files until filesystem usage drops below a target."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import humanfriendly

from reclaim.errors import DeletionError, PathResolutionError
from reclaim.scanner import Candidate, scan
from reclaim.usage import usage_percent

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupSummary:
    """Outcome of a cleanup run."""

    directory: Path
    initial_percent: int
    target_percent: int
    dry_run: bool
    target_met: bool
    candidate_count: int = 0
    removed: tuple[Candidate, ...] = ()

    @property
    def reclaimed_size(self) -> int:
        return sum(candidate.size for candidate in self.removed)


def resolve_directory(root: Path | str) -> Path:
    """Canonicalise ``root``, which must be an existing directory."""
    try:
        directory = Path(root).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(root, "resolving", str(e)) from e
    if not directory.is_dir():
        raise PathResolutionError(root, "resolving", "not a directory")
    return directory


def remove_candidate(candidate: Candidate) -> None:
    try:
        candidate.path.unlink()
    except OSError as e:
        raise DeletionError(candidate.path, "removing", e.strerror or str(e)) from e


def run(root: Path | str, extensions: Iterable[str], target_percent: int, commit: bool) -> CleanupSummary:
    """Remove the oldest files matching ``extensions`` under ``root`` until usage is below ``target_percent``.

    Usage is measured again before every removal, so nothing is deleted once
    the target has been reached. Without ``commit`` the candidates are only
    reported.

    Args:
        root: Directory to clean; its filesystem is the one measured
        extensions: Extensions (no leading dot, case-sensitive) eligible for removal
        target_percent: Stop once usage falls strictly below this percentage
        commit: Actually delete files rather than just report them

    Returns:
        CleanupSummary describing what was (or would have been) removed

    Raises:
        PathResolutionError: if ``root`` is not an existing directory
        FilesystemQueryError: if usage cannot be measured, at any point
        DeletionError: on the first file that cannot be removed; earlier removals stand
    """
    directory = resolve_directory(root)
    initial = usage_percent(directory)
    _LOGGER.info("current: %d%%, target: %d%%", initial, target_percent)
    if initial < target_percent:
        return CleanupSummary(
            directory=directory,
            initial_percent=initial,
            target_percent=target_percent,
            dry_run=not commit,
            target_met=True,
        )

    candidates = scan(directory, extensions)
    queue = deque(candidates)
    removed: list[Candidate] = []
    target_met = False
    while queue:
        current = usage_percent(directory)
        if current < target_percent:
            _LOGGER.debug("usage now %d%%, below target", current)
            target_met = True
            break
        candidate = queue.popleft()
        _LOGGER.info("should remove: %s (%s)", candidate.path, humanfriendly.format_size(candidate.size, binary=True))
        if commit:
            remove_candidate(candidate)
        removed.append(candidate)

    if not target_met:
        _LOGGER.info("No more matching files under %s; target of %d%% not reached", directory, target_percent)

    summary = CleanupSummary(
        directory=directory,
        initial_percent=initial,
        target_percent=target_percent,
        dry_run=not commit,
        target_met=target_met,
        candidate_count=len(candidates),
        removed=tuple(removed),
    )
    _LOGGER.info(
        "%s %d of %d candidate file(s), %s",
        "Removed" if commit else "Would remove",
        len(removed),
        len(candidates),
        humanfriendly.format_size(summary.reclaimed_size, binary=True),
    )
    return summary
