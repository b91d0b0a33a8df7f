#!/usr/bin/env python3
"""Find deletion candidates under a directory tree, oldest first."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from reclaim.errors import ScanEntryError

_LOGGER = logging.getLogger(__name__)


class Candidate(NamedTuple):
    """A file eligible for deletion."""

    path: Path
    modified: int  # whole seconds since the Unix epoch
    size: int


def file_extension(name: str) -> str | None:
    """Return the extension of a file name without its dot, or None if it has none.

    A leading dot alone does not start an extension (``.bashrc`` has none),
    while a trailing dot gives an empty one (``notes.`` -> ``""``).
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def _log_walk_error(error: OSError) -> None:
    _LOGGER.debug(
        "error reading directory, ignoring: %s",
        ScanEntryError(error.filename or "<unknown>", "walking", error.strerror or str(error)),
    )


def _to_candidate(path: Path) -> Candidate | None:
    """Stat a single entry; None if it is not a regular file."""
    try:
        st = os.lstat(path)
    except OSError as e:
        raise ScanEntryError(path, "reading metadata of", e.strerror or str(e)) from e
    if not stat.S_ISREG(st.st_mode):
        return None
    if st.st_mtime < 0:
        raise ScanEntryError(path, "reading modified time of", "timestamp precedes the epoch")
    return Candidate(path=path, modified=int(st.st_mtime), size=st.st_size)


def scan(root: Path, extensions: Iterable[str]) -> list[Candidate]:
    """Recursively collect regular files under ``root`` whose extension is in ``extensions``.

    Symbolic links are never followed, neither as files nor as directories.
    Unreadable entries and subtrees are logged at debug level and skipped.
    The result is sorted by modification time, oldest first; files with equal
    times keep the order in which the walk found them.
    """
    wanted = frozenset(extensions)
    matches: list[Candidate] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_log_walk_error, followlinks=False):
        for filename in filenames:
            if file_extension(filename) not in wanted:
                continue
            path = Path(dirpath) / filename
            try:
                candidate = _to_candidate(path)
            except ScanEntryError as e:
                _LOGGER.debug("error reading entry, ignoring: %s", e)
                continue
            if candidate is not None:
                matches.append(candidate)

    matches.sort(key=lambda candidate: candidate.modified)
    _LOGGER.debug("Found %d candidate(s) under %s", len(matches), root)
    return matches
