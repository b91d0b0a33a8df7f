#!/usr/bin/env python3
"""Filesystem utilisation queries."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from reclaim.errors import FilesystemQueryError

_LOGGER = logging.getLogger(__name__)


def usage_percent(path: Path) -> int:
    """Return the used space of the filesystem holding ``path`` as a whole percentage.

    Computed as ``100 - floor(free_blocks * 100 / total_blocks)``. Never cached;
    every call asks the kernel again.

    Raises:
        FilesystemQueryError: if the filesystem cannot be queried or reports an impossible size
    """
    if not hasattr(os, "statvfs"):
        raise FilesystemQueryError(path, "querying filesystem statistics for", "statvfs is unavailable on this platform")
    try:
        stat = os.statvfs(path)
    except OSError as e:
        raise FilesystemQueryError(path, "querying filesystem statistics for", str(e)) from e

    if stat.f_blocks == 0:
        raise FilesystemQueryError(path, "computing usage of", "filesystem reports zero total blocks")
    used = 100 - (stat.f_bfree * 100 // stat.f_blocks)
    if not 0 <= used <= 100:
        raise FilesystemQueryError(
            path, "computing usage of", f"{stat.f_bfree} free of {stat.f_blocks} blocks is out of range"
        )
    _LOGGER.debug("%s: %d free of %d blocks (%d%% used)", path, stat.f_bfree, stat.f_blocks, used)
    return used
