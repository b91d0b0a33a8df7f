#!/usr/bin/env python3
"""Tests for filesystem usage queries."""

from __future__ import annotations

import os
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from reclaim.errors import FilesystemQueryError
from reclaim.usage import usage_percent


def _statvfs(blocks, free):
    return SimpleNamespace(f_blocks=blocks, f_bfree=free)


def test_usage_of_real_filesystem_is_a_percentage(tmp_path):
    assert 0 <= usage_percent(tmp_path) <= 100


@patch("reclaim.usage.os.statvfs")
def test_usage_rounds_free_space_down(mock_statvfs, tmp_path):
    # 333 * 100 // 1000 == 33 free, so 67 used
    mock_statvfs.return_value = _statvfs(1000, 333)
    assert usage_percent(tmp_path) == 67


@patch("reclaim.usage.os.statvfs")
def test_empty_and_full_filesystems(mock_statvfs, tmp_path):
    mock_statvfs.return_value = _statvfs(1000, 1000)
    assert usage_percent(tmp_path) == 0
    mock_statvfs.return_value = _statvfs(1000, 0)
    assert usage_percent(tmp_path) == 100


@patch("reclaim.usage.os.statvfs")
def test_zero_total_blocks_is_an_error(mock_statvfs, tmp_path):
    mock_statvfs.return_value = _statvfs(0, 0)
    with pytest.raises(FilesystemQueryError, match="zero total blocks"):
        usage_percent(tmp_path)


@patch("reclaim.usage.os.statvfs")
def test_more_free_than_total_is_an_error(mock_statvfs, tmp_path):
    mock_statvfs.return_value = _statvfs(100, 250)
    with pytest.raises(FilesystemQueryError, match="out of range"):
        usage_percent(tmp_path)


def test_missing_path_is_an_error(tmp_path):
    missing = tmp_path / "gone"
    with pytest.raises(FilesystemQueryError) as exc_info:
        usage_percent(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.__cause__, OSError)


def test_platform_without_statvfs(tmp_path, monkeypatch):
    monkeypatch.delattr(os, "statvfs")
    with pytest.raises(FilesystemQueryError, match="unavailable"):
        usage_percent(tmp_path)
