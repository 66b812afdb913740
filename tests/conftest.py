"""
测试公共夹具
"""
from pathlib import Path

import pytest

from projecthop.cache import CacheStore


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def store(tmp_path: Path) -> CacheStore:
    return CacheStore(tmp_path / "cache" / ".cache.json")
