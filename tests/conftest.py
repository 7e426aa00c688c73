"""Shared pytest configuration and path setup for test modules."""

import copy
import sys
from dataclasses import fields
from pathlib import Path

import pytest

# Ensure repo root, src/ and tests/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
_TESTS = _ROOT / "tests"
for p in (str(_ROOT), str(_SRC), str(_TESTS)):
    if p not in sys.path:
        sys.path.insert(0, p)

from datapattern.core.utils.config import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局 RuntimeConfig，避免 configure(...) 的修改泄漏到其他测试
    cfg = get_config()
    snapshot = copy.deepcopy(cfg)
    yield
    cfg.update(**{f.name: getattr(snapshot, f.name) for f in fields(snapshot)})


@pytest.fixture
def labels():
    return ["a", "b", "b", "b", "b", "a"]


@pytest.fixture
def features():
    import numpy as np

    return np.arange(12).reshape(6, 2)
