"""
Random number generation helpers.

Responsibilities
  - Centralize RNG creation and seeding.
  - Provide index sampling helpers used by the resampling layer and tests.

Usage Context
  - Use when a consistent, injectable RNG interface is needed across modules.

Limitations
  - Relies on numpy Generator behavior for reproducibility.
"""
# 说明：随机数生成与索引采样辅助工具，用于在库中统一管理 RNG 的创建与注入。
# 职责：
# - create_rng：集中封装 numpy Generator 的创建逻辑，支持显式种子、已有生成器与全局配置的默认种子
# - sample_without_replacement：从给定索引集合中无放回抽样，返回 Python int 列表
# - shuffle_indices：返回索引列表的一个均匀随机排列（不修改输入）

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import numpy as np

from .config import get_config


def create_rng(seed: Optional[Any] = None) -> np.random.Generator:
    """Create a numpy Generator from a seed, SeedSequence, or existing generator."""
    # 将输入规范化为 numpy.random.Generator；若已是 Generator 则直接返回，未给定时回退到全局配置的种子
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None:
        seed = get_config().rng_seed
    return np.random.default_rng(seed)


def sample_without_replacement(rng: np.random.Generator, population: Sequence[int], k: int) -> List[int]:
    """Draw ``k`` distinct elements of ``population`` in random order."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if k == 0:
        return []
    if k > len(population):
        # 抽样规模超过总体规模属于调用方的前置条件违例
        raise ValueError(f"cannot draw {k} samples without replacement from {len(population)} elements")
    return [int(v) for v in rng.choice(np.asarray(population), size=k, replace=False)]


def shuffle_indices(rng: np.random.Generator, indices: Sequence[int]) -> List[int]:
    """Return a uniformly permuted copy of ``indices``."""
    shuffled = list(indices)
    rng.shuffle(shuffled)
    return shuffled
