"""
Class balancing by over- and undersampling.

Responsibilities
  - oversample: replicate observations of minority labels until every label
    has as many observations as the largest one.
  - undersample: subsample every label down to the size of the smallest one.
  - Return the balanced data as a non-copying subset view.

Usage Context
  - Use before training on imbalanced classification data. The result can be
    materialized with ``getobs`` or consumed lazily.

Limitations
  - Sampling goes through an injected numpy Generator; pass a seed or a
    Generator for reproducible results.
"""
# 说明：基于标签索引的类别平衡（过采样 / 欠采样）。
# 职责：
# - oversample：保留全部原始索引，再为少数类补足到最大类大小（整组重复 + 一次无放回部分抽样）
# - undersample：每个类别无放回抽取最小类大小的索引
# - upsample / downsample：已弃用的别名，发出 DeprecationWarning 后转发
# 约定：
# - shuffle=True 时对组合后的索引做均匀随机排列
# - undersample 在 shuffle=False 时按升序排序以恢复原始相对顺序；oversample 不排序（重复部分按标签顺序聚在末尾）
# - 空容器（无标签）直接返回空子集

from __future__ import annotations

import warnings
from typing import Any, Dict, List, Optional

from ..core.data.obsdim import ObsDimLike
from ..core.data.subset import DataSubset
from ..core.utils.logging import get_logger
from ..core.utils.param_validation import ensure_type
from ..core.utils.random import create_rng, sample_without_replacement, shuffle_indices
from ..targets.iterate import eachtarget
from ..targets.labelmap import labelmap
from ..targets.resolve import Transform

logger = get_logger(__name__)


def _label_groups(data: Any, fn: Transform, obsdim: ObsDimLike) -> Dict[Any, List[int]]:
    return labelmap(eachtarget(data, fn, obsdim))


def oversample(
    data: Any,
    fn: Transform = None,
    shuffle: bool = True,
    obsdim: ObsDimLike = None,
    rng: Optional[Any] = None,
) -> DataSubset:
    """
    Generate a class-balanced version of ``data`` by repeating observations.

    Every label ends up with as many observations as the largest label has
    in ``data``. All original observations are kept; for each smaller label
    the whole group is repeated while the remaining deficit exceeds the group
    size, and the remainder is drawn without replacement.

    Args:
        data: Container or tuple of aligned containers (targets in the last slot).
        fn: Optional transform extracting the label from each target.
        shuffle: Shuffle the resulting indices. If False the repeated
            observations follow the original ones, grouped by label.
        obsdim: Dimension descriptor(s) of ``data``.
        rng: Seed or numpy Generator driving the sampling.

    Returns:
        DataSubset over ``data`` with the balanced indices.
    """
    ensure_type(shuffle, (bool,), label="shuffle")
    groups = _label_groups(data, fn, obsdim)
    total = sum(len(indices) for indices in groups.values())
    if not groups:
        logger.debug("oversample: no observations, returning an empty subset")
        return DataSubset(data, [], obsdim)

    generator = create_rng(rng)
    maxcount = max(len(indices) for indices in groups.values())

    # 先保留全部原始观测
    inds: List[int] = list(range(total))
    for indices in groups.values():
        needed = maxcount - len(indices)
        while needed > len(indices):
            needed -= len(indices)
            inds.extend(indices)
        inds.extend(sample_without_replacement(generator, indices, needed))

    if shuffle:
        inds = shuffle_indices(generator, inds)
    logger.debug(
        "oversample: %d labels, maxcount=%d, %d -> %d observations",
        len(groups), maxcount, total, len(inds),
    )
    return DataSubset(data, inds, obsdim)


def undersample(
    data: Any,
    fn: Transform = None,
    shuffle: bool = False,
    obsdim: ObsDimLike = None,
    rng: Optional[Any] = None,
) -> DataSubset:
    """
    Generate a class-balanced version of ``data`` by subsampling observations.

    Every label ends up with as many observations as the smallest label has
    in ``data``; each label's observations are drawn without replacement.

    Args:
        data: Container or tuple of aligned containers (targets in the last slot).
        fn: Optional transform extracting the label from each target.
        shuffle: Shuffle the resulting indices. If False they are sorted,
            keeping the original relative order.
        obsdim: Dimension descriptor(s) of ``data``.
        rng: Seed or numpy Generator driving the sampling.

    Returns:
        DataSubset over ``data`` with the balanced indices.
    """
    ensure_type(shuffle, (bool,), label="shuffle")
    groups = _label_groups(data, fn, obsdim)
    if not groups:
        logger.debug("undersample: no observations, returning an empty subset")
        return DataSubset(data, [], obsdim)

    generator = create_rng(rng)
    mincount = min(len(indices) for indices in groups.values())

    inds: List[int] = []
    for indices in groups.values():
        inds.extend(sample_without_replacement(generator, indices, mincount))

    inds = shuffle_indices(generator, inds) if shuffle else sorted(inds)
    logger.debug(
        "undersample: %d labels, mincount=%d, %d -> %d observations",
        len(groups), mincount, sum(len(indices) for indices in groups.values()), len(inds),
    )
    return DataSubset(data, inds, obsdim)


def upsample(*args: Any, **kwargs: Any) -> DataSubset:
    """Deprecated alias of :func:`oversample`."""
    warnings.warn("upsample is deprecated, use oversample instead", DeprecationWarning, stacklevel=2)
    return oversample(*args, **kwargs)


def downsample(*args: Any, **kwargs: Any) -> DataSubset:
    """Deprecated alias of :func:`undersample`."""
    warnings.warn("downsample is deprecated, use undersample instead", DeprecationWarning, stacklevel=2)
    return undersample(*args, **kwargs)
