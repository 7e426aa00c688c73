"""
Label index construction and label statistics.

Responsibilities
  - Group observation indices by their resolved target value.
  - Provide small label utilities (frequencies, distinct labels, label count).

Usage Context
  - Drained once from a target iterator by the resampling layer.

Limitations
  - Hashable labels are grouped with the label type's ``__eq__``/``__hash__``.
  - Array and list targets (e.g. one-hot columns) are grouped by content and
    reported as nested tuples; other unhashable targets are grouped with
    ``==`` at linear cost per distinct label.
  - Every float NaN label falls into one group keyed by ``float("nan")``.
"""
# 说明：标签索引（label -> 有序观测索引列表）的构建与简单的标签统计工具。
# 职责：
# - labelmap：单次线性遍历目标序列，按首次出现顺序建立分组
# - labelfreq / nlabel / label：基于标签索引或目标序列的频数、标签数与去重标签列表
# 约定：
# - 索引为原始容器坐标中的 0 起始位置
# - ndarray / list 目标按内容转换为嵌套 tuple 作为键；NaN 统一归入同一个键
# - 其余不可哈希的目标包装为 LabelValue，按 == 比较分组

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterable, List

import numpy as np

# 所有 NaN 标签共用的键；dict 查找先比较对象身份，因此同一对象可以命中
NAN_LABEL = float("nan")


class LabelValue:
    """
    Hashable wrapper grouping an unhashable target by value equality.

    - Behavior: ``==`` delegates to the wrapped values; all wrappers share
      one hash, so lookups fall back to equality comparison.
    - Usage Notes: the original target is available as ``value``.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LabelValue):
            return NotImplemented
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f"LabelValue({self.value!r})"


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and value != value


def _label_key(value: Any) -> Hashable:
    if isinstance(value, np.ndarray):
        return _label_key(value.tolist())
    if _is_nan(value):
        return NAN_LABEL
    if isinstance(value, list):
        return tuple(_label_key(v) for v in value)
    try:
        hash(value)
    except TypeError:
        if isinstance(value, tuple):
            return tuple(_label_key(v) for v in value)
        return LabelValue(value)
    return value


def labelmap(targets: Iterable[Any]) -> Dict[Any, List[int]]:
    """
    Map every distinct label to the ordered list of indices carrying it.

    Labels appear in order of first occurrence; every index ``0..n-1``
    appears in exactly one list.
    """
    groups: Dict[Any, List[int]] = {}
    for i, target in enumerate(targets):
        groups.setdefault(_label_key(target), []).append(i)
    return groups


def _as_labelmap(obj: Any) -> Mapping:
    # 已经是标签索引时直接复用，否则先从目标序列构建
    return obj if isinstance(obj, Mapping) else labelmap(obj)


def labelfreq(obj: Any) -> Dict[Any, int]:
    """Number of observations per label, from a label map or a target iterable."""
    return {lbl: len(indices) for lbl, indices in _as_labelmap(obj).items()}


def label(obj: Any) -> List[Any]:
    """Distinct labels in order of first occurrence."""
    return list(_as_labelmap(obj).keys())


def nlabel(obj: Any) -> int:
    """Number of distinct labels."""
    return len(_as_labelmap(obj))
