"""
Non-copying subset views over arbitrary data containers.

Responsibilities:
    * hold a reference to the original container plus an owned index list
    * expose the observation access protocol so subsets compose with every
      other component (targets, partition views, resampling)
    * flatten subsets of subsets onto the root container
"""
# 说明：DataSubset 是“原始容器引用 + 自有索引列表 + 维度描述符”的轻量视图，不复制底层数据。
# 职责：
# - 以装饰器方式包裹任意实现了访问协议的容器（而非子类化）
# - 支持单索引子集（is_single，nobs == 1）与多索引子集（list / range）
# - 嵌套子集在构造时展开到根容器，索引映射回原始坐标
# - 在 strict_validation 开启时检查索引越界

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Union

from ..utils.config import get_config
from ..utils.param_validation import ParamValidationError
from .access import getobs, nobs, normalize_index, resolve_obsdim
from .obsdim import ObsDimLike


SubsetIndices = Union[int, range, List[int]]


class DataSubset:
    """Lazy subset of a data container selected by observation indices."""

    __slots__ = ("data", "indices", "obsdim")

    def __init__(self, data: Any, indices: Any = None, obsdim: ObsDimLike = None):
        if isinstance(data, DataSubset):
            # 子集的子集：将位置索引映射回根容器的坐标，沿用内层的维度描述符
            parent = data
            count = parent.nobs()
            data, obsdim = parent.data, parent.obsdim
            positions = _as_positions(normalize_index(indices), count)
            if get_config().strict_validation:
                _check_bounds(positions, count)
            indices = _compose(parent, positions)
        else:
            obsdim = resolve_obsdim(data, obsdim)
            count = nobs(data, obsdim)  # 同时完成对齐校验与形状校验
            indices = _as_positions(normalize_index(indices), count)
            if get_config().strict_validation:
                _check_bounds(indices, count)
        self.data = data
        self.indices: SubsetIndices = indices
        self.obsdim = obsdim

    @classmethod
    def unchecked(cls, data: Any, indices: SubsetIndices, obsdim: Any) -> "DataSubset":
        """Build a subset from already validated parts, flattening nested subsets."""
        # 内部快速路径：逐观测迭代时避免重复的 nobs/对齐校验
        if isinstance(data, DataSubset):
            indices = _compose(data, indices)
            data, obsdim = data.data, data.obsdim
        subset = cls.__new__(cls)
        subset.data = data
        subset.indices = indices
        subset.obsdim = obsdim
        return subset

    @property
    def is_single(self) -> bool:
        # 单索引子集表示恰好一个观测
        return isinstance(self.indices, int)

    def nobs(self, obsdim: Any = None) -> int:
        return 1 if self.is_single else len(self.indices)

    def getobs(self, idx: Any = None, obsdim: Any = None) -> Any:
        """Materialize the subset (``idx=None``) or some of its observations."""
        if idx is None:
            return getobs(self.data, self.indices, self.obsdim)
        positions = _compose(self, _as_positions(normalize_index(idx), self.nobs()))
        return getobs(self.data, positions, self.obsdim)

    def component(self, position: int) -> "DataSubset":
        """Subset of one element of a tuple container, sharing the same indices."""
        if not isinstance(self.data, tuple):
            raise ParamValidationError("component() requires a subset of a tuple container")
        return DataSubset.unchecked(self.data[position], self.indices, self.obsdim[position])

    def __len__(self) -> int:
        return self.nobs()

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.nobs()):
            yield self.getobs(i)

    def __repr__(self) -> str:
        return (
            f"DataSubset(data={type(self.data).__name__}, "
            f"indices={self.indices!r}, obsdim={self.obsdim!r})"
        )


def _as_positions(idx: Any, count: int) -> SubsetIndices:
    # None 表示全部观测；切片按容器大小展开为 range
    if idx is None:
        return range(count)
    if isinstance(idx, slice):
        return range(*idx.indices(count))
    return idx


def _compose(parent: DataSubset, positions: SubsetIndices) -> SubsetIndices:
    # 将相对于 parent 的位置索引映射为 parent.data 中的绝对索引
    base = [parent.indices] if parent.is_single else parent.indices
    if isinstance(positions, int):
        return base[positions]
    return [base[i] for i in positions]


def _check_bounds(indices: SubsetIndices, count: int) -> None:
    values = [indices] if isinstance(indices, int) else indices
    for i in values:
        if not 0 <= i < count:
            raise ParamValidationError(f"observation index {i} is out of bounds for {count} observations")


def datasubset(data: Any, indices: Any = None, obsdim: ObsDimLike = None) -> DataSubset:
    """
    Create a lazy subset of ``data``.

    Args:
        data: Any container supported by ``nobs``/``getobs``.
        indices: ``None`` (all observations), an ``int`` (single observation),
            a slice, a range, or a sequence of integer indices.
        obsdim: Dimension descriptor for ``data``.
    """
    return DataSubset(data, indices, obsdim)
