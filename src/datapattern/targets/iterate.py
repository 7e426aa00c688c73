"""
Lazy, restartable iteration over the targets of a container.
"""
# 说明：目标迭代器，逐观测惰性产出目标而不物化整个集合。
# 职责：
# - TargetIterator：构造时立即完成对齐/形状校验（尽早失败），每次 iter() 都返回一个全新的生成器
# - eachtarget：便捷构造函数
# 约定：
# - 每一步只计算一个观测的目标；容器拒绝单索引访问时抛出的 ObsDimTriggeredError 原样传播

from __future__ import annotations

from typing import Any, Iterator

from ..core.data.access import nobs, resolve_obsdim
from ..core.data.obsdim import ObsDimLike
from .resolve import Transform, iter_resolved


class TargetIterator:
    """Sized iterable yielding one resolved target per observation of ``data``."""

    def __init__(self, data: Any, fn: Transform = None, obsdim: ObsDimLike = None):
        self._data = data
        self._fn = fn
        self._obsdim = resolve_obsdim(data, obsdim)
        self._count = nobs(data, self._obsdim)

    @property
    def data(self) -> Any:
        return self._data

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        # 每次调用都创建新的生成器，不共享游标状态
        return iter_resolved(self._data, self._fn, self._obsdim, self._count)

    def __repr__(self) -> str:
        return f"TargetIterator(data={type(self._data).__name__}, nobs={self._count})"


def eachtarget(data: Any, fn: Transform = None, obsdim: ObsDimLike = None) -> TargetIterator:
    """
    Lazily iterate over the targets of ``data``.

    Alignment and shape are validated immediately; targets are computed one
    at a time as the iterator is consumed.
    """
    return TargetIterator(data, fn, obsdim)
