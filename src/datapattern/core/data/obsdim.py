"""
Observation dimension descriptors.

Responsibilities
  - Identify which axis of a multi-dimensional container indexes observations.
  - Normalize the convenience spellings accepted at the API boundary
    (strings, integers, tuples) into one canonical descriptor type.
  - Resolve a descriptor into a concrete axis for a given number of dimensions.

Usage Context
  - Consumed by every access function; a single descriptor applies to all
    elements of a tuple container, a tuple of descriptors is positional.

Limitations
  - Integer axes follow numpy's 0-based convention; negative axes count from the end.
"""
# 说明：观测维度描述符（ObsDim），用于标识多维容器中哪一个轴对应观测。
# 职责：
# - First / Last / Constant / Undefined：规范化的描述符类型（不可变数据类）
# - convert_obsdim：将 None / 字符串 / 整数 / 元组等便捷写法统一转换为描述符
# - resolve_axis：结合数据维数把描述符解析为具体轴编号，越界时抛出 DimensionMismatchError
# - default_obsdim：按数据类型给出默认描述符（ndarray 使用运行时配置，其他类型为 Undefined）

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

import numpy as np

from ..utils.config import get_config
from ..utils.param_validation import ParamValidationError
from .exceptions import DimensionMismatchError


class ObsDim:
    """Base class of all observation dimension descriptors."""

    def axis(self, ndim: int) -> int:
        # 子类负责把描述符映射为具体轴
        raise NotImplementedError


@dataclass(frozen=True)
class First(ObsDim):
    """Observations are stored along the first axis (rows)."""

    def axis(self, ndim: int) -> int:
        return 0


@dataclass(frozen=True)
class Last(ObsDim):
    """Observations are stored along the last axis (columns of a matrix)."""

    def axis(self, ndim: int) -> int:
        return max(ndim - 1, 0)


@dataclass(frozen=True)
class Constant(ObsDim):
    """Observations are stored along an explicit axis."""

    dim: int

    def __post_init__(self) -> None:
        if isinstance(self.dim, bool) or not isinstance(self.dim, (int, np.integer)):
            raise ParamValidationError("Constant obsdim requires an integer axis")
        object.__setattr__(self, "dim", int(self.dim))

    def axis(self, ndim: int) -> int:
        size = max(ndim, 1)
        if not -size <= self.dim < size:
            raise DimensionMismatchError(
                f"observation axis {self.dim} is out of range for {ndim}-dimensional data"
            )
        return self.dim % size


@dataclass(frozen=True)
class Undefined(ObsDim):
    """No explicit observation axis; the container decides (arrays use the first axis)."""

    def axis(self, ndim: int) -> int:
        return 0


# 便捷写法：ObsDim.First() 与 First() 等价，兼顾命名空间式的调用习惯
ObsDim.First = First  # type: ignore[attr-defined]
ObsDim.Last = Last  # type: ignore[attr-defined]
ObsDim.Constant = Constant  # type: ignore[attr-defined]
ObsDim.Undefined = Undefined  # type: ignore[attr-defined]


ObsDimLike = Union[None, str, int, ObsDim, Tuple[Any, ...]]

_NAMED = {
    "first": First,
    "last": Last,
    "undefined": Undefined,
    "none": Undefined,
}


def convert_obsdim(value: ObsDimLike) -> Union[None, ObsDim, Tuple[Any, ...]]:
    """
    Normalize a user supplied observation dimension.

    ``None`` is kept as ``None`` (meaning "use the default for the data").
    Tuples are converted element-wise and stay tuples.
    """
    # None 保留为“按数据类型取默认值”，元组逐元素转换
    if value is None or isinstance(value, ObsDim):
        return value
    if isinstance(value, tuple):
        return tuple(convert_obsdim(v) for v in value)
    if isinstance(value, str):
        key = value.strip().lower()
        if key not in _NAMED:
            raise ParamValidationError(f"unknown obsdim '{value}'")
        return _NAMED[key]()
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return Constant(int(value))
    raise ParamValidationError(f"unsupported obsdim specification of type {type(value).__name__}")


def default_obsdim(data: Any) -> ObsDim:
    """Default descriptor for ``data``: configured axis for arrays, Undefined otherwise."""
    if isinstance(data, np.ndarray):
        descriptor = convert_obsdim(get_config().default_obsdim)
        return descriptor if isinstance(descriptor, ObsDim) else First()
    return Undefined()


def resolve_axis(obsdim: ObsDim, ndim: int) -> int:
    """Concrete observation axis of ``obsdim`` for data with ``ndim`` dimensions."""
    return obsdim.axis(ndim)
