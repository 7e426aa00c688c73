"""
Observation access protocol shared by every container kind.

Responsibilities
  - Answer "how many observations does this contain?" (``nobs``).
  - Materialize a single observation or a sub-container (``getobs``).
  - Declare the capability protocols user-defined storage types implement.
  - Pair tuple containers with their per-element dimension descriptors and
    enforce the alignment invariant.

Usage Context
  - Used by subset views, partition views, the target resolvers and the resampling layer.
  - A user type becomes a data container by implementing ``nobs`` / ``getobs``;
    no registration or inheritance is required.

Limitations
  - ``str`` and ``bytes`` are never treated as containers of observations.
  - Python tuples always denote a group of aligned containers, never a
    sequence of observations.
"""
# 说明：观测访问协议（nobs / getobs）的统一分派入口。
# 职责：
# - DataContainer / TargetStorage / TargetObservation：以 Protocol 描述容器与目标访问能力（鸭子类型，无需继承）
# - nobs：按显式优先级（元组 -> ndarray -> 用户容器 -> 序列）计算观测数量
# - getobs：按索引（None / int / slice / range / 整数序列）取出单个观测或同类子容器
# - expand_obsdim：为元组容器的每个元素分配维度描述符，并检查描述符元组的元数
# 约定：
# - 元组容器的所有元素必须报告相同的观测数，否则抛出 DimensionMismatchError
# - 不匹配任何分派规则的值统一抛出 UnsupportedShapeError

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List, Optional, Protocol, Tuple, Union, runtime_checkable

import numpy as np

from ..utils.param_validation import ParamValidationError
from .exceptions import DimensionMismatchError, UnsupportedShapeError
from .obsdim import ObsDim, ObsDimLike, convert_obsdim, default_obsdim, resolve_axis


Index = Union[int, slice, range, List[int]]
# 规范化后的索引类型：单个整数、切片、range 或整数列表


@runtime_checkable
class DataContainer(Protocol):
    """Capability of user storage types: observation count and accessor."""

    def nobs(self, obsdim: Optional[ObsDim] = None) -> int:
        ...

    def getobs(self, idx: Any, obsdim: Optional[ObsDim] = None) -> Any:
        ...


@runtime_checkable
class TargetStorage(Protocol):
    """
    Optional capability: native target access for user storage types.

    ``idx=None`` requests all targets, an ``int`` a single target and a
    range/list the targets of that batch.
    """

    def gettargets(self, idx: Any = None, obsdim: Optional[ObsDim] = None) -> Any:
        ...


@runtime_checkable
class TargetObservation(Protocol):
    """Optional capability: an observation type that knows its own target."""

    def gettarget(self, fn: Any = None) -> Any:
        ...


def is_sequence_container(data: Any) -> bool:
    # 非字符串序列（list、range 等）视为“观测序列”；元组单独作为对齐容器组处理
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray, tuple))


def is_user_container(data: Any) -> bool:
    # 用户自定义容器：实现了 nobs/getobs 能力，且不是内置的数组/序列/元组
    return (
        isinstance(data, DataContainer)
        and not isinstance(data, (tuple, np.ndarray))
    )


def normalize_index(idx: Any) -> Optional[Index]:
    """Normalize an observation index into ``None``, ``int``, ``slice``, ``range`` or a list of ints."""
    # 统一索引表示：布尔掩码转换为位置索引，numpy 整数转换为 Python int
    if idx is None or isinstance(idx, (slice, range)):
        return idx
    if isinstance(idx, bool):
        raise ParamValidationError("boolean scalars are not valid observation indices")
    if isinstance(idx, (int, np.integer)):
        return int(idx)
    if isinstance(idx, np.ndarray):
        if idx.dtype == np.bool_:
            return [int(i) for i in np.flatnonzero(idx)]
        if idx.ndim != 1 or not np.issubdtype(idx.dtype, np.integer):
            raise ParamValidationError("array indices must be one-dimensional integer or boolean arrays")
        return [int(i) for i in idx]
    if isinstance(idx, Sequence) and not isinstance(idx, (str, bytes, bytearray)):
        out: List[int] = []
        for i in idx:
            if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
                raise ParamValidationError("observation indices must be integers")
            out.append(int(i))
        return out
    raise ParamValidationError(f"unsupported observation index of type {type(idx).__name__}")


def expand_obsdim(data: Tuple[Any, ...], obsdim: Any) -> Tuple[Any, ...]:
    """
    Pair every element of a tuple container with its dimension descriptor.

    A single descriptor applies to every element; a tuple of descriptors is
    positional and must match the tuple's arity. Non-tuple elements receive a
    concrete descriptor (their default when none is given); nested tuple
    elements keep the raw specification for their own expansion.
    """
    # 单个描述符广播到所有元素；描述符元组按位置对应，元数不一致时报 DimensionMismatchError
    obsdim = convert_obsdim(obsdim)
    if isinstance(obsdim, tuple):
        if len(obsdim) != len(data):
            raise DimensionMismatchError(
                f"number of obsdims ({len(obsdim)}) does not match "
                f"the number of data containers ({len(data)})"
            )
        dims = obsdim
    else:
        dims = (obsdim,) * len(data)
    return tuple(
        od if isinstance(element, tuple) else (od if od is not None else default_obsdim(element))
        for element, od in zip(data, dims)
    )


def resolve_obsdim(data: Any, obsdim: Any) -> Any:
    """Concrete descriptor for ``data``: expanded tuple for tuple containers, an ObsDim otherwise."""
    obsdim = convert_obsdim(obsdim)
    if isinstance(data, tuple):
        return expand_obsdim(data, obsdim)
    if isinstance(obsdim, tuple):
        raise DimensionMismatchError(
            f"a tuple of {len(obsdim)} obsdims requires a tuple of data containers, "
            f"got {type(data).__name__}"
        )
    return obsdim if obsdim is not None else default_obsdim(data)


def _unsupported(data: Any) -> UnsupportedShapeError:
    name = type(data).__name__
    return UnsupportedShapeError(
        f"type {name} does not implement the observation access protocol (nobs/getobs)",
        value_type=name,
    )


def _array_axis(data: np.ndarray, obsdim: ObsDim) -> int:
    # 0 维数组不含观测轴，不能作为容器
    if data.ndim == 0:
        raise _unsupported(data)
    return resolve_axis(obsdim, data.ndim)


def nobs(data: Any, obsdim: ObsDimLike = None) -> int:
    """
    Number of observations in ``data`` along the observation dimension.

    Args:
        data: Any supported container (ndarray, sequence, tuple of aligned
            containers, subset/partition view, or user ``DataContainer``).
        obsdim: Dimension descriptor or one of its convenience spellings.

    Raises:
        DimensionMismatchError: tuple elements disagree on their count.
        UnsupportedShapeError: ``data`` is not a container.
    """
    obsdim = resolve_obsdim(data, obsdim)
    if isinstance(data, tuple):
        if not data:
            raise UnsupportedShapeError("an empty tuple is not a data container", value_type="tuple")
        counts = [nobs(element, od) for element, od in zip(data, obsdim)]
        if any(count != counts[0] for count in counts):
            raise DimensionMismatchError(
                f"all data containers must have the same number of observations, got {counts}",
                counts=counts,
            )
        return counts[0]
    if isinstance(data, np.ndarray):
        return int(data.shape[_array_axis(data, obsdim)])
    if isinstance(data, DataContainer):
        return int(data.nobs(obsdim=obsdim))
    if is_sequence_container(data):
        resolve_axis(obsdim, 1)  # 一维序列只接受第 0 / -1 轴
        return len(data)
    raise _unsupported(data)


def _getobs_array(data: np.ndarray, idx: Optional[Index], obsdim: ObsDim) -> Any:
    axis = _array_axis(data, obsdim)
    if idx is None:
        return data
    lead = (slice(None),) * axis
    if isinstance(idx, (int, slice)):
        # 整数与切片走基本索引，返回视图而非副本
        return data[lead + (idx,)]
    return np.take(data, np.asarray(list(idx), dtype=np.intp), axis=axis)


def _getobs_sequence(data: Sequence, idx: Optional[Index], obsdim: ObsDim) -> Any:
    resolve_axis(obsdim, 1)
    if idx is None:
        return data
    if isinstance(idx, (int, slice)):
        return data[idx]
    return [data[i] for i in idx]


def getobs(data: Any, idx: Any = None, obsdim: ObsDimLike = None) -> Any:
    """
    Materialize observations of ``data``.

    ``idx=None`` returns every observation, an ``int`` one observation and a
    slice/range/sequence of ints a sub-container of the same kind (ndarray ->
    ndarray, sequence -> list, tuple -> tuple of sub-containers).
    """
    idx = normalize_index(idx)
    obsdim = resolve_obsdim(data, obsdim)
    if isinstance(data, tuple):
        nobs(data, obsdim)  # 对齐校验
        return tuple(getobs(element, idx, od) for element, od in zip(data, obsdim))
    if isinstance(data, np.ndarray):
        return _getobs_array(data, idx, obsdim)
    if isinstance(data, DataContainer):
        if idx is None:
            idx = range(data.nobs(obsdim=obsdim))
        elif isinstance(idx, slice):
            idx = range(*idx.indices(data.nobs(obsdim=obsdim)))
        return data.getobs(idx, obsdim=obsdim)
    if is_sequence_container(data):
        return _getobs_sequence(data, idx, obsdim)
    raise _unsupported(data)
