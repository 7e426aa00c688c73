"""
Target resolution for single observations and whole containers.

Responsibilities
  - gettarget: observation-level target access (user observation types plug in here).
  - resolve_target: priority-ordered dispatch for one observation
    (tuple -> subset over target storage -> subset -> observation).
  - targets: all targets of a container, preferring native bulk access and
    falling back to per-observation resolution.

Usage Context
  - Consumed by the target iterator, the label index and the resampling layer.
  - A transform of ``None`` (or ``identity``) is the zero-transform form that
    enables the bulk fast paths.

Limitations
  - The last slot of a tuple holds the target; a nested tuple in that slot
    is one opaque target value and is not decomposed again.
"""
# 说明：单观测与整体容器的目标（标签）解析。
# 职责：
# - gettarget：观测级目标访问；实现 TargetObservation 能力的用户类型在此接管
# - resolve_target：按固定优先级分派（元组取最后一个槽位 -> 目标存储上的单索引子集 -> 其他子集物化 -> 观测本身）
# - targets：整体容器的目标集合；零变换形式优先走批量快速路径，否则逐观测解析
# - iter_resolved：逐观测（或逐窗口）惰性产出目标，供 targets 与 TargetIterator 复用
# 约定：
# - fn 为 None 或 identity 视为零变换；非可调用的 fn 只能交给用户能力解释
# - 所有错误在检测点抛出并原样向上传播，不做降级处理

from __future__ import annotations

from typing import Any, Callable, Iterator, Union

from ..core.data.access import (
    TargetObservation,
    TargetStorage,
    expand_obsdim,
    is_user_container,
    nobs,
    resolve_obsdim,
)
from ..core.data.exceptions import UnsupportedShapeError
from ..core.data.obsdim import ObsDimLike, default_obsdim
from ..core.data.subset import DataSubset
from ..core.data.views import BatchView, ObsView
from ..core.utils.logging import get_logger

logger = get_logger(__name__)

Transform = Union[None, Callable[[Any], Any], Any]
# 目标变换：None / identity（零变换）、任意可调用对象，或由用户能力解释的参数（如字符串前缀）


def identity(x: Any) -> Any:
    """Return ``x`` unchanged; passing it as a transform equals passing no transform."""
    return x


def is_identity(fn: Transform) -> bool:
    return fn is None or fn is identity


def gettarget(obs: Any, fn: Transform = None) -> Any:
    """
    Target of one observation, without decomposing tuples.

    Observation types implementing ``TargetObservation`` receive ``fn``
    (``None`` for the zero-transform form); any other value is passed to
    ``fn`` directly.
    """
    if isinstance(obs, TargetObservation):
        return obs.gettarget(None if is_identity(fn) else fn)
    if is_identity(fn):
        return obs
    if not callable(fn):
        raise UnsupportedShapeError(
            f"transform of type {type(fn).__name__} is not callable and "
            f"{type(obs).__name__} does not provide gettarget()",
            value_type=type(obs).__name__,
        )
    return fn(obs)


def target_slot(subset: DataSubset) -> DataSubset:
    """Narrow a subset of a tuple container to the subset of its last (target) slot."""
    # 只下钻一层：最后一个槽位本身若是元组，则作为整体的目标容器保留
    if isinstance(subset.data, tuple):
        return subset.component(-1)
    return subset


def _resolve_terminal(obs: Any, fn: Transform) -> Any:
    if isinstance(obs, DataSubset):
        subset = target_slot(obs)
        storage = subset.data
        if subset.is_single and is_identity(fn) and isinstance(storage, TargetStorage):
            # 单索引子集 + 目标存储能力 + 零变换：直接委托给存储的原生目标访问
            return storage.gettargets(subset.indices, obsdim=subset.obsdim)
        return gettarget(subset.getobs(), fn)
    if is_user_container(obs) and not isinstance(obs, TargetObservation):
        # 整个用户容器作为一个观测：先物化再取目标
        return gettarget(DataSubset(obs).getobs(), fn)
    return gettarget(obs, fn)


def resolve_target(obs: Any, fn: Transform = None) -> Any:
    """
    Resolve the target of a single observation.

    Rules, first match wins:
        1. tuple: resolve on its last element (a nested tuple there is opaque).
        2. single-index subset over a ``TargetStorage``, zero-transform form:
           delegate to ``gettargets``.
        3. any other subset: materialize, then resolve the observation.
        4. ``TargetObservation``: ``obs.gettarget(fn)``.
        5. otherwise: ``fn(obs)``.
    """
    if isinstance(obs, tuple):
        if not obs:
            raise UnsupportedShapeError("cannot resolve the target of an empty tuple", value_type="tuple")
        return _resolve_terminal(obs[-1], fn)
    return _resolve_terminal(obs, fn)


def iter_resolved(data: Any, fn: Transform, obsdim: Any, count: int) -> Iterator[Any]:
    """Yield one resolved target per observation (or per window of a partition view)."""
    if isinstance(data, ObsView):
        for window in data:
            yield resolve_target(window, fn)
        return
    if isinstance(data, BatchView):
        for window in data:
            yield targets(window, fn)
        return
    for i in range(count):
        yield resolve_target(DataSubset.unchecked(data, i, obsdim), fn)


def _bulk_targets(data: Any, obsdim: Any) -> Any:
    # 零变换形式下的整体目标：批量能力优先，其次直接返回数组/序列本身
    if isinstance(data, tuple):
        data, obsdim = data[-1], expand_obsdim(data, obsdim)[-1]
        if isinstance(data, tuple):
            return data
        obsdim = obsdim if obsdim is not None else default_obsdim(data)
    if isinstance(data, (ObsView, BatchView)):
        return list(iter_resolved(data, None, None, len(data)))
    if isinstance(data, DataSubset):
        subset = target_slot(data)
        storage = subset.data
        if isinstance(storage, TargetStorage):
            return storage.gettargets(subset.indices, obsdim=subset.obsdim)
        if subset.is_single:
            return resolve_target(subset)
        if is_user_container(storage):
            return list(iter_resolved(subset, None, subset.obsdim, subset.nobs()))
        return subset.getobs()
    if isinstance(data, TargetStorage):
        logger.debug("using native bulk target access of %s", type(data).__name__)
        return data.gettargets(None, obsdim=obsdim)
    if is_user_container(data):
        return list(iter_resolved(data, None, obsdim, nobs(data, obsdim)))
    return data


def targets(data: Any, fn: Transform = None, obsdim: ObsDimLike = None) -> Any:
    """
    All targets of ``data`` in observation order.

    Args:
        data: Container, tuple of aligned containers (the last one holds the
            targets), subset view or partition view.
        fn: Optional transform applied to every target. ``None``/``identity``
            selects the bulk fast paths.
        obsdim: Dimension descriptor(s) or convenience spelling(s).

    Returns:
        The target container itself for arrays and sequences in the
        zero-transform form, the native bulk result for target storages, and
        a list of per-observation targets otherwise.

    Raises:
        DimensionMismatchError: misaligned tuple containers or wrong obsdim arity.
        UnsupportedShapeError: ``data`` is not a container.
        ObsDimTriggeredError: the container refused single-index access.
    """
    obsdim = resolve_obsdim(data, obsdim)
    count = nobs(data, obsdim)  # 对齐与形状校验在产生任何结果之前完成
    if isinstance(data, (ObsView, BatchView)):
        return list(iter_resolved(data, fn, obsdim, count))
    if is_identity(fn):
        return _bulk_targets(data, obsdim)
    logger.debug("resolving %d targets of %s per observation", count, type(data).__name__)
    return list(iter_resolved(data, fn, obsdim, count))
