"""
Lazy partition views over data containers.

Responsibilities
  - ObsView: present a container as a sequence of single-observation subsets.
  - BatchView: present a container as a sequence of fixed-size batch subsets.

Usage Context
  - Consumed by the target resolvers, which map over windows instead of
    observations when handed a view.

Limitations
  - Trailing observations that do not fill a complete batch are dropped.
"""
# 说明：惰性划分视图，窗口本身是 DataSubset，不复制底层数据。
# 职责：
# - ObsView：每个窗口是单观测子集
# - BatchView：每个窗口是连续 range 索引的批次子集；size / count 二选一或都给出
# 约定：
# - 两者都是 collections.abc.Sequence，同时实现 nobs/getobs 访问协议（观测单位为窗口）

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional, Tuple

from ..utils.param_validation import ensure, ensure_type
from .access import nobs, normalize_index, resolve_obsdim
from .obsdim import ObsDimLike
from .subset import DataSubset

DEFAULT_MAX_BATCH_SIZE = 20


class _WindowView(Sequence):
    """Shared behavior of the partition views."""

    def __init__(self, data: Any, obsdim: ObsDimLike = None):
        self.data = data
        self.obsdim = resolve_obsdim(data, obsdim)
        self._nobs = nobs(data, self.obsdim)

    def _window(self, i: int) -> DataSubset:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __getitem__(self, i: Any) -> Any:
        if isinstance(i, slice):
            return [self[j] for j in range(*i.indices(len(self)))]
        size = len(self)
        if i < 0:
            i += size
        if not 0 <= i < size:
            raise IndexError(f"window index out of range for {size} windows")
        return self._window(i)

    # 访问协议：以窗口为观测单位
    def nobs(self, obsdim: Any = None) -> int:
        return len(self)

    def getobs(self, idx: Any = None, obsdim: Any = None) -> Any:
        idx = normalize_index(idx)
        if idx is None:
            return [window.getobs() for window in self]
        if isinstance(idx, int):
            return self[idx].getobs()
        if isinstance(idx, slice):
            return [window.getobs() for window in self[idx]]
        return [self[i].getobs() for i in idx]


class ObsView(_WindowView):
    """Sequence of single-observation subsets of ``data``."""

    def __len__(self) -> int:
        return self._nobs

    def _window(self, i: int) -> DataSubset:
        return DataSubset.unchecked(self.data, i, self.obsdim)

    def __repr__(self) -> str:
        return f"ObsView(data={type(self.data).__name__}, nobs={self._nobs})"


def _batch_settings(count_obs: int, size: Optional[int], count: Optional[int]) -> Tuple[int, int]:
    # 解析批大小与批数量：都未给出时使用 min(20, nobs)，只给出其一时推导另一个
    ensure(count_obs > 0, "BatchView requires at least one observation")
    if size is not None:
        ensure_type(size, (int,), label="size")
        ensure(0 < size <= count_obs, f"batch size {size} must be in 1..{count_obs}")
    if count is not None:
        ensure_type(count, (int,), label="count")
        ensure(0 < count <= count_obs, f"batch count {count} must be in 1..{count_obs}")
    if size is None and count is None:
        size = min(DEFAULT_MAX_BATCH_SIZE, count_obs)
        count = count_obs // size
    elif size is None:
        size = count_obs // count
    elif count is None:
        count = count_obs // size
    else:
        ensure(size * count <= count_obs, f"{count} batches of size {size} exceed {count_obs} observations")
    return size, count


class BatchView(_WindowView):
    """Sequence of equally sized batch subsets of ``data``."""

    def __init__(
        self,
        data: Any,
        size: Optional[int] = None,
        count: Optional[int] = None,
        obsdim: ObsDimLike = None,
    ):
        super().__init__(data, obsdim)
        self.batch_size, self.batch_count = _batch_settings(self._nobs, size, count)

    def __len__(self) -> int:
        return self.batch_count

    def _window(self, i: int) -> DataSubset:
        start = i * self.batch_size
        return DataSubset.unchecked(self.data, range(start, start + self.batch_size), self.obsdim)

    def __repr__(self) -> str:
        return f"BatchView(data={type(self.data).__name__}, size={self.batch_size}, count={self.batch_count})"


def obsview(data: Any, obsdim: ObsDimLike = None) -> ObsView:
    return ObsView(data, obsdim)


def batchview(data: Any, size: Optional[int] = None, count: Optional[int] = None, obsdim: ObsDimLike = None) -> BatchView:
    return BatchView(data, size=size, count=count, obsdim=obsdim)
