"""
Error hierarchy for observation access and target resolution.

Responsibilities
  - Define the shared exception types raised by the access, target and resampling layers.
  - Keep shape, alignment and refusal failures distinguishable for callers.

Usage Context
  - Raised at the point of detection and propagated unchanged through all layers.

Limitations
  - Exceptions only carry message text and optional context attributes.
"""
# 说明：观测访问与目标解析层的异常体系。
# 职责：
# - DataPatternError：本库统一基类异常
# - UnsupportedShapeError：数据/观测不匹配任何分派规则（同时是 TypeError）
# - DimensionMismatchError：元组容器观测数不一致、维度描述符元数不匹配或轴越界（同时是 ValueError）
# - ObsDimTriggeredError：容器能力显式拒绝单索引访问的信号，原样向上传播

from __future__ import annotations

from typing import Optional, Sequence


class DataPatternError(Exception):
    """
    Base error type for observation access failures.

    - Behavior
      - Serves as the common ancestor for every exception raised by this library.

    - Usage Notes
      - Catch to handle library errors without mixing with unrelated failures.
    """


class UnsupportedShapeError(DataPatternError, TypeError):
    """
    Raised when a value matches none of the dispatch rules.

    - Configuration
      - value_type: Name of the offending type, when known.

    - Behavior
      - Signals a static mismatch between the value and the access protocol;
        retrying with the same arguments cannot succeed.
    """

    def __init__(self, message: str, *, value_type: Optional[str] = None) -> None:
        super().__init__(message)
        self.value_type = value_type


class DimensionMismatchError(DataPatternError, ValueError):
    """
    Raised when aligned containers disagree on their observation count.

    - Configuration
      - counts: Observation counts reported by the tuple elements, when known.

    - Behavior
      - Detected eagerly, before any target is computed.

    - Usage Notes
      - Also raised for a dimension-descriptor tuple of the wrong arity and
        for observation axes outside the data's dimensions.
    """

    def __init__(self, message: str, *, counts: Optional[Sequence[int]] = None) -> None:
        super().__init__(message)
        self.counts = tuple(counts) if counts is not None else None


class ObsDimTriggeredError(DataPatternError, RuntimeError):
    """
    Raised by container capabilities that refuse single-index access.

    - Behavior
      - Propagated without retry; indicates the bulk target accessor of the
        container should be used instead.
    """
