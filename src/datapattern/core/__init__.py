"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    BatchView,
    Constant,
    DataContainer,
    DataPatternError,
    DataSubset,
    DimensionMismatchError,
    First,
    Last,
    ObsDim,
    ObsDimTriggeredError,
    ObsView,
    TargetObservation,
    TargetStorage,
    Undefined,
    UnsupportedShapeError,
    batchview,
    convert_obsdim,
    datasubset,
    getobs,
    nobs,
    obsview,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    configure_logging,
    get_config,
    get_logger,
)

__all__: list[str] = [
    "BatchView",
    "Constant",
    "DataContainer",
    "DataPatternError",
    "DataSubset",
    "DimensionMismatchError",
    "First",
    "Last",
    "ObsDim",
    "ObsDimTriggeredError",
    "ObsView",
    "TargetObservation",
    "TargetStorage",
    "Undefined",
    "UnsupportedShapeError",
    "batchview",
    "convert_obsdim",
    "datasubset",
    "getobs",
    "nobs",
    "obsview",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
]
