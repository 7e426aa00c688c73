"""Target resolution, label indexing and class balancing over generic data containers."""

from __future__ import annotations

from .core import (
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
    ParamValidationError,
    RuntimeConfig,
    TargetObservation,
    TargetStorage,
    Undefined,
    UnsupportedShapeError,
    batchview,
    configure,
    configure_logging,
    convert_obsdim,
    datasubset,
    get_config,
    get_logger,
    getobs,
    nobs,
    obsview,
)
from .targets import (
    NAN_LABEL,
    LabelValue,
    TargetIterator,
    eachtarget,
    gettarget,
    identity,
    label,
    labelfreq,
    labelmap,
    nlabel,
    resolve_target,
    targets,
)
from .resample import (
    downsample,
    oversample,
    undersample,
    upsample,
)

__version__ = "0.1.0"

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
    "ParamValidationError",
    "RuntimeConfig",
    "TargetObservation",
    "TargetStorage",
    "Undefined",
    "UnsupportedShapeError",
    "batchview",
    "configure",
    "configure_logging",
    "convert_obsdim",
    "datasubset",
    "get_config",
    "get_logger",
    "getobs",
    "nobs",
    "obsview",
    "NAN_LABEL",
    "LabelValue",
    "TargetIterator",
    "eachtarget",
    "gettarget",
    "identity",
    "label",
    "labelfreq",
    "labelmap",
    "nlabel",
    "resolve_target",
    "targets",
    "downsample",
    "oversample",
    "undersample",
    "upsample",
]
