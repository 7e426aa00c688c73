"""Core data abstractions: dimension descriptors, access protocol and views."""

from .exceptions import (
    DataPatternError,
    UnsupportedShapeError,
    DimensionMismatchError,
    ObsDimTriggeredError,
)
from .obsdim import (
    ObsDim,
    First,
    Last,
    Constant,
    Undefined,
    convert_obsdim,
    default_obsdim,
)
from .access import (
    DataContainer,
    TargetStorage,
    TargetObservation,
    nobs,
    getobs,
    expand_obsdim,
)
from .subset import (
    DataSubset,
    datasubset,
)
from .views import (
    ObsView,
    BatchView,
    obsview,
    batchview,
)

__all__ = [
    "DataPatternError",
    "UnsupportedShapeError",
    "DimensionMismatchError",
    "ObsDimTriggeredError",
    "ObsDim",
    "First",
    "Last",
    "Constant",
    "Undefined",
    "convert_obsdim",
    "default_obsdim",
    "DataContainer",
    "TargetStorage",
    "TargetObservation",
    "nobs",
    "getobs",
    "expand_obsdim",
    "DataSubset",
    "datasubset",
    "ObsView",
    "BatchView",
    "obsview",
    "batchview",
]
