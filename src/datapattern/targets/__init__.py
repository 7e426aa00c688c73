"""Target resolution, lazy target iteration and label indexing."""

from .resolve import (
    identity,
    gettarget,
    resolve_target,
    targets,
)
from .iterate import (
    TargetIterator,
    eachtarget,
)
from .labelmap import (
    NAN_LABEL,
    LabelValue,
    labelmap,
    labelfreq,
    label,
    nlabel,
)

__all__ = [
    "identity",
    "gettarget",
    "resolve_target",
    "targets",
    "TargetIterator",
    "eachtarget",
    "NAN_LABEL",
    "LabelValue",
    "labelmap",
    "labelfreq",
    "label",
    "nlabel",
]
