"""Label-balancing resamplers."""

from .balance import (
    oversample,
    undersample,
    upsample,
    downsample,
)

__all__ = [
    "oversample",
    "undersample",
    "upsample",
    "downsample",
]
