"""Shared utility helpers used across the core library."""

from .random import (
    create_rng,
    sample_without_replacement,
    shuffle_indices,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ParamValidationError,
)

__all__ = [
    "create_rng",
    "sample_without_replacement",
    "shuffle_indices",
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ParamValidationError",
]
