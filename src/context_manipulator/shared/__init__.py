"""Shared utilities for the context manipulator.

This module provides the error hierarchy, configuration objects and
correlation-aware logging used across all layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ManipulationConfig,
)
from .errors import (
    InvalidArgumentError,
    ManipulationError,
    SinkWriteError,
    UnknownContextError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ManipulationConfig",
    "InvalidArgumentError",
    "ManipulationError",
    "SinkWriteError",
    "UnknownContextError",
    "CorrelationLogger",
    "get_logger",
]
