"""Shared utilities for transitive-frontier."""

from .exceptions import (
    AmbiguousTargetError,
    ConfigurationError,
    FrontierError,
    GraphLoadError,
    PackageNotFoundError,
    UnsupportedFormatError,
)

__all__ = [
    "AmbiguousTargetError",
    "ConfigurationError",
    "FrontierError",
    "GraphLoadError",
    "PackageNotFoundError",
    "UnsupportedFormatError",
]
