"""Exception taxonomy.

Drift is not an exception: it is reported through ``DriftReport``.
"""

from __future__ import annotations


class DepawareError(Exception):
    """Base class for fatal depaware errors."""


class ConfigError(DepawareError):
    """Conflicting or malformed options, raised before any processing."""


class ResolutionError(DepawareError):
    """A root package or one of its target configurations could not be resolved."""


class LoaderError(ResolutionError):
    """The package loader failed for one target configuration."""

    def __init__(self, message: str, target: str | None = None):
        self.target = target
        if target:
            message = f"for GOOS={target}: {message}"
        super().__init__(message)


class MissingBaselineError(DepawareError):
    """Check mode was asked to compare against an unreadable snapshot."""
