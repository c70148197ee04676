"""depaware: track the transitive dependencies of Go packages across GOOS targets."""

from __future__ import annotations

__version__ = "0.1.0"
