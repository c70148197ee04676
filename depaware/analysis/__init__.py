"""Graph accumulation and attribution."""

from __future__ import annotations

from depaware.analysis.dependency_graph import DependencyGraphBuilder
from depaware.analysis.preferred_why import parse_preferred_why

__all__ = ["DependencyGraphBuilder", "parse_preferred_why"]
