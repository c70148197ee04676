"""Snapshot rendering."""

from __future__ import annotations

from depaware.analysis.dependency_graph import DependencyGraphBuilder
from depaware.formatter.snapshot_formatter import NAME_WIDTH, SnapshotFormatter
from depaware.models import DEFAULT_GENERATOR


def render(
    builder: DependencyGraphBuilder,
    targets: tuple[str, ...] | list[str],
    preferred_why: dict[str, str] | None = None,
    generator: str = DEFAULT_GENERATOR,
) -> bytes:
    """Render the accumulated dependencies of ``builder.root``."""
    return SnapshotFormatter(targets, generator=generator).format(builder, preferred_why)


__all__ = ["NAME_WIDTH", "SnapshotFormatter", "render"]
