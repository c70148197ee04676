"""Data models for the accumulated dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DependencyState:
    deps: list[str] = field(default_factory=list)  # insertion order, deduplicated
    dep_on_target: set[tuple[str, str]] = field(default_factory=set)  # {(pkg, target)}
    dep_to: dict[str, list[str]] = field(default_factory=dict)  # pkg -> [importers]
    uses_unsafe: set[str] = field(default_factory=set)
    uses_cgo: set[str] = field(default_factory=set)
