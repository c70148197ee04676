"""Stable, column-aligned snapshot renderer."""

from __future__ import annotations

from depaware.analysis.dependency_graph import DependencyGraphBuilder
from depaware.models import DEFAULT_GENERATOR
from depaware.paths import is_std_package

NAME_WIDTH = 60


class SnapshotFormatter:
    """Render the accumulated graph of one root as snapshot text."""

    def __init__(self, targets: tuple[str, ...] | list[str], generator: str = DEFAULT_GENERATOR):
        self.targets = tuple(targets)
        self.generator = generator

    def format(
        self,
        builder: DependencyGraphBuilder,
        preferred_why: dict[str, str] | None = None,
    ) -> bytes:
        lines = [self.header(builder.root), ""]
        for pkg in builder.sorted_deps():
            lines.append(self.format_line(builder, pkg, preferred_why))
        return ("\n".join(lines) + "\n").encode("utf-8")

    def header(self, root: str) -> str:
        return f"{root} dependencies: (generated by {self.generator})"

    def format_line(
        self,
        builder: DependencyGraphBuilder,
        pkg: str,
        preferred_why: dict[str, str] | None = None,
    ) -> str:
        state = builder.state
        # Boundary flags only mean something for third-party code.
        third_party = not is_std_package(pkg)
        unsafe_icon = "U" if third_party and pkg in state.uses_unsafe else " "
        cgo_icon = "C" if third_party and pkg in state.uses_cgo else " "
        markers = builder.target_markers(pkg, self.targets)
        why = builder.why(pkg, preferred_why)
        return f" {markers:>3} {unsafe_icon}{cgo_icon} {pkg:<{NAME_WIDTH}} {why}"
