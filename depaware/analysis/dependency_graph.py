"""Dependency graph builder: accumulates edges and dependencies across targets, explains each dependency."""

from __future__ import annotations

import logging

from depaware.analysis.graph_models import DependencyState
from depaware.loader.base import iter_packages
from depaware.models import PackageGraph
from depaware.paths import (
    CGO_PACKAGE,
    UNSAFE_PACKAGE,
    is_internal_package,
    sort_key,
    vendorless_path,
)

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Accumulate the dependencies of one root package over several targets."""

    def __init__(self, root: str, include_internal: bool = False):
        self.root = vendorless_path(root)
        self.include_internal = include_internal
        self.state = DependencyState()

    def accumulate(self, graph: PackageGraph) -> None:
        """Feed one target's loaded graph into the builder."""
        visited = 0
        for pkg in iter_packages(graph):
            visited += 1
            for imp in pkg.imports:
                self.add_edge(pkg.path, imp)
            if pkg.path == graph.root:
                continue
            self.add_dep(pkg.path, graph.target)
        logger.debug("%s: visited %d packages for %s", graph.root, visited, graph.target)

    def add_edge(self, importer: str, imported: str) -> None:
        importer = vendorless_path(importer)
        imported = vendorless_path(imported)
        importers = self.state.dep_to.setdefault(imported, [])
        if importer not in importers:
            importers.append(importer)
        if imported == UNSAFE_PACKAGE:
            self.state.uses_unsafe.add(importer)
        if imported == CGO_PACKAGE:
            self.state.uses_cgo.add(importer)

    def add_dep(self, pkg: str, target: str) -> None:
        pkg = vendorless_path(pkg)
        if not self.include_internal and is_internal_package(pkg):
            return
        if pkg not in self.state.deps:
            self.state.deps.append(pkg)
        self.state.dep_on_target.add((pkg, target))

    def sorted_deps(self) -> list[str]:
        return sorted(self.state.deps, key=sort_key)

    def target_markers(self, pkg: str, targets: tuple[str, ...] | list[str]) -> str:
        """One uppercase letter per target ``pkg`` was seen under; blank if seen under all."""
        letters = "".join(
            t[0].upper() for t in targets
            if (pkg, t) in self.state.dep_on_target
        )
        if len(letters) == len(targets):
            return ""
        return letters

    def candidates(self, pkg: str) -> list[str]:
        """Distinct importers of ``pkg`` within the root's closure, root excluded."""
        return [f for f in self.state.dep_to.get(pkg, []) if f != self.root]

    def attribute(self, pkg: str, preferred: str = "") -> tuple[str, bool]:
        """Pick the importer that explains ``pkg``. Returns ``(chosen, has_more)``."""
        from_ = self.candidates(pkg)
        if not from_:
            return "", False
        if preferred and preferred in from_:
            chosen = preferred
        else:
            chosen = min(from_)
        return chosen, len(from_) > 1

    def why(self, pkg: str, preferred_why: dict[str, str] | None = None) -> str:
        chosen, has_more = self.attribute(pkg, (preferred_why or {}).get(pkg, ""))
        if not chosen:
            return ""
        return "from " + chosen + ("+" if has_more else "")
