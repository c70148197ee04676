"""Abstract package loader."""

from __future__ import annotations

import abc
from typing import Iterator

from depaware.models import LoadedPackage, PackageGraph


class BaseLoader(abc.ABC):
    """Resolves a root package into its dependency graph for one target."""

    @abc.abstractmethod
    def resolve(self, patterns: list[str]) -> list[str]:
        """Resolve command-line patterns (e.g. ``./...``) into import paths."""

    @abc.abstractmethod
    def load(self, root: str, target: str) -> PackageGraph:
        """Load the transitive closure of ``root`` under ``target``.

        Raises ``LoaderError`` when the graph can't be loaded.
        """


def iter_packages(graph: PackageGraph) -> Iterator[LoadedPackage]:
    """Yield each package reachable from the root once, dependencies first.

    Imports are followed in sorted order so the traversal does not depend on
    the order the loader reported them in. Imports with no loaded package are
    not followed.
    """
    seen: set[str] = set()

    def visit(path: str) -> Iterator[LoadedPackage]:
        pkg = graph.packages.get(path)
        if pkg is None or path in seen:
            return
        seen.add(path)
        for imp in sorted(pkg.imports):
            yield from visit(imp)
        yield pkg

    yield from visit(graph.root)
