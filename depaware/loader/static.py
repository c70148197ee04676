"""In-memory loader over pre-built import maps."""

from __future__ import annotations

from pathlib import Path

from depaware.errors import LoaderError
from depaware.loader.base import BaseLoader
from depaware.models import LoadedPackage, PackageGraph


class StaticLoader(BaseLoader):
    """Serve graphs from ``{target: {package: [imports]}}``.

    ``dirs`` maps a package path to its source directory; packages with a
    directory get a single placeholder Go file in it.
    """

    def __init__(
        self,
        graphs: dict[str, dict[str, list[str]]],
        dirs: dict[str, str | Path] | None = None,
    ):
        self.graphs = graphs
        self.dirs = {k: str(v) for k, v in (dirs or {}).items()}

    def resolve(self, patterns: list[str]) -> list[str]:
        known = {path for imports in self.graphs.values() for path in imports}
        for pattern in patterns:
            if pattern not in known:
                raise LoaderError(f"cannot find package {pattern!r}")
        return list(patterns)

    def load(self, root: str, target: str) -> PackageGraph:
        imports = self.graphs.get(target)
        if imports is None:
            raise LoaderError(f"no graph for target {target!r}", target=target)
        if root not in imports:
            raise LoaderError(f"cannot find package {root!r}", target=target)

        graph = PackageGraph(root=root, target=target)
        for path, deps in imports.items():
            directory = self.dirs.get(path, "")
            go_files = [str(Path(directory) / (path.rsplit("/", 1)[-1] + ".go"))] if directory else []
            graph.packages[path] = LoadedPackage(
                path=path,
                imports=list(deps),
                go_files=go_files,
                dir=directory,
            )
        return graph
