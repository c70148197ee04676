"""Package loader backed by ``go list -deps -json``."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from pathlib import Path

from depaware.errors import LoaderError
from depaware.loader.base import BaseLoader
from depaware.models import LoadedPackage, PackageGraph

logger = logging.getLogger(__name__)


class GoListLoader(BaseLoader):
    """Load Go package graphs by shelling out to the go tool.

    Args:
        tags: Build tags passed through as ``-tags``.
        goarch: ``GOARCH`` used for every target.
        cgo: Whether to build with ``CGO_ENABLED=1``.
        go: Name or path of the go binary.
    """

    def __init__(
        self,
        tags: tuple[str, ...] | list[str] = (),
        goarch: str = "amd64",
        cgo: bool = True,
        go: str = "go",
    ):
        self.tags = tuple(tags)
        self.goarch = goarch
        self.cgo = cgo
        self.go = go

    def resolve(self, patterns: list[str]) -> list[str]:
        out = self._run(["list", *patterns])
        return [line.strip() for line in out.splitlines() if line.strip()]

    def load(self, root: str, target: str) -> PackageGraph:
        args = ["list", "-deps", "-json"]
        if self.tags:
            args += ["-tags", ",".join(self.tags)]
        args.append(root)

        logger.info("loading %s for GOOS=%s", root, target)
        out = self._run(args, env=self._env(target), target=target)

        graph = PackageGraph(root=root, target=target)
        for obj in decode_json_stream(out, target=target):
            pkg = _to_package(obj)
            graph.packages[pkg.path] = pkg
        if root not in graph.packages:
            raise LoaderError(f"package {root} not found in go list output", target=target)
        return graph

    def _env(self, target: str) -> dict[str, str]:
        env = dict(os.environ)
        env["GOOS"] = target
        env["GOARCH"] = self.goarch
        env["CGO_ENABLED"] = "1" if self.cgo else "0"
        return env

    def _run(self, args: list[str], env: dict[str, str] | None = None, target: str | None = None) -> str:
        cmd = [self.go, *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, env=env, capture_output=True, text=True, check=False)
        except OSError as e:
            raise LoaderError(f"could not run {self.go}: {e}", target=target) from e
        if proc.returncode != 0:
            detail = proc.stderr.strip() or f"exit status {proc.returncode}"
            raise LoaderError(detail, target=target)
        return proc.stdout


def decode_json_stream(text: str, target: str | None = None) -> list[dict]:
    """Decode the concatenated JSON objects ``go list -json`` prints."""
    decoder = json.JSONDecoder()
    objects: list[dict] = []
    pos = 0
    while True:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            break
        try:
            obj, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            raise LoaderError(f"bad go list output: {e}", target=target) from e
        objects.append(obj)
    return objects


def _to_package(obj: dict) -> LoadedPackage:
    directory = obj.get("Dir", "")
    go_files = [
        str(Path(directory) / name) if directory else name
        for name in obj.get("GoFiles") or []
    ]
    return LoadedPackage(
        path=obj["ImportPath"],
        imports=[imp for imp in obj.get("Imports") or [] if imp != "C"],
        go_files=go_files,
        dir=directory,
    )
