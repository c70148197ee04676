"""Data models for the depaware pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from depaware.errors import ConfigError

DEFAULT_FILE_NAME = "depaware.txt"
DEFAULT_TARGETS = ("linux", "darwin", "windows")
DEFAULT_GENERATOR = "github.com/tailscale/depaware"


class Mode(enum.Enum):
    PRINT = "print"
    CHECK = "check"
    UPDATE = "update"


@dataclass(frozen=True)
class AuditConfig:
    """Run configuration, built once by the CLI and never mutated."""
    mode: Mode = Mode.PRINT
    file_name: str = DEFAULT_FILE_NAME
    targets: tuple[str, ...] = DEFAULT_TARGETS
    tags: tuple[str, ...] = ()
    include_internal: bool = False
    generator: str = DEFAULT_GENERATOR
    color: bool = False

    @classmethod
    def from_options(
        cls,
        check: bool = False,
        update: bool = False,
        file_name: str = DEFAULT_FILE_NAME,
        goos: str = ",".join(DEFAULT_TARGETS),
        tags: str = "",
        include_internal: bool = False,
        color: bool = False,
    ) -> AuditConfig:
        """Validate raw option values and build a config."""
        if check and update:
            raise ConfigError("--check and --update can't be used together")

        targets = tuple(goos.split(","))
        if not goos or any(not t.strip() for t in targets):
            raise ConfigError(f"invalid target list {goos!r}")
        targets = tuple(t.strip() for t in targets)

        if not file_name:
            raise ConfigError("snapshot file name must not be empty")

        mode = Mode.PRINT
        if check:
            mode = Mode.CHECK
        elif update:
            mode = Mode.UPDATE

        return cls(
            mode=mode,
            file_name=file_name,
            targets=targets,
            tags=tuple(t for t in tags.split(",") if t),
            include_internal=include_internal,
            color=color,
        )


@dataclass
class LoadedPackage:
    """One node of a loaded package graph."""
    path: str
    imports: list[str] = field(default_factory=list)
    go_files: list[str] = field(default_factory=list)
    dir: str = ""


@dataclass
class PackageGraph:
    """Loader result for one (root, target) pair: the root's transitive closure."""
    root: str
    target: str
    packages: dict[str, LoadedPackage] = field(default_factory=dict)


@dataclass
class AuditResult:
    """Rendered snapshot for one root package."""
    root: str
    package_dir: Path
    rendered: bytes
    previous: bytes | None = None  # existing snapshot, if readable
    dependency_count: int = 0

    def snapshot_path(self, file_name: str) -> Path:
        return self.package_dir / file_name


@dataclass
class DriftReport:
    """Outcome of print/check/update for one root."""
    root: str
    snapshot_path: Path
    mode: Mode
    drifted: bool = False
    diff: str = ""
