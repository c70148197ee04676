"""Per-root pipeline: load targets -> accumulate -> attribute -> render -> print/check/update."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

import click

from depaware.analysis import DependencyGraphBuilder, parse_preferred_why
from depaware.drift import apply_mode
from depaware.errors import ResolutionError
from depaware.formatter import render
from depaware.loader import BaseLoader
from depaware.models import AuditConfig, AuditResult, Mode

logger = logging.getLogger(__name__)


def process(root: str, loader: BaseLoader, config: AuditConfig) -> AuditResult:
    """Compute the rendered snapshot for one root package.

    Any ``LoaderError`` aborts the root; nothing is rendered.
    """
    builder = DependencyGraphBuilder(root, include_internal=config.include_internal)
    package_dir: Path | None = None

    for target in config.targets:
        graph = loader.load(root, target)
        root_pkg = graph.packages.get(root)
        if package_dir is None and root_pkg is not None and root_pkg.go_files:
            package_dir = Path(root_pkg.go_files[0]).parent
        builder.accumulate(graph)

    if package_dir is None:
        raise ResolutionError(f"no .go files found for package {root}")

    snapshot_path = package_dir / config.file_name
    try:
        previous = snapshot_path.read_bytes()
    except OSError as e:
        logger.debug("no previous snapshot at %s: %s", snapshot_path, e)
        previous = None

    preferred_why = parse_preferred_why(previous) if previous is not None else {}
    rendered = render(
        builder,
        config.targets,
        preferred_why=preferred_why,
        generator=config.generator,
    )
    logger.info("%s: %d dependencies", root, len(builder.state.deps))

    return AuditResult(
        root=root,
        package_dir=package_dir,
        rendered=rendered,
        previous=previous,
        dependency_count=len(builder.state.deps),
    )


def run(
    roots: list[str],
    loader: BaseLoader,
    config: AuditConfig,
    stdout: IO | None = None,
    stderr: IO | None = None,
) -> int:
    """Audit each root in turn and return the exit status.

    Roots share no state. In check mode the run stops at the first drift.
    """
    for i, root in enumerate(roots):
        result = process(root, loader, config)
        report = apply_mode(result, config, stdout=stdout, stderr=stderr)
        if report.drifted:
            return 1
        # Separate consecutive printed snapshots.
        if config.mode is Mode.PRINT and i != len(roots) - 1:
            click.echo(file=stdout)
    return 0
