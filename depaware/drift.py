"""Print, check, or update a rendered snapshot."""

from __future__ import annotations

import difflib
import logging
from typing import IO

import click

from depaware.errors import MissingBaselineError
from depaware.models import AuditConfig, AuditResult, DriftReport, Mode

logger = logging.getLogger(__name__)

_DIFF_COLORS = {"+": "green", "-": "red", "@": "cyan"}


def apply_mode(
    result: AuditResult,
    config: AuditConfig,
    stdout: IO | None = None,
    stderr: IO | None = None,
) -> DriftReport:
    """Handle one rendered snapshot according to ``config.mode``."""
    path = result.snapshot_path(config.file_name)
    report = DriftReport(root=result.root, snapshot_path=path, mode=config.mode)

    if config.mode is Mode.CHECK:
        if result.previous is None:
            raise MissingBaselineError(f"cannot read {path}")
        if result.previous == result.rendered:
            return report
        report.drifted = True
        report.diff = unified_diff(result.previous, result.rendered)
        click.echo(f"The list of dependencies in {path} is out of date.\n", file=stderr, err=True)
        for line in report.diff.splitlines():
            if config.color:
                line = click.style(line, fg=_DIFF_COLORS.get(line[:1]))
            click.echo(line, file=stderr, err=True, color=config.color)
        return report

    if config.mode is Mode.UPDATE:
        path.write_bytes(result.rendered)
        logger.info("wrote %s", path)
        return report

    click.echo(result.rendered.decode("utf-8"), file=stdout, nl=False)
    return report


def unified_diff(before: bytes, after: bytes) -> str:
    """Line diff between two snapshots, labelled ``before`` and ``after``."""
    a = before.decode("utf-8", errors="replace").splitlines(keepends=True)
    b = after.decode("utf-8", errors="replace").splitlines(keepends=True)
    lines = difflib.unified_diff(a, b, fromfile="before", tofile="after")
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)
