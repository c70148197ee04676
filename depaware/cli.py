"""Click CLI: print, check, or update the dependency snapshot of Go packages."""

from __future__ import annotations

import logging

import click

from depaware import __version__
from depaware.errors import ConfigError, DepawareError, LoaderError
from depaware.loader import BaseLoader, get_loader
from depaware.models import DEFAULT_FILE_NAME, DEFAULT_TARGETS, AuditConfig
from depaware.pipeline import run


@click.command()
@click.version_option(version=__version__)
@click.argument("packages", nargs=-1, required=True)
@click.option("--check", is_flag=True, help="Check whether dependencies match the snapshot file")
@click.option("--update", is_flag=True, help="Update the snapshot file")
@click.option("--file", "file_name", default=DEFAULT_FILE_NAME, show_default=True, help="Name of the snapshot file")
@click.option("--goos", default=",".join(DEFAULT_TARGETS), show_default=True, help="Comma-separated list of GOOS values")
@click.option("--tags", default="", help="Comma-separated list of build tags to use when loading packages")
@click.option("--internal", "include_internal", is_flag=True, help="Include internal packages in the output")
@click.option("--color/--no-color", default=False, help="Colorize the drift diff")
@click.option("--verbose", "-v", count=True, help="Increase log verbosity")
@click.pass_context
def cli(
    ctx: click.Context,
    packages: tuple[str, ...],
    check: bool,
    update: bool,
    file_name: str,
    goos: str,
    tags: str,
    include_internal: bool,
    color: bool,
    verbose: int,
):
    """depaware: audit the dependencies of Go PACKAGES."""
    _configure_logging(verbose)

    try:
        config = AuditConfig.from_options(
            check=check,
            update=update,
            file_name=file_name,
            goos=goos,
            tags=tags,
            include_internal=include_internal,
            color=color,
        )
    except ConfigError as e:
        raise click.UsageError(str(e))

    for pkg in packages:
        if pkg.startswith("-"):
            raise click.UsageError(f"bogus package argument {pkg!r}; flags go before packages")

    loader: BaseLoader = (ctx.obj or {}).get("loader") or get_loader("go", tags=config.tags)

    try:
        roots = loader.resolve(list(packages))
    except LoaderError as e:
        raise click.ClickException(f"could not resolve packages: {e}")

    try:
        status = run(roots, loader, config)
    except DepawareError as e:
        raise click.ClickException(str(e))

    ctx.exit(status)


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    cli()
