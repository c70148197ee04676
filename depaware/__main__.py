from depaware.cli import cli

cli()
