"""WellQuant CLI — top-level Click group."""

from __future__ import annotations

import click


@click.group()
@click.version_option(package_name="wellquant")
@click.option("--verbose", "-v", is_flag=True, help="Show full tracebacks on errors.")
def cli(verbose: bool) -> None:
    """WellQuant — calibrated well-colour density analysis."""
    from wellquant.cli import utils

    utils.verbose = verbose


def _register_commands() -> None:
    """Register all subcommands — imports deferred to avoid loading heavy deps at startup."""
    from wellquant.cli.analyze import analyze

    cli.add_command(analyze)


_register_commands()
