"""CLI entry point for BasicCli."""

from __future__ import annotations

import click

from basiccli import __version__
from basiccli.cli.commands import benchmark, hello, process, version


@click.group()
@click.version_option(__version__, prog_name="basiccli")
def cli() -> None:
    """BasicCli - greeting, version, benchmark and JSON processing commands."""


cli.add_command(hello)
cli.add_command(version)
cli.add_command(benchmark)
cli.add_command(process)
