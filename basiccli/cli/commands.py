"""CLI command implementations for BasicCli."""

from __future__ import annotations

import json
from pathlib import Path

import click

from basiccli.core.errors import FileError, FileErrorKind
from basiccli.core.greeting import build_greeting, render_greetings
from basiccli.core.report_rendering import OutputFormat
from basiccli.core.version_info import build_version_info, render_version_box
from basiccli.models.config import Config
from basiccli.services.benchmark_runner import BenchmarkRunner
from basiccli.services.file_handler import FileHandler, dumps_json
from basiccli.utils.logger import configure_logging, get_logger
from basiccli.utils.timing import log_timing

# sysexits.h EX_NOINPUT: the input file did not exist
EXIT_FILE_NOT_FOUND = 66
EXIT_FAILURE = 1


def _get_config() -> Config:
    """Load configuration from BASICCLI_* environment variables and .env file."""
    return Config()


def _setup_logging(config: Config, *, debug: bool = False) -> None:
    configure_logging("DEBUG" if debug else config.log_level, colors=config.log_colors)


@click.command()
@click.argument("name")
@click.option("-u", "--uppercase", is_flag=True, help="Print greeting in uppercase")
@click.option(
    "-r",
    "--repeat",
    default=1,
    type=click.IntRange(min=1),
    help="Repeat the greeting N times",
)
def hello(name: str, uppercase: bool, repeat: int) -> None:
    """Greet someone with a personalized message."""
    for line in render_greetings(build_greeting(name), repeat=repeat, uppercase=uppercase):
        click.echo(line)


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output version info as JSON")
def version(as_json: bool) -> None:
    """Display version information."""
    info = build_version_info()
    if as_json:
        click.echo(json.dumps(info, indent=2))
    else:
        click.echo(render_version_box(info))


@click.command()
@click.argument("iterations", required=False, type=click.IntRange(min=1))
@click.option(
    "-o",
    "--output",
    "output_format",
    default=OutputFormat.CONSOLE.value,
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    help="Output format: console, json, or csv",
)
@click.option("-v", "--verbose", is_flag=True, help="Show detailed benchmark information")
def benchmark(iterations: int | None, output_format: str, verbose: bool) -> None:
    """Run performance benchmarks."""
    config = _get_config()
    _setup_logging(config, debug=verbose)

    runner = BenchmarkRunner(
        iterations=iterations or config.default_iterations,
        output_format=output_format,
        verbose=verbose,
    )
    runner.execute(emit=click.echo)


@click.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.option("-p", "--pretty", is_flag=True, help="Pretty print JSON output")
@click.option("-s", "--stats", is_flag=True, help="Show processing statistics")
@click.pass_context
def process(ctx: click.Context, file: Path, pretty: bool, stats: bool) -> None:
    """Process a JSON file and demonstrate file I/O."""
    config = _get_config()
    _setup_logging(config, debug=stats)
    logger = get_logger(__name__).bind(path=str(file))
    handler = FileHandler(logger=logger)

    logger.info("processing_file")
    try:
        with log_timing(logger, "process_json"):
            data = handler.read_json(file)
    except FileError as exc:
        logger.error("processing_failed", kind=exc.kind.value, error=str(exc))
        ctx.exit(EXIT_FILE_NOT_FOUND if exc.kind is FileErrorKind.NOT_FOUND else EXIT_FAILURE)

    if isinstance(data, dict):
        logger.info("json_parsed", keys=len(data))

    click.echo(dumps_json(data, pretty=pretty))

    if stats:
        logger.info("file_size", bytes=handler.size(file))
        logger.info(
            "file_checksum",
            algorithm=config.checksum_algorithm,
            digest=handler.checksum(file, config.checksum_algorithm),
        )
        logger.info("processing_complete")
