"""asciipraline CLI - Main entry point."""

from __future__ import annotations

import logging
from typing import IO, BinaryIO, Optional

import click

from . import __version__
from .cleaner.clean import convert_with_report
from .cleaner.stages import DEMO_SAMPLE, INITIAL_TEXT, STAGES, apply_stage, walk_stages
from .log import setup_logging

logger = logging.getLogger(__name__)


def _read_source(source: BinaryIO) -> str:
    # Binary read keeps CR/CRLF intact for the stats; undecodable bytes become
    # lone surrogates, which the engine drops.
    data = source.read()
    return data.decode("utf-8", errors="surrogateescape")


@click.group()
@click.version_option(__version__, prog_name="asciipraline")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (logs go to stderr)",
)
@click.option(
    "--log-format",
    default="pretty",
    show_default=True,
    type=click.Choice(["pretty", "json"]),
)
def cli(log_level: str, log_format: str) -> None:
    """Convert Unicode text to pure ASCII."""
    setup_logging(level=log_level, format_type=log_format)


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    help="Write the ASCII text to this file instead of stdout",
)
@click.option("--stats", is_flag=True, help="Print conversion statistics (JSON) to stderr")
@click.option("--detail", is_flag=True, help="Include substitutions and dropped codepoints in stats")
@click.option("--sample", is_flag=True, help="Convert the built-in sample text instead of SOURCE")
def convert(
    source: BinaryIO,
    output: Optional[IO[str]],
    stats: bool,
    detail: bool,
    sample: bool,
) -> None:
    """Convert SOURCE (file or '-' for stdin) to ASCII."""
    text = INITIAL_TEXT if sample else _read_source(source)
    ascii_text, report = convert_with_report(text, detail=detail)

    if output is not None:
        output.write(ascii_text)
        logger.info("wrote %d chars to %s", report.out_chars, output.name)
    else:
        click.echo(ascii_text)

    if stats or detail:
        click.echo(report.to_json(), err=True)


@cli.command()
@click.option("--text", "sample", default=None, help="Text to walk through (default: demo sample)")
@click.option(
    "--stage",
    "ordinal",
    type=click.IntRange(0, len(STAGES) - 1),
    default=None,
    help="Show a single stage",
)
def stages(sample: Optional[str], ordinal: Optional[int]) -> None:
    """Show each transformation stage applied to a sample."""
    sample = DEMO_SAMPLE if sample is None else sample

    if ordinal is not None:
        result = apply_stage(ordinal, sample)
        click.echo(f"[{ordinal}] {STAGES[ordinal].label}: {result.description}")
        click.echo(result.text)
        return

    for stage, result in zip(STAGES, walk_stages(sample)):
        click.echo(f"[{stage.ordinal}] {stage.label}: {result.description}")
        click.echo(result.text)
        click.echo()


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
