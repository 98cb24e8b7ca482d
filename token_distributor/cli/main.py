"""
CLI interface for Token Distributor.

Provides command-line access to cache token distribution.
"""

import json
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from token_distributor.config.loader import (
    DistributionConfig,
    default_config,
    load_distribution_config
)
from token_distributor.core.distribution import TokenDistribution, distribute
from token_distributor.core.usage_report import build_usage

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1

PACKAGE_LOGGER = "token_distributor"


def _setup_logging(verbose: bool) -> None:
    """Route package logging through rich when verbose output is requested."""
    if not verbose:
        return
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))


def _load_config(config_path: Optional[str]) -> DistributionConfig:
    """Load config from file if given, else the built-in defaults."""
    if config_path is None:
        return default_config()
    return load_distribution_config(config_path)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Token Distributor CLI."""
    if ctx.invoked_subcommand is None:
        console.print("Token Distributor - Use --help to see available commands")


@app.command(name="distribute")
def distribute_command(
    total: int = typer.Argument(..., help="Total input tokens to distribute"),
    output_tokens: Optional[int] = typer.Option(
        None,
        "--output-tokens",
        "-o",
        help="Output tokens to include in the usage report"
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to distribution config YAML"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the usage block as JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging"
    )
):
    """
    Split a total input token count into cache usage fields.

    Uses a 1:2:25 ratio (input : cache creation : cache read) unless a
    config file says otherwise. Counts below the threshold are reported
    as plain input.
    """
    _setup_logging(verbose)
    try:
        config = _load_config(config_path)
        distribution = distribute(total, config.ratio)
        usage = build_usage(
            distribution,
            output_tokens=output_tokens,
            omit_empty_cache_fields=config.omit_empty_cache_fields
        )
    except Exception as e:
        console.print(f"[red]Error:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)

    if as_json:
        # Plain print keeps the output machine-readable
        print(json.dumps(usage))
    else:
        _display_distribution(distribution, output_tokens)
    sys.exit(EXIT_CODE_PASS)


@app.command()
def ratio(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to distribution config YAML"
    )
):
    """Show the active distribution ratio and threshold."""
    try:
        config = _load_config(config_path)
    except Exception as e:
        console.print(f"[red]Error:[/] {str(e)}")
        sys.exit(EXIT_CODE_FAIL)

    r = config.ratio
    console.print(f"Ratio: {r.input_part}:{r.creation_part}:{r.read_part} ({r.total_parts} parts)")
    console.print(f"Threshold: {r.threshold:,} tokens")
    sys.exit(EXIT_CODE_PASS)


def _display_distribution(distribution: TokenDistribution, output_tokens: Optional[int]) -> None:
    """Display a distribution as a table."""
    table = Table(title="Token Distribution")
    table.add_column("Field")
    table.add_column("Tokens", justify="right")

    table.add_row("input_tokens", f"{distribution.input_tokens:,}")
    table.add_row("cache_creation_input_tokens", f"{distribution.cache_creation_input_tokens:,}")
    table.add_row("cache_read_input_tokens", f"{distribution.cache_read_input_tokens:,}")
    if output_tokens is not None:
        table.add_row("output_tokens", f"{output_tokens:,}")
    table.add_row("[bold]total input[/bold]", f"[bold]{distribution.total_input_tokens:,}[/bold]")

    console.print(table)
    if not distribution.has_cache_tokens:
        console.print("[dim]Below threshold: no cache tokens reported[/]")


if __name__ == "__main__":
    app()
