"""CLI output formatting helpers."""

from typing import Any

import click
import yaml
from rich.console import Console
from rich.table import Table

from .config import CONFIG_KEYS, ScreenplayConfig

console = Console()


def print_config_yaml(data: dict[str, Any]) -> None:
    """Print config values as YAML."""
    click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))


def print_config_sources(config: ScreenplayConfig) -> None:
    """Print where each config value came from."""
    click.echo("Sources:")
    for key in CONFIG_KEYS:
        click.echo(f"  {key}: {config.get_source(key)}")


def print_cast_table(config: ScreenplayConfig) -> None:
    """Print the persona roster as a table."""
    table = Table(title="Cast")
    table.add_column("#", justify="right")
    table.add_column("Persona")
    for index, name in enumerate(config.personas, start=1):
        table.add_row(str(index), name)
    console.print(table)
    mode = "cached per scenario" if config.cache_actors else "fresh per mention"
    console.print(f"[dim]Actors are {mode} (source: {config.get_source('cache_actors')})[/dim]")
