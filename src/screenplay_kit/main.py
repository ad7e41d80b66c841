"""CLI main entry point."""

import json
import sys

import click

from . import __version__
from .cast import persona_pattern
from .config import CONFIG_KEYS, DEFAULT_LOG_LEVEL, load_config, save_config, unset_config
from .errors import ConfigError, ScreenplayError, unknown_actor
from .shared.logging import configure_logging

VERBOSITY = ["info", "debug"]


def _load_or_exit(json_output: bool):
    try:
        return load_config()
    except ConfigError as e:
        _fail(e, json_output)


def _fail(error: ScreenplayError, json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps({"error": error.to_dict()}, indent=2))
    else:
        click.echo(f"Error: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Write logs to file (JSON)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def cli(ctx: click.Context, verbose: int, log_file: str | None, json_output: bool) -> None:
    """Screenplay pattern toolkit."""
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output
    try:
        level = load_config().log_level
    except ConfigError:
        # Reported by the subcommand that needs the config
        level = DEFAULT_LOG_LEVEL
    if verbose:
        level = VERBOSITY[min(verbose, len(VERBOSITY)) - 1]
    configure_logging(level, log_file=log_file)


@cli.command()
def version() -> None:
    """Show version information."""
    click.echo(f"screenplay-kit version {__version__}")


@cli.group()
def cast() -> None:
    """Inspect the persona roster."""
    pass


@cast.command("list")
@click.pass_context
def cast_list(ctx: click.Context) -> None:
    """List the personas step text may mention."""
    from .formatters import print_cast_table

    json_output = ctx.obj["json_output"]
    config = _load_or_exit(json_output)

    if json_output:
        data = {
            "personas": list(config.personas),
            "cache_actors": config.cache_actors,
            "pattern": persona_pattern(config.personas),
        }
        click.echo(json.dumps(data, indent=2))
    else:
        print_cast_table(config)


@cast.command("check")
@click.argument("name")
@click.pass_context
def cast_check(ctx: click.Context, name: str) -> None:
    """Check that NAME resolves to a known persona."""
    json_output = ctx.obj["json_output"]
    config = _load_or_exit(json_output)

    if name not in config.personas:
        _fail(unknown_actor(name, config.personas), json_output)

    if json_output:
        click.echo(json.dumps({"name": name, "known": True}, indent=2))
    else:
        click.echo(f"✓ {name} is a known persona")


@cli.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration and where each value came from."""
    from .config import get_config_path
    from .formatters import print_config_sources, print_config_yaml

    json_output = ctx.obj["json_output"]
    loaded = _load_or_exit(json_output)

    if json_output:
        data = {
            "values": loaded.to_dict(),
            "sources": {key: loaded.get_source(key) for key in CONFIG_KEYS},
        }
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo("Screenplay Configuration")
        click.echo(f"File: {get_config_path()}\n")
        print_config_yaml(loaded.to_dict())
        print_config_sources(loaded)


@config.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value (personas take a comma-separated list)."""
    try:
        save_config(key, value)
    except ConfigError as e:
        _fail(e, ctx.obj["json_output"])
    click.echo(f"Set {key} = {value}")


@config.command("unset")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.pass_context
def config_unset(ctx: click.Context, key: str) -> None:
    """Remove a configuration value, restoring its default."""
    try:
        removed = unset_config(key)
    except ConfigError as e:
        _fail(e, ctx.obj["json_output"])
    if removed:
        click.echo(f"Unset {key}")
    else:
        click.echo(f"{key} was not set")


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
