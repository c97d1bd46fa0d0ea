"""CLI commands for inspecting and writing the Flicker config file."""

from __future__ import annotations

import asyncio
import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from flicker.config import FlickerConfig
from flicker.paths import get_config_path


def load_config_or_fail(config_path: Path | None) -> FlickerConfig:
    """Load config, turning parse and validation errors into CLI errors."""
    try:
        return FlickerConfig.load(config_path)
    except tomllib.TOMLDecodeError as e:
        raise click.ClickException(f"Invalid TOML in {config_path or get_config_path()}: {e}")
    except ValidationError as e:
        raise click.ClickException(f"Invalid config: {e}")


@click.group()
def config() -> None:
    """Inspect or create the config file."""
    pass


@config.command()
def path() -> None:
    """Print the config file location."""
    click.echo(get_config_path())


@config.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to read (defaults to the user config)",
)
def show(config_path: Path | None) -> None:
    """Print the effective configuration as TOML."""
    click.echo(load_config_or_fail(config_path).to_toml(), nl=False)


@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the file (defaults to the user config)",
)
def init(force: bool, config_path: Path | None) -> None:
    """Write a config file populated with the defaults."""
    target = config_path or get_config_path()
    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")
    asyncio.run(FlickerConfig().save(target))
    click.secho(f"Wrote {target}", fg="green")
