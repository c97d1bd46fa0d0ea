"""CLI entry point for Flicker."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from flicker import __version__
from flicker.cli.config import config, load_config_or_fail
from flicker.limits import MAX_CYCLING_CHARS, MIN_RAMP_SIZE
from flicker.terminal import get_terminal_name, supports_truecolor

_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Cycling-characters loading animation for the terminal."""
    if version:
        click.echo(f"flicker {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


cli.add_command(config)


@cli.command()
@click.argument("label", required=False, default=None)
@click.option(
    "-n",
    "--chars",
    type=int,
    default=None,
    help=f"Cycling placeholder characters (clamped to 0-{MAX_CYCLING_CHARS})",
)
@_CONFIG_OPTION
@click.option(
    "--exit-on-resolve",
    is_flag=True,
    help="Quit shortly after the label resolves",
)
def run(
    label: str | None,
    chars: int | None,
    config_path: Path | None,
    exit_on_resolve: bool,
) -> None:
    """Run the animation in the TUI (default command)."""
    from flicker.app import FlickerApp

    loaded = load_config_or_fail(config_path)
    app = FlickerApp(
        label=label,
        chars=chars,
        config=loaded,
        exit_on_resolve=True if exit_on_resolve else None,
    )
    app.run()


@cli.command()
@click.argument("label", required=False, default=None)
@click.option("-n", "--chars", type=int, default=None, help="Cycling placeholder characters")
@click.option(
    "-d",
    "--duration",
    type=click.FloatRange(min=0),
    default=3.0,
    show_default=True,
    help="Seconds to animate",
)
@_CONFIG_OPTION
def preview(
    label: str | None,
    chars: int | None,
    duration: float,
    config_path: Path | None,
) -> None:
    """Play the animation inline, then print the resolved frame."""
    from flicker.cli.preview import run_preview

    loaded = load_config_or_fail(config_path)
    animation = loaded.animation
    console = Console()
    model = run_preview(
        console,
        animation.label if label is None else label,
        animation.cycling_chars if chars is None else chars,
        animation,
        duration,
    )
    console.print(model.render())


@cli.command()
@_CONFIG_OPTION
def info(config_path: Path | None) -> None:
    """Show terminal color support and how the animation will be drawn."""
    loaded = load_config_or_fail(config_path)
    truecolor = supports_truecolor()
    chars = loaded.animation.cycling_chars
    click.echo(f"Terminal:   {get_terminal_name()}")
    click.echo(f"Truecolor:  {'yes' if truecolor else 'no'}")
    click.echo(f"Characters: {chars}")
    if truecolor and chars >= MIN_RAMP_SIZE:
        click.echo("Gradient:   yes")
    else:
        click.echo("Gradient:   no")


if __name__ == "__main__":
    cli()
