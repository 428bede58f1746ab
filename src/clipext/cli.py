"""Command line interface."""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .base import ClipboardProvider
from .config import ClipboardConfig
from .detect import detect
from .errors import ClipboardError
from .models import Environment
from .selector import CANDIDATES, select

ENVIRONMENTS = [env.value for env in Environment]

# No provider could be constructed, as opposed to a failing operation (1)
EXIT_NO_CLIPBOARD = 2


def resolve_environment(env_name: Optional[str]) -> Environment:
    """Use the forced environment if given, otherwise detect it."""
    if env_name:
        return Environment.from_string(env_name)
    return detect()


def acquire_or_exit(env: Environment) -> ClipboardProvider:
    """Select a provider, exiting with EXIT_NO_CLIPBOARD if there is none."""
    provider = select(env, ClipboardConfig.from_env())
    if provider is None:
        click.echo(f"Error: No usable clipboard for {env.value}.", err=True)
        sys.exit(EXIT_NO_CLIPBOARD)
    return provider


@click.group()
@click.option(
    "-e", "--env",
    "env_name",
    type=click.Choice(ENVIRONMENTS, case_sensitive=False),
    default=None,
    help="Force an environment instead of detecting it",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.pass_context
def main(ctx: click.Context, env_name: Optional[str], verbose: bool):
    """Access the clipboard in X11, Wayland, macOS, Windows and terminal sessions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    ctx.obj = resolve_environment(env_name)


@main.command("detect")
@click.pass_obj
def detect_cmd(env: Environment):
    """Print the detected environment."""
    click.echo(env.value)


@main.command()
@click.pass_obj
def info(env: Environment):
    """Show the environment and the provider that would be used."""
    provider = select(env, ClipboardConfig.from_env())

    table = Table(title="Clipboard", show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Environment", env.value)
    table.add_row(
        "Candidates",
        ", ".join(factory.__name__.lstrip("_") for factory in CANDIDATES[env]),
    )
    if provider is None:
        table.add_row("Provider", "[red]none available[/red]")
    else:
        table.add_row("Provider", provider.name)
        table.add_row("Persists after exit", "yes" if provider.persists_after_exit else "no")

    Console().print(table)
    if provider is None:
        sys.exit(EXIT_NO_CLIPBOARD)


@main.command()
@click.argument("text", required=False)
@click.pass_obj
def copy(env: Environment, text: Optional[str]):
    """Set the clipboard to TEXT, or to stdin when TEXT is omitted."""
    provider = acquire_or_exit(env)
    contents = text if text is not None else sys.stdin.read()

    try:
        provider.set_contents(contents)
    except ClipboardError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.pass_obj
def paste(env: Environment):
    """Print the clipboard contents."""
    provider = acquire_or_exit(env)

    try:
        contents = provider.get_contents()
    except ClipboardError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(contents, nl=False)


if __name__ == "__main__":
    main()
