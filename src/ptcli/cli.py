"""Command-line interface for ptcli.

Main entry point for the application.
"""
# Created: 2026-10-16

import sys
import json
import logging
from pathlib import Path
from typing import Optional

import click
import requests
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .attributes import build_video_attributes, common_video_options
from .auth import CredentialsError, NetrcCredentials
from .api_client import RemoteAPIError
from .config.settings import SettingsError, SettingsStore, get_netrc_path
from .models import DefaultVideoAttributes, ExplicitRemote, VideoCommandFlags
from .remotes import get_remote_or_die


console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)]
    )


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {message}")
    sys.exit(1)


def load_default_attributes(path: Optional[str]) -> DefaultVideoAttributes:
    """Read default video attributes from a YAML file."""
    if not path:
        return DefaultVideoAttributes()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise click.BadParameter(f"Cannot read {path}: {e}", param_hint='--defaults') from e

    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must contain a mapping", param_hint='--defaults')

    try:
        return DefaultVideoAttributes.from_dict(data)
    except ValueError as e:
        raise click.BadParameter(f"Invalid value in {path}: {e}", param_hint='--defaults') from e


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version and exit')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose logging')
@click.option('--config-dir', type=click.Path(file_okay=False),
              default=None, help='Configuration directory')
@click.option('--netrc', 'netrc_file', type=click.Path(dir_okay=False),
              default=None, help='Credentials file (default: ~/.netrc)')
@click.pass_context
def cli(ctx: click.Context, version: bool, verbose: bool,
        config_dir: Optional[str], netrc_file: Optional[str]):
    """ptcli - manage remotes and video settings for a video instance."""
    if version:
        click.echo(f"ptcli v{__version__}")
        sys.exit(0)

    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj['store'] = SettingsStore(Path(config_dir) if config_dir else None)
    ctx.obj['credentials'] = NetrcCredentials(
        Path(netrc_file) if netrc_file else get_netrc_path()
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.group()
def auth():
    """Manage remote instances and their credentials."""


@auth.command('add')
@click.option('-u', '--url', required=True, help='Remote instance URL')
@click.option('-U', '--username', required=True, help='Username')
@click.option('-p', '--password', prompt=True, hide_input=True, help='Password')
@click.option('--default', 'make_default', is_flag=True, help='Use as default remote')
@click.pass_context
def auth_add(ctx: click.Context, url: str, username: str, password: str, make_default: bool):
    """Remember a remote and store its credentials."""
    store: SettingsStore = ctx.obj['store']
    credentials: NetrcCredentials = ctx.obj['credentials']

    # Settings are written last so a failed credentials write leaves them untouched
    try:
        settings = store.read()
        settings.add_remote(url, make_default=make_default)
        credentials.add(url, username, password)
        store.write(settings)
    except (SettingsError, CredentialsError, OSError) as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Added remote {url}")
    if settings.default_remote == url:
        console.print(f"  {url} is the default remote")


@auth.command('del')
@click.argument('url')
@click.pass_context
def auth_del(ctx: click.Context, url: str):
    """Forget a remote and its credentials."""
    store: SettingsStore = ctx.obj['store']
    credentials: NetrcCredentials = ctx.obj['credentials']

    try:
        settings = store.read()
        settings.remove_remote(url)
        store.write(settings)
    except KeyError:
        fail(f"Unknown remote {url}")
    except (SettingsError, OSError) as e:
        fail(str(e))

    try:
        credentials.remove(url)
    except KeyError:
        console.print(f"No stored credentials for {url}")
    except (CredentialsError, OSError) as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Removed remote {url}")


@auth.command('list')
@click.pass_context
def auth_list(ctx: click.Context):
    """List known remotes."""
    store: SettingsStore = ctx.obj['store']
    credentials: NetrcCredentials = ctx.obj['credentials']

    try:
        settings = store.read()
        machines = credentials.load()
    except (SettingsError, CredentialsError) as e:
        fail(str(e))

    if not settings.remotes:
        console.print("No remotes configured. Use 'ptcli auth add' first.")
        return

    table = Table(title="Remotes")
    table.add_column("Remote")
    table.add_column("Username")
    table.add_column("Default", justify="center")

    for index, url in enumerate(settings.remotes):
        machine = machines.get(url)
        table.add_row(
            url,
            machine.login if machine else "-",
            "*" if index == settings.default else ""
        )

    console.print(table)


@auth.command('default')
@click.argument('url')
@click.pass_context
def auth_default(ctx: click.Context, url: str):
    """Make a known remote the default."""
    store: SettingsStore = ctx.obj['store']

    try:
        settings = store.read()
        settings.set_default(url)
        store.write(settings)
    except KeyError:
        fail(f"Unknown remote {url}")
    except (SettingsError, OSError) as e:
        fail(str(e))

    console.print(f"[green]✓[/green] Default remote is now {url}")


@cli.command()
@click.option('-y', '--yes', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Remove all saved remotes."""
    store: SettingsStore = ctx.obj['store']

    if not yes and not click.confirm("Remove all saved remotes?"):
        console.print("[yellow]Cancelled[/yellow]")
        return

    try:
        store.erase()
    except OSError as e:
        fail(str(e))

    console.print("[green]✓[/green] Removed saved remotes")


@cli.command()
@click.option('-u', '--url', help='Remote instance URL')
@click.option('-U', '--username', help='Username')
@click.option('-p', '--password', help='Password')
@click.option('--defaults', 'defaults_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with default video attributes')
@common_video_options
@click.pass_context
def attributes(ctx: click.Context, url: Optional[str], username: Optional[str],
               password: Optional[str], defaults_file: Optional[str], **options):
    """Show the remote and video attributes a command would use.

    Examples:
        ptcli attributes -n "My video" -P 2
        ptcli attributes --url https://videos.example.org -C my_channel
    """
    store: SettingsStore = ctx.obj['store']
    credentials: NetrcCredentials = ctx.obj['credentials']

    try:
        settings = store.read()
        machines = credentials.load()
    except (SettingsError, CredentialsError) as e:
        fail(str(e))

    remote = get_remote_or_die(
        ExplicitRemote(url=url, username=username, password=password),
        settings,
        machines
    )

    defaults = load_default_attributes(defaults_file)
    flags = VideoCommandFlags.from_options(**options)

    if flags.channel_name and not remote.url:
        fail("A remote URL is required to look up a channel")

    try:
        video_attributes = build_video_attributes(remote.url, flags, defaults)
    except (RemoteAPIError, requests.RequestException) as e:
        fail(str(e))

    payload = {
        'remote': {
            'url': remote.url,
            'username': remote.username,
            'password': '********' if remote.password else None,
        },
        'attributes': video_attributes.to_dict(),
    }
    if flags.tags:
        payload['tags'] = flags.tags
    if flags.video_description:
        payload['description'] = flags.video_description

    click.echo(json.dumps(payload, indent=2))


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(0)


if __name__ == '__main__':
    main()
