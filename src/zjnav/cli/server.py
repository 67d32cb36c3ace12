"""Server management commands."""
import click
import httpx

from ..api_client import APIError, api_call
from ..config import ConfigError
from ..connection import Connection


def _connection() -> Connection:
    try:
        return Connection()
    except ConfigError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        raise click.Abort()


@click.group()
def server():
    """Manage the zjnav server."""
    pass


@server.command("start")
def start():
    conn = _connection()
    if conn.start():
        click.echo(f"Server running at {conn.base_url}")
    else:
        click.echo("Failed to start server", err=True)
        raise click.Abort()


@server.command("stop")
def stop():
    conn = _connection()
    if conn.stop():
        click.echo("Server stopped")
    else:
        click.echo("Failed to stop server", err=True)
        raise click.Abort()


@server.command("status")
def status():
    conn = _connection()
    if not conn.is_running:
        click.echo("Server not running")
        return

    click.echo(f"Server running at {conn.base_url} (PID: {conn.server_pid})")

    try:
        snapshot = api_call(conn.base_url, "GET", "/state/")
    except (APIError, httpx.HTTPError) as e:
        click.echo(f"Error querying server: {e}", err=True)
        return

    click.echo(f"\nOccupant: {snapshot['occupant'] or 'none'}")
    click.echo(f"Modal editor: {'yes' if snapshot['modal_editor'] else 'no'}")
    click.echo(f"Modifiers: move={snapshot['move_mod']} resize={snapshot['resize_mod']}")
    click.echo(f"Pending commands: {len(snapshot['pending'])}")
    for command in snapshot['pending']:
        click.echo(f"  - {command['kind']} {command['direction']}")
