"""Trigger and probe commands."""
from typing import Optional

import click
import httpx

from .. import proc
from ..api_client import APIError, api_call
from ..classifier import decode_client_list, occupant_from_client_list
from ..config import ConfigError
from ..connection import Connection
from ..models import PipeMessage
from ..router import PROBE_COMMAND
from ..server.routers.pipe import PipeResponse


@click.command()
@click.argument("name")
@click.argument("payload", required=False)
def pipe(name: str, payload: Optional[str]):
    """Send a NAME/PAYLOAD message to the server's router.

    NAME is move_focus, move_focus_or_tab or resize; PAYLOAD is left, right,
    up or down. Other values are accepted by the server but ignored.
    """
    try:
        conn = Connection()
    except ConfigError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        raise click.Abort()

    if not conn.is_running:
        click.echo("Server not running", err=True)
        raise click.Abort()

    try:
        response = api_call(conn.base_url, "POST", "/pipe/",
                            data=PipeMessage(name=name, payload=payload),
                            response_model=PipeResponse)
    except (APIError, httpx.HTTPError) as e:
        click.echo(f"Error sending message: {e}", err=True)
        raise click.Abort()

    if not response.accepted:
        click.echo(f"Ignored: {name} {payload or ''}".rstrip(), err=True)


@click.command()
def probe():
    """Print the program running in the focused pane."""
    try:
        result = proc.run(PROBE_COMMAND, text=False)
    except OSError as e:
        click.echo(f"Failed to run zellij: {e}", err=True)
        raise click.Abort()

    if result.returncode != 0:
        click.echo(f"zellij exited with code {result.returncode}", err=True)
        raise click.Abort()

    click.echo(occupant_from_client_list(decode_client_list(result.stdout)) or "none")
