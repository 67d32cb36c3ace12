"""Main CLI entry point for zjnav."""
import os

import click

from .config import config
from .navigate import pipe, probe
from .server import server


@click.group()
@click.option('--log-level', default='INFO', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Set logging level')
@click.version_option(package_name='zjnav')
def cli(log_level):
    """Vim-aware pane navigation for zellij."""
    os.environ['ZJNAV_LOG_LEVEL'] = log_level


cli.add_command(server)
cli.add_command(config)
cli.add_command(pipe)
cli.add_command(probe)


if __name__ == "__main__":
    cli()
