"""Configuration management commands."""
import click

from ..config import Config, ConfigError, dump_config_env, dump_config_toml, get_config

FORMATS = click.Choice(["toml", "env"])


def _render(config: Config, fmt: str) -> str:
    if fmt == "env":
        return dump_config_env(config)
    return dump_config_toml(config)


@click.group()
def config():
    """Configuration management commands."""
    pass


@config.command("show")
@click.option("--format", "fmt", type=FORMATS, default="toml", help="Output format")
def show(fmt):
    """Show current effective configuration (file and environment applied)."""
    try:
        effective = get_config()
    except ConfigError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        raise click.Abort()
    click.echo(_render(effective, fmt))


@config.command("defaults")
@click.option("--format", "fmt", type=FORMATS, default="toml", help="Output format")
def defaults(fmt):
    """Show default configuration values."""
    click.echo(_render(Config(), fmt))
