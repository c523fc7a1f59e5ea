"""
Setup commands for the Hue lights CLI.

Registers this application with the hub and shows the effective connection settings.
"""

import click

from core.config import USER_CONFIG_FILE, save_user_config
from core.errors import ApiError, HueError
from models.utils import get_client


@click.command(name='register')
@click.option('--save', is_flag=True, help=f'Save hub IP and username to {USER_CONFIG_FILE}')
def register_command(save: bool):
    """Register this application with the hub.

    Press the link button on the hub first; the hub only accepts new users
    for a short time afterwards.

    \b
    Examples:
      hue-lights register
      hue-lights --hue-ip 192.168.1.20 --hue-username myuser register --save
    """
    client = get_client()

    try:
        username = client.register_user()
    except ApiError as e:
        if e.link_button_required:
            raise click.ClickException("Please press the link button on the hub and then try again.")
        raise click.ClickException(f"Unable to register user: {e}")
    except HueError as e:
        raise click.ClickException(f"Unable to register user: {e}")

    click.secho(f"✓ Registered user '{username}' with hub at {client.config.bridge_ip}", fg='green')

    if save:
        save_user_config({
            'bridge_ip': client.config.bridge_ip,
            'username': username,
            'device_type': client.config.device_type,
        })
        click.echo(f"  Saved to {USER_CONFIG_FILE}")


@click.command(name='config')
def config_command():
    """Show the connection settings that will be used."""
    client = get_client()
    config = client.config

    click.echo()
    click.secho("=== Connection Settings ===", fg='cyan', bold=True)
    click.echo(f"  Hub:         {client.base_url}")
    click.echo(f"  Username:    {config.username}")
    click.echo(f"  Device type: {config.device_type}")
    click.echo(f"  Timeout:     {config.timeout if config.timeout is not None else 'none'}")
    click.echo(f"  Config file: {USER_CONFIG_FILE}")
    click.echo()
