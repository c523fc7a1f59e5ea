#!/usr/bin/env python3
"""
Hue Lights CLI
Register with a Philips Hue hub, inspect it, and control its lights.
"""

import click

from core.config import DEFAULT_BRIDGE_IP, DEFAULT_DEVICE_TYPE, DEFAULT_USERNAME, HubConfig

from commands.setup import register_command, config_command
from commands.inspection import user_info_command, lights_command, light_command
from commands.control import set_command


@click.group(
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 120
    }
)
@click.version_option(version='0.1.0', prog_name='Hue Lights')
@click.option('--hue-ip', envvar='HUE_IP',
              help=f'IP address of the Philips Hue hub [default: {DEFAULT_BRIDGE_IP}]')
@click.option('--hue-username', envvar='HUE_USERNAME',
              help=f'Username for the Hue hub [default: {DEFAULT_USERNAME}]')
@click.option('--hue-device-type', envvar='HUE_DEVICE_TYPE',
              help=f'Device type for the Hue hub [default: {DEFAULT_DEVICE_TYPE}]')
@click.option('--timeout', envvar='HUE_TIMEOUT', type=click.FloatRange(min=0, min_open=True),
              help='Seconds to wait for the hub [default: no limit]')
@click.pass_context
def cli(ctx, hue_ip: str | None, hue_username: str | None, hue_device_type: str | None,
        timeout: float | None):
    """Hue Lights CLI - Control Philips Hue lights over the hub's local API.

Settings: command-line options → environment → ~/.hue_lights/config.json → defaults

Run 'register' once (after pressing the hub's link button) before anything else."""
    ctx.obj = HubConfig.from_sources(
        bridge_ip=hue_ip,
        username=hue_username,
        device_type=hue_device_type,
        timeout=timeout,
    )


# Register setup commands
cli.add_command(register_command)
cli.add_command(config_command)

# Register inspection commands
cli.add_command(user_info_command)
cli.add_command(lights_command)
cli.add_command(light_command)

# Register control commands
cli.add_command(set_command)


if __name__ == '__main__':
    cli()
