"""
Inspection commands for reading hub, user and light information.

Includes user-info, lights (list) and light (details).
"""

import dataclasses
import json

import click

from core.errors import HueError
from models.light import Light
from models.utils import get_client


def _state_summary(light: Light) -> str:
    state = light.state
    if not state.reachable:
        return click.style('unreachable', fg='yellow')
    if not state.on:
        return click.style('off', fg='white')
    return click.style(f"on  bri {state.brightness:>3}  hue {state.hue:>5}  sat {state.saturation:>3}",
                       fg='green')


@click.command(name='user-info')
@click.option('--json', 'as_json', is_flag=True, help='Print the full record as JSON')
def user_info_command(as_json: bool):
    """Dump what the hub exposes to the registered user.

    \b
    Examples:
      hue-lights user-info
      hue-lights user-info --json
    """
    client = get_client()

    try:
        info = client.get_user_info()
    except HueError as e:
        raise click.ClickException(f"Unable to fetch user info: {e}")

    if as_json:
        click.echo(json.dumps(dataclasses.asdict(info), indent=2))
        return

    config = info.config
    click.echo()
    click.secho(f"=== {config.name or 'Hue hub'} ===", fg='cyan', bold=True)
    click.echo(f"  Address:     {client.base_url}")
    click.echo(f"  MAC:         {config.mac}")
    click.echo(f"  API version: {config.api_version}")
    click.echo(f"  Software:    {config.software_version}")
    click.echo(f"  Local time:  {config.local_time}")
    click.echo()

    click.secho(f"Lights ({len(info.lights)})", fg='yellow', bold=True)
    for light_id, light in info.lights.items():
        click.echo(f"  {light_id:>4}  {light.name:<24} {_state_summary(light)}")
    click.echo()

    click.secho(f"Scenes ({len(info.scenes)})", fg='yellow', bold=True)
    for scene_id, scene in info.scenes.items():
        marker = click.style('*', fg='green') if scene.active else ' '
        click.echo(f"  {marker} {scene.name:<24} lights: {', '.join(scene.lights)}  ({scene_id})")
    click.echo()

    click.secho(f"Users ({len(config.whitelist)})", fg='yellow', bold=True)
    for username, entry in config.whitelist.items():
        click.echo(f"  {entry.name:<24} last used {entry.last_use_date or 'never'}  ({username})")
    click.echo()


@click.command(name='lights')
def lights_command():
    """List all lights on the hub."""
    client = get_client()

    try:
        lights = client.list_lights()
    except HueError as e:
        raise click.ClickException(f"Unable to fetch lights: {e}")

    if not lights:
        click.echo("No lights found.")
        return

    for light_id, light in lights.items():
        click.echo(f"  {light_id:>4}  {light.name}")


@click.command(name='light')
@click.argument('light_id')
def light_command(light_id: str):
    """Show everything the hub knows about one light.

    \b
    Examples:
      hue-lights light 1
    """
    client = get_client()

    try:
        light = client.get_light(light_id)
    except HueError as e:
        raise click.ClickException(f"Unable to fetch light {light_id}: {e}")

    state = light.state
    click.echo()
    click.secho(f"=== {light.name} ({light_id}) ===", fg='cyan', bold=True)
    click.echo(f"  Type:        {light.type}")
    click.echo(f"  Model:       {light.model_id}")
    click.echo(f"  Firmware:    {light.firmware_version}")
    click.echo(f"  State:       {_state_summary(light)}")
    click.echo(f"  Colour mode: {state.color_mode}")
    if state.color_mode == 'ct':
        click.echo(f"  Colour temp: {state.color_temperature} mireds")
    elif state.color_mode == 'xy':
        click.echo(f"  XY:          {', '.join(f'{v:.4f}' for v in state.xy)}")
    click.echo(f"  Alert:       {state.alert}")
    click.echo(f"  Effect:      {state.effect}")
    click.echo()
