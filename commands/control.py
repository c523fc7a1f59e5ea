"""
Control commands for changing light state.
"""

import click

from core.errors import HueError
from models.light import LightUpdate
from models.utils import get_client


@click.command(name='set')
@click.option('--light', '-l', 'light_ids', multiple=True,
              help='Light to change (repeatable). Defaults to all lights.')
@click.option('--on/--off', default=True, help='Turn lights on or off')
@click.option('--hue', '-u', type=click.IntRange(0, 65535), help='Hue value (0-65535)')
@click.option('--sat', '-s', type=click.IntRange(0, 254), help='Saturation (0-254)')
@click.option('--bri', '-b', type=click.IntRange(0, 254), help='Brightness (0-254)')
@click.pass_context
def set_command(ctx, light_ids: tuple[str, ...], on: bool, hue: int | None,
                sat: int | None, bri: int | None):
    """Change the state of one or more lights.

    Each light is updated on its own; a failure on one light is reported
    and the rest are still attempted.

    \b
    Examples:
      hue-lights set --light 1 --bri 200
      hue-lights set -l 1 -l 3 -u 10000 -s 254
      hue-lights set --off
    """
    client = get_client()
    failed = []

    if light_ids:
        lights = {light_id: light_id for light_id in light_ids}
    else:
        try:
            listing = client.list_lights()
        except HueError as e:
            raise click.ClickException(f"Unable to fetch lights: {e}")

        lights = {}
        for light_id in listing:
            try:
                light = client.get_light(light_id)
            except HueError as e:
                click.secho(f"✗ Unable to fetch light {light_id}: {e}", fg='red', err=True)
                lights[light_id] = light_id
                continue
            lights[light_id] = f"{light.name} ({light_id})"

    if not lights:
        click.echo("No lights found.")
        return

    click.echo(f"Controlling lights: {', '.join(lights)}")

    update = LightUpdate(on=on, hue=hue, saturation=sat, brightness=bri)
    for light_id, label in lights.items():
        try:
            client.set_light_state(light_id, update)
        except HueError as e:
            click.secho(f"✗ Unable to change light {label}: {e}", fg='red', err=True)
            failed.append(light_id)
            continue
        click.secho(f"✓ {label} updated", fg='green')

    if failed:
        ctx.exit(1)
