import asyncio
import sys

import click
from dbus_next.constants import BusType
from dbus_next.errors import DBusError

from sdunits.dbus.connection import DBusConnectionManager
from sdunits.dbus.manager import SystemdManager
from sdunits.models.systemd_unit import UnitEnumerationResult
from sdunits.services.unit_service import UnitService
from sdunits.systemd.errors import UnrecognizedUnitState
from sdunits.systemd.types import UnitState, UnitType
from sdunits.systemd.unit import SystemdUnit


def format_units_table(units: list[SystemdUnit]) -> str:
    """Format units into a simple table.
    """
    if not units:
        return 'No units found.'

    name_width = max(len('UNIT'), max(len(u.name) for u in units))
    type_width = max(len('TYPE'), max(len(u.utype.value) for u in units))

    header = f"{'UNIT':<{name_width}} {'TYPE':<{type_width}} STATE"
    lines = [header, '-' * len(header)]

    for unit in sorted(units, key=lambda u: u.name):
        lines.append(
            f'{unit.name:<{name_width}} '
            f'{unit.utype.value:<{type_width}} '
            f'{unit.state.value}'
        )

    return '\n'.join(lines)


def filter_units(
    units: list[SystemdUnit],
    utype: str | None = None,
    state: str | None = None,
) -> list[SystemdUnit]:
    """Keep units matching the requested type and state.
    """
    return [
        unit for unit in units
        if (utype is None or unit.utype == utype)
        and (state is None or unit.state == state)
    ]


async def _fetch_units(user: bool) -> UnitEnumerationResult:
    bus_type = BusType.SESSION if user else BusType.SYSTEM
    dbus_manager = DBusConnectionManager.get_instance(bus_type)
    service = UnitService(manager=SystemdManager(dbus_manager))

    try:
        return await service.list_units()
    finally:
        await dbus_manager.disconnect()


@click.command('list-units')
@click.option('--user', is_flag=True, help='List units of the user manager.')
@click.option(
    '--type',
    'utype',
    type=click.Choice([t.value for t in UnitType]),
    help='Only show units of this type.',
)
@click.option(
    '--state',
    type=click.Choice([s.value for s in UnitState]),
    help='Only show units in this unit file state.',
)
def list_units(user: bool, utype: str | None, state: str | None) -> None:
    """List systemd unit files with their type and state.
    """
    try:
        result = asyncio.run(_fetch_units(user))
    except (DBusError, ConnectionError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    for failure in result.failures:
        click.echo(f'skipped {failure.name}: {failure.message}', err=True)

    click.echo(format_units_table(filter_units(result.units, utype, state)))


async def _fetch_state(unit_name: str, user: bool) -> UnitState:
    bus_type = BusType.SESSION if user else BusType.SYSTEM
    dbus_manager = DBusConnectionManager.get_instance(bus_type)
    service = UnitService(manager=SystemdManager(dbus_manager))

    try:
        return await service.get_unit_state(unit_name)
    finally:
        await dbus_manager.disconnect()


@click.command('state')
@click.argument('name')
@click.option('--user', is_flag=True, help='Query the user manager.')
def state(name: str, user: bool) -> None:
    """Print the unit file state of a unit.
    """
    try:
        unit_state = asyncio.run(_fetch_state(name, user))
    except (DBusError, ConnectionError, UnrecognizedUnitState) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    click.echo(unit_state.value)
