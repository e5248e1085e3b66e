import sys

import click

from sdunits.system.journal import JournalReader
from sdunits.system.unit_file_reader import UnitFileReader
from sdunits.systemd.errors import UnrecognizedUnitType
from sdunits.systemd.parsing import get_unit_description
from sdunits.systemd.types import UnitType


@click.command('classify')
@click.argument('paths', nargs=-1, required=True)
def classify(paths: tuple[str, ...]) -> None:
    """Print the unit type of each unit file path.
    """
    failed = False

    for path in paths:
        try:
            utype = UnitType.from_path(path)
        except UnrecognizedUnitType as e:
            click.echo(f'skipped {path}: {e}', err=True)
            failed = True
            continue

        click.echo(f'{path} {utype.value}')

    if failed:
        sys.exit(1)


@click.command('show')
@click.argument('path')
def show(path: str) -> None:
    """Print the description and definition of a unit file.
    """
    try:
        utype = UnitType.from_path(path).value
    except UnrecognizedUnitType as e:
        click.echo(f'Warning: {e}', err=True)
        utype = 'unknown'

    info = UnitFileReader().read(path)
    description = get_unit_description(info)

    click.echo(f'Type: {utype}')
    click.echo(f'Description: {description or "N/A"}')
    click.echo()
    click.echo(info, nl=False)


@click.command('journal')
@click.argument('name')
@click.option(
    '--timeout',
    type=float,
    default=None,
    help='Give up on journalctl after this many seconds.',
)
def journal(name: str, timeout: float | None) -> None:
    """Print this boot's journal for a unit, newest entries first.
    """
    click.echo(JournalReader(timeout=timeout).read(name), nl=False)
