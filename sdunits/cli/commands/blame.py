import click

from sdunits.models.analyze import BlameEntry
from sdunits.services.unit_service import UnitService


def format_blame_time(time_ms: int) -> str:
    """Format milliseconds the way systemd-analyze prints them.
    """
    if time_ms < 1000:
        return f'{time_ms}ms'

    minutes, milliseconds = divmod(time_ms, 60_000)
    seconds = f'{milliseconds / 1000:.3f}s'
    return f'{minutes}min {seconds}' if minutes else seconds


def format_blame_table(entries: list[BlameEntry]) -> str:
    """Format blame entries, slowest first.
    """
    if not entries:
        return 'No boot timing information available.'

    times = [format_blame_time(e.time_ms) for e in entries]
    time_width = max(len('TIME'), max(len(t) for t in times))

    lines = [f"{'TIME':>{time_width}} UNIT"]
    for time_str, entry in zip(times, entries):
        lines.append(f'{time_str:>{time_width}} {entry.unit}')

    return '\n'.join(lines)


@click.command('blame')
@click.option(
    '--limit',
    type=click.IntRange(min=1),
    default=None,
    help='Only show the slowest N units.',
)
def blame(limit: int | None) -> None:
    """Show how long each unit took to start during this boot.
    """
    entries = sorted(
        UnitService().blame(),
        key=lambda e: e.time_ms,
        reverse=True,
    )
    click.echo(format_blame_table(entries[:limit]))
