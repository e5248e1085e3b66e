import click

from sdunits.cli.commands.blame import blame
from sdunits.cli.commands.inspect import classify, journal, show
from sdunits.cli.commands.list_units import list_units, state


@click.group()
def cli() -> None:
    """sdunits - Inspect systemd units.
    """
    pass


cli.add_command(list_units)
cli.add_command(classify)
cli.add_command(show)
cli.add_command(journal)
cli.add_command(blame)
cli.add_command(state)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]
