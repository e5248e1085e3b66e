from collections.abc import Iterable

from sdunits.dbus.constants import StateMessageFormat
from sdunits.models.systemd_unit import UnitFileEntry


def render_state_message(value: str) -> str:
    """Wrap a UnitFileState value the way the state decoder expects it.

    >>> render_state_message('enabled')
    'string"enabled"'
    """
    return StateMessageFormat.TEMPLATE.format(
        tag=StateMessageFormat.TYPE_TAG,
        value=value,
    )


def unit_file_entries_from_bus(
    unit_files: Iterable[tuple[str, str]],
) -> list[UnitFileEntry]:
    """Convert ListUnitFiles results into unit file entries.

    Args:
        unit_files: (unit file path, unit file state) pairs

    Returns:
        Entries in the order received
    """
    return [
        UnitFileEntry(path=path, state_message=render_state_message(state))
        for path, state in unit_files
    ]
