from sdunits.systemd.errors import (
    UnitParseError,
    UnrecognizedUnitState,
    UnrecognizedUnitType,
)
from sdunits.systemd.parsing import get_unit_description
from sdunits.systemd.types import UnitState, UnitType
from sdunits.systemd.unit import SystemdUnit

__all__ = [
    'SystemdUnit',
    'UnitParseError',
    'UnitState',
    'UnitType',
    'UnrecognizedUnitState',
    'UnrecognizedUnitType',
    'get_unit_description',
]
