from sdunits.models import (
    BlameEntry,
    UnitDetails,
    UnitEnumerationResult,
    UnitFailure,
    UnitFileEntry,
)
from sdunits.systemd import (
    SystemdUnit,
    UnitParseError,
    UnitState,
    UnitType,
    UnrecognizedUnitState,
    UnrecognizedUnitType,
    get_unit_description,
)

__version__ = '0.1.0'

__all__ = [
    'BlameEntry',
    'SystemdUnit',
    'UnitDetails',
    'UnitEnumerationResult',
    'UnitFailure',
    'UnitFileEntry',
    'UnitParseError',
    'UnitState',
    'UnitType',
    'UnrecognizedUnitState',
    'UnrecognizedUnitType',
    'get_unit_description',
]
