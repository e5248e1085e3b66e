from sdunits.models.analyze import BlameEntry
from sdunits.models.systemd_unit import (
    UnitDetails,
    UnitEnumerationResult,
    UnitFailure,
    UnitFileEntry,
)

__all__ = [
    'BlameEntry',
    'UnitDetails',
    'UnitEnumerationResult',
    'UnitFailure',
    'UnitFileEntry',
]
