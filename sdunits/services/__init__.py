from sdunits.services.unit_enumerator import UnitEnumerator
from sdunits.services.unit_service import UnitService

__all__ = [
    'UnitEnumerator',
    'UnitService',
]
