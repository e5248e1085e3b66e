import logging
from collections.abc import Iterable

from sdunits.models.systemd_unit import (
    UnitEnumerationResult,
    UnitFailure,
    UnitFileEntry,
)
from sdunits.systemd.errors import UnitParseError
from sdunits.systemd.unit import SystemdUnit


class UnitEnumerator:
    """Builds SystemdUnit instances from raw unit file entries.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_unit(self, entry: UnitFileEntry) -> SystemdUnit:
        """Classify and decode a single entry.

        Raises:
            UnrecognizedUnitType: If the path suffix is not a unit type
            UnrecognizedUnitState: If the state message cannot be decoded
        """
        return SystemdUnit.from_path(entry.path, entry.state_message)

    def enumerate(
        self,
        entries: Iterable[UnitFileEntry],
    ) -> UnitEnumerationResult:
        """Build units for every entry, collecting the ones that fail.

        A malformed entry never aborts the batch; it is reported in
        the result's failures instead.

        Args:
            entries: Unit file entries in enumeration order

        Returns:
            UnitEnumerationResult with units and failures in input order
        """
        units = []
        failures = []

        for entry in entries:
            try:
                units.append(self.build_unit(entry))
            except UnitParseError as e:
                self._logger.warning('Skipping unit %s: %s', entry.name, e)
                failures.append(
                    UnitFailure(
                        name=entry.name,
                        path=entry.path,
                        error=type(e).__name__,
                        message=str(e),
                    )
                )

        return UnitEnumerationResult(units=units, failures=failures)
