import asyncio
from collections.abc import Iterable

from sdunits.dbus.adapters import unit_file_entries_from_bus
from sdunits.dbus.manager import SystemdManager
from sdunits.models.analyze import BlameEntry
from sdunits.models.systemd_unit import UnitDetails, UnitEnumerationResult
from sdunits.services.unit_enumerator import UnitEnumerator
from sdunits.system.analyze import BlameAnalyzer
from sdunits.system.journal import JournalReader
from sdunits.system.unit_file_reader import UnitFileReader
from sdunits.systemd.parsing import get_unit_description
from sdunits.systemd.types import UnitState
from sdunits.systemd.unit import SystemdUnit

DEFAULT_CONCURRENCY = 8


class UnitService:
    """A service for inspecting systemd units.
    """

    def __init__(
        self,
        manager: SystemdManager | None = None,
        enumerator: UnitEnumerator | None = None,
        reader: UnitFileReader | None = None,
        journal: JournalReader | None = None,
        analyzer: BlameAnalyzer | None = None,
    ) -> None:
        """Initialise the service.
        """
        self._manager = manager
        self._enumerator = enumerator or UnitEnumerator()
        self._reader = reader or UnitFileReader()
        self._journal = journal or JournalReader()
        self._analyzer = analyzer or BlameAnalyzer()

    @property
    def manager(self) -> SystemdManager:
        if self._manager is None:
            self._manager = SystemdManager()
        return self._manager

    async def list_units(self) -> UnitEnumerationResult:
        """List every unit file known to systemd.

        Raises:
            DBusError: If systemd cannot be queried
            ConnectionError: If the bus is unreachable
        """
        unit_files = await self.manager.list_unit_files()
        entries = unit_file_entries_from_bus(unit_files)
        return self._enumerator.enumerate(entries)

    async def get_unit_state(self, unit_name: str) -> UnitState:
        """Query the current unit file state of a unit.

        Raises:
            DBusError: If systemd cannot be queried
            UnrecognizedUnitState: If systemd reports an unknown state
        """
        value = await self.manager.get_unit_file_state(unit_name)
        return UnitState.from_value(value)

    async def refresh(self, unit: SystemdUnit) -> SystemdUnit:
        """Return a copy of the unit carrying its current state.
        """
        state = await self.get_unit_state(unit.name)
        return unit.model_copy(update={'state': state})

    def get_unit_details(self, unit: SystemdUnit) -> UnitDetails:
        """Read the unit file and journal of one unit.
        """
        info = unit.get_info(self._reader)
        return UnitDetails(
            name=unit.name,
            description=get_unit_description(info),
            info=info,
            journal=unit.get_journal(self._journal),
        )

    async def get_details(
        self,
        units: Iterable[SystemdUnit],
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> list[UnitDetails]:
        """Read details of many units in worker threads.

        Args:
            units: Units to inspect
            concurrency: Maximum number of units read at once

        Returns:
            Details in the same order as units
        """
        semaphore = asyncio.Semaphore(max(1, concurrency))

        async def _details(unit: SystemdUnit) -> UnitDetails:
            async with semaphore:
                return await asyncio.to_thread(self.get_unit_details, unit)

        return list(await asyncio.gather(*(_details(u) for u in units)))

    def blame(self) -> list[BlameEntry]:
        """Per-unit startup times of the current boot.
        """
        return self._analyzer.blame()
