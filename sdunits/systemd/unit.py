import os
from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field

from sdunits.system.journal import JournalReader
from sdunits.system.unit_file_reader import UnitFileReader
from sdunits.systemd.parsing import get_unit_description
from sdunits.systemd.types import UnitState, UnitType

_default_reader = UnitFileReader()
_default_journal = JournalReader()


class SystemdUnit(BaseModel):
    """A systemd unit discovered on the system.

    Holds a point-in-time snapshot of the unit state. The unit file and
    journal are read on demand and never cached.
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1, description='Unit name')
    path: Path = Field(..., description='Path to the unit file')
    state: UnitState = Field(..., description='Unit file state')
    utype: UnitType = Field(..., description='Unit type')

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        state_message: str,
    ) -> Self:
        """Create a unit from its file path and raw state message.

        Args:
            path: Path to the unit file
            state_message: Wrapped unit file state from D-Bus

        Returns:
            SystemdUnit named after the file

        Raises:
            UnrecognizedUnitType: If the path suffix is not a unit type
            UnrecognizedUnitState: If the state message cannot be decoded
        """
        unit_path = Path(path)
        return cls(
            name=unit_path.name,
            path=unit_path,
            state=UnitState.from_message(state_message),
            utype=UnitType.from_path(unit_path),
        )

    def with_state(self, state_message: str) -> Self:
        """Return a copy of the unit with a freshly decoded state.

        Raises:
            UnrecognizedUnitState: If the state message cannot be decoded
        """
        return self.model_copy(
            update={'state': UnitState.from_message(state_message)},
        )

    def get_info(self, reader: UnitFileReader | None = None) -> str:
        """Read the unit file contents, empty if it cannot be read.
        """
        return (reader or _default_reader).read(self.path)

    def get_description(self, reader: UnitFileReader | None = None) -> str | None:
        """Read the Description= value from the unit file.
        """
        return get_unit_description(self.get_info(reader))

    def get_journal(self, journal: JournalReader | None = None) -> str:
        """Obtain this boot's journal for the unit, newest entries first.
        """
        return (journal or _default_journal).read(self.name)
