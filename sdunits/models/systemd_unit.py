from pathlib import Path

from pydantic import BaseModel, Field

from sdunits.systemd.unit import SystemdUnit


class UnitFileEntry(BaseModel):
    """Raw unit file entry as supplied by a unit enumerator.
    """
    model_config = {'frozen': True}

    path: Path = Field(..., description='Path to the unit file')
    state_message: str = Field(
        ...,
        description='Wrapped unit file state, e.g. string"enabled"',
    )

    @property
    def name(self) -> str:
        """Unit name derived from the file name.
        """
        return self.path.name


class UnitFailure(BaseModel):
    """A unit that could not be classified.
    """
    model_config = {'frozen': True}

    name: str = Field(..., description='Unit name')
    path: Path = Field(..., description='Path to the unit file')
    error: str = Field(..., description='Error type name')
    message: str = Field(..., description='Human readable error message')


class UnitEnumerationResult(BaseModel):
    """Result of building units from a batch of unit file entries.
    """
    model_config = {'frozen': True}

    units: list[SystemdUnit] = Field(default_factory=list)
    failures: list[UnitFailure] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether every entry produced a unit.
        """
        return not self.failures


class UnitDetails(BaseModel):
    """On-demand details of a single unit.
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1, description='Unit name')
    description: str | None = Field(None, description='Unit description')
    info: str = Field('', description='Unit file contents')
    journal: str = Field('', description='Journal for the current boot')
