from sdunits.system.commands import (
    CommandExecutionError,
    CommandRunner,
    SubprocessCommandRunner,
)
from sdunits.system.constants import JournalConfig, SystemCommands
from sdunits.system.journal import JournalReader
from sdunits.system.unit_file_reader import UnitFileReader

__all__ = [
    'CommandExecutionError',
    'CommandRunner',
    'JournalConfig',
    'JournalReader',
    'SubprocessCommandRunner',
    'SystemCommands',
    'UnitFileReader',
]
