from enum import StrEnum
from typing import Final


class SystemCommands(StrEnum):
    """External tools invoked by sdunits.
    """

    JOURNALCTL = 'journalctl'
    SYSTEMD_ANALYZE = 'systemd-analyze'


class JournalConfig:
    """Configuration constants for journal queries.
    """

    # journalctl flags: current boot, newest first, filter by unit
    BOOT_FLAG: Final[str] = '-b'
    REVERSE_FLAG: Final[str] = '-r'
    UNIT_FLAG: Final[str] = '-u'

    DEFAULT_TIMEOUT: Final[float | None] = None
    FALLBACK_MESSAGE: Final[str] = 'Unable to read the journal entry for {}.'


class UnitFileConfig:
    """Configuration constants for unit definition files.
    """

    ENCODING: Final[str] = 'utf-8'
    DESCRIPTION_PREFIX: Final[str] = 'Description='
