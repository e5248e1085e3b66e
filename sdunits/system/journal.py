import logging

from sdunits.system.commands import (
    CommandExecutionError,
    CommandRunner,
    SubprocessCommandRunner,
)
from sdunits.system.constants import JournalConfig, SystemCommands


class JournalReader:
    """Reads the current boot's journal for a unit, newest entries first.
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        timeout: float | None = JournalConfig.DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the journal reader.

        Args:
            runner: Command runner used to invoke journalctl
            timeout: Seconds to wait for journalctl, None waits forever
        """
        self._logger = logging.getLogger(__name__)

        self._runner = runner or SubprocessCommandRunner()
        self._timeout = timeout

    @staticmethod
    def build_command(unit_name: str) -> list[str]:
        """Build the journalctl argument list for a unit.
        """
        return [
            SystemCommands.JOURNALCTL,
            JournalConfig.BOOT_FLAG,
            JournalConfig.REVERSE_FLAG,
            JournalConfig.UNIT_FLAG,
            unit_name,
        ]

    def read(self, unit_name: str) -> str:
        """Return the journal of a unit as text.

        Args:
            unit_name: Unit name, e.g. 'sshd.service'

        Returns:
            journalctl output, or a fallback message if journalctl could
            not be run or produced invalid UTF-8
        """
        try:
            output = self._runner.run(
                self.build_command(unit_name),
                timeout=self._timeout,
            )
            return output.decode('utf-8')
        except CommandExecutionError as e:
            self._logger.warning(
                'Failed to query journal for %s: %s',
                unit_name,
                e,
            )
        except UnicodeDecodeError as e:
            self._logger.warning(
                'Journal output for %s is not valid UTF-8: %s',
                unit_name,
                e,
            )

        return JournalConfig.FALLBACK_MESSAGE.format(unit_name)
