import logging
import re
from typing import Final

from sdunits.models.analyze import BlameEntry
from sdunits.system.commands import (
    CommandExecutionError,
    CommandRunner,
    SubprocessCommandRunner,
)
from sdunits.system.constants import SystemCommands

_TIME_PART: Final[re.Pattern[str]] = re.compile(
    r'^(?P<value>\d+(?:\.\d+)?)(?P<unit>h|min|ms|us|µs|s)$'
)

_MILLISECONDS_PER_UNIT: Final[dict[str, float]] = {
    'h': 3_600_000,
    'min': 60_000,
    's': 1_000,
    'ms': 1,
    'us': 0.001,
    'µs': 0.001,
}


def parse_blame_time(parts: list[str]) -> int | None:
    """Convert systemd time parts such as ['1min', '2.345s'] to milliseconds.

    Returns:
        Total milliseconds, or None if a part is not a valid time span
    """
    if not parts:
        return None

    total = 0.0
    for part in parts:
        match = _TIME_PART.match(part)
        if match is None:
            return None
        total += float(match['value']) * _MILLISECONDS_PER_UNIT[match['unit']]

    return round(total)


def parse_blame_line(line: str) -> BlameEntry | None:
    """Parse one line of systemd-analyze blame output.

    Args:
        line: Line such as '  1min 2.345s NetworkManager.service'

    Returns:
        BlameEntry, or None if the line is not a blame entry
    """
    tokens = line.split()
    if len(tokens) < 2:
        return None

    time_ms = parse_blame_time(tokens[:-1])
    if time_ms is None:
        return None

    return BlameEntry(unit=tokens[-1], time_ms=time_ms)


class BlameAnalyzer:
    """Reports how long each unit took to start during the current boot.
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            runner: Command runner used to invoke systemd-analyze
            timeout: Seconds to wait for systemd-analyze
        """
        self._logger = logging.getLogger(__name__)

        self._runner = runner or SubprocessCommandRunner()
        self._timeout = timeout

    def blame(self) -> list[BlameEntry]:
        """Run systemd-analyze blame and parse its output.

        Returns:
            Entries in the order reported (slowest first), or an empty
            list if systemd-analyze could not be run
        """
        try:
            output = self._runner.run(
                [SystemCommands.SYSTEMD_ANALYZE, 'blame'],
                timeout=self._timeout,
            ).decode('utf-8')
        except (CommandExecutionError, UnicodeDecodeError) as e:
            self._logger.warning('Failed to analyze boot: %s', e)
            return []

        entries = []
        for line in output.splitlines():
            if not line.strip():
                continue

            entry = parse_blame_line(line)
            if entry is None:
                self._logger.debug('Skipping blame line: %r', line)
                continue

            entries.append(entry)

        return entries
