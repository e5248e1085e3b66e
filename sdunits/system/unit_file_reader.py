import logging
import os
from pathlib import Path

from sdunits.system.constants import UnitFileConfig


class UnitFileReader:
    """Reads systemd unit definition files from the filesystem.
    """

    def __init__(self, encoding: str = UnitFileConfig.ENCODING) -> None:
        """Initialize the reader.

        Args:
            encoding: Text encoding of unit files
        """
        self._logger = logging.getLogger(__name__)

        self._encoding = encoding

    def read(self, path: str | os.PathLike[str]) -> str:
        """Read the whole unit file.

        Unreadable files are reported as empty text so that callers
        displaying unit information never fail on a single unit.

        Args:
            path: Path to the unit file

        Returns:
            File contents, or an empty string if the file cannot be read
        """
        try:
            return Path(path).read_bytes().decode(self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            self._logger.debug('Failed to read unit file %s: %s', path, e)
            return ''
