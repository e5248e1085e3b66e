import os
from enum import StrEnum
from pathlib import PurePath
from typing import Final, Self

from sdunits.systemd.errors import UnrecognizedUnitState, UnrecognizedUnitType

# Offset of the payload inside a state message such as 'string"enabled"'.
UNIT_STATE_PAYLOAD_OFFSET: Final[int] = 6


class UnitType(StrEnum):
    """Systemd unit types, keyed by unit file suffix.
    """

    AUTOMOUNT = 'automount'
    BUSNAME = 'busname'
    MOUNT = 'mount'
    PATH = 'path'
    SCOPE = 'scope'
    SERVICE = 'service'
    SLICE = 'slice'
    SOCKET = 'socket'
    SWAP = 'swap'
    TARGET = 'target'
    TIMER = 'timer'

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Self:
        """Determine the unit type from the extension of a unit file path.

        Args:
            path: Unit name or path to the unit file

        Returns:
            The matching UnitType

        Raises:
            UnrecognizedUnitType: If the path has no extension or the
                extension is not a known unit type
        """
        extension = PurePath(path).suffix.removeprefix('.')
        if not extension:
            raise UnrecognizedUnitType(path)

        try:
            return cls(extension)
        except ValueError:
            raise UnrecognizedUnitType(path) from None


class UnitState(StrEnum):
    """Systemd unit file enablement states.
    """

    BAD = 'bad'
    DISABLED = 'disabled'
    ENABLED = 'enabled'
    GENERATED = 'generated'
    INDIRECT = 'indirect'
    LINKED = 'linked'
    MASKED = 'masked'
    STATIC = 'static'
    TRANSIENT = 'transient'

    @classmethod
    def from_message(cls, message: str) -> Self:
        """Decode the state from a wrapped D-Bus property message.

        The payload starts at a fixed offset and may be quoted. Only its
        first character is inspected, so runtime variants such as
        'enabled-runtime' decode to their base state.

        Args:
            message: Raw message, e.g. 'string"enabled"'

        Returns:
            The decoded UnitState

        Raises:
            UnrecognizedUnitState: If the message is too short or the
                payload does not start with a known discriminator
        """
        payload = message[UNIT_STATE_PAYLOAD_OFFSET:]
        if payload.startswith('"'):
            payload = payload[1:]
        payload = payload.split('"', 1)[0]

        if not payload:
            raise UnrecognizedUnitState(message)

        return cls._from_discriminator(payload[0], message)

    @classmethod
    def from_value(cls, value: str) -> Self:
        """Decode the state from an already unwrapped D-Bus value.

        Args:
            value: Plain state string, e.g. 'enabled' or 'masked-runtime'

        Returns:
            The decoded UnitState

        Raises:
            UnrecognizedUnitState: If the value is empty or unknown
        """
        if not value:
            raise UnrecognizedUnitState(value)
        return cls._from_discriminator(value[0], value)

    @classmethod
    def _from_discriminator(cls, char: str, source: str) -> Self:
        try:
            return cls(STATE_DISCRIMINATORS[char])
        except KeyError:
            raise UnrecognizedUnitState(source) from None


# First letters of the state names are pairwise distinct.
STATE_DISCRIMINATORS: Final[dict[str, UnitState]] = {
    's': UnitState.STATIC,
    'd': UnitState.DISABLED,
    'e': UnitState.ENABLED,
    'i': UnitState.INDIRECT,
    'l': UnitState.LINKED,
    'm': UnitState.MASKED,
    'b': UnitState.BAD,
    'g': UnitState.GENERATED,
    't': UnitState.TRANSIENT,
}
