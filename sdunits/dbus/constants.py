from enum import StrEnum
from typing import Final


class DBusConstants(StrEnum):
    """D-Bus daemon service constants.
    """

    SERVICE_NAME = 'org.freedesktop.DBus'
    OBJECT_PATH = '/org/freedesktop/DBus'
    INTERFACE = 'org.freedesktop.DBus'


class SystemdDBusConstants(StrEnum):
    """Systemd D-Bus service constants.
    """

    SERVICE_NAME = 'org.freedesktop.systemd1'
    OBJECT_PATH = '/org/freedesktop/systemd1'
    MANAGER_INTERFACE = 'org.freedesktop.systemd1.Manager'


class ConnectionConfig:
    """Configuration constants for D-Bus connection.
    """

    DEFAULT_MAX_RETRIES: Final[int] = 5
    DEFAULT_INITIAL_BACKOFF: Final[float] = 1.0
    BACKOFF_MULTIPLIER: Final[float] = 2.0


class StateMessageFormat:
    """Wrapper used to hand unit file states to the state decoder.
    """

    # D-Bus type tag of the UnitFileState property value
    TYPE_TAG: Final[str] = 'string'
    TEMPLATE: Final[str] = '{tag}"{value}"'
