from sdunits.dbus.adapters import (
    render_state_message,
    unit_file_entries_from_bus,
)
from sdunits.dbus.connection import DBusConnectionManager
from sdunits.dbus.manager import SystemdManager

__all__ = [
    'DBusConnectionManager',
    'SystemdManager',
    'render_state_message',
    'unit_file_entries_from_bus',
]
