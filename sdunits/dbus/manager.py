import logging

from dbus_next.errors import DBusError

from sdunits.dbus.connection import DBusConnectionManager
from sdunits.dbus.constants import SystemdDBusConstants


class SystemdManager:
    """Read-only access to the systemd manager over D-Bus.
    """

    def __init__(self, dbus_manager: DBusConnectionManager | None = None):
        """Initialize the SystemdManager.

        Args:
            dbus_manager: The D-Bus connection manager.
        """
        self._logger = logging.getLogger(__name__)

        self._dbus_manager = dbus_manager or \
            DBusConnectionManager.get_instance()
        self._manager_proxy = None

    async def _ensure_manager_proxy(self) -> None:
        """Ensure the systemd manager D-Bus proxy is initialized.
        """
        if self._manager_proxy is not None:
            return

        try:
            bus = await self._dbus_manager.get_bus()
            introspection = await bus.introspect(
                SystemdDBusConstants.SERVICE_NAME,
                SystemdDBusConstants.OBJECT_PATH,
            )
            proxy_object = bus.get_proxy_object(
                SystemdDBusConstants.SERVICE_NAME,
                SystemdDBusConstants.OBJECT_PATH,
                introspection,
            )
            self._manager_proxy = proxy_object.get_interface(
                SystemdDBusConstants.MANAGER_INTERFACE
            )
        except DBusError as e:
            self._logger.error(
                'Failed to create systemd manager proxy: %s',
                e,
            )
            raise

    async def list_unit_files(self) -> list[tuple[str, str]]:
        """List all unit files known to systemd.

        Returns:
            (unit file path, unit file state) pairs

        Raises:
            DBusError: If the D-Bus call fails
        """
        await self._ensure_manager_proxy()

        try:
            unit_files = await self._manager_proxy.call_list_unit_files()  # type: ignore
        except DBusError as e:
            self._logger.error('Failed to list systemd unit files: %s', e)
            raise

        return [(path, state) for path, state in unit_files]

    async def get_unit_file_state(self, unit_name: str) -> str:
        """Get the unit file state of a unit.

        Args:
            unit_name: The name of the unit (e.g., 'sshd.service')

        Returns:
            The state string, e.g. 'enabled'

        Raises:
            DBusError: If the D-Bus call fails or the unit does not exist
        """
        await self._ensure_manager_proxy()

        try:
            return await self._manager_proxy.call_get_unit_file_state(  # type: ignore
                unit_name,
            )
        except DBusError as e:
            self._logger.error(
                'Failed to get unit file state of %s: %s',
                unit_name,
                e,
            )
            raise
