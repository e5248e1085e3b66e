import asyncio
import logging
import threading
from typing import Self

from dbus_next.aio.message_bus import MessageBus
from dbus_next.constants import BusType
from dbus_next.errors import DBusError

from sdunits.dbus.constants import ConnectionConfig, DBusConstants


class BusSingletonMeta(type):
    """Metaclass keeping one instance per class and bus type.
    """

    _instances: dict[tuple[type, BusType], object] = {}
    _lock = threading.Lock()

    def __call__(cls, bus_type: BusType = BusType.SYSTEM, *args, **kwargs):
        key = (cls, bus_type)
        if key not in cls._instances:
            with cls._lock:
                if key not in cls._instances:
                    cls._instances[key] = super().__call__(
                        bus_type,
                        *args,
                        **kwargs,
                    )
        return cls._instances[key]


class DBusConnectionManager(metaclass=BusSingletonMeta):
    """Manages a D-Bus connection with automatic reconnection.
    """

    def __init__(
        self,
        bus_type: BusType = BusType.SYSTEM,
        max_retries: int = ConnectionConfig.DEFAULT_MAX_RETRIES,
        initial_backoff: float = ConnectionConfig.DEFAULT_INITIAL_BACKOFF,
    ):
        """Initialize the connection manager.

        Args:
            bus_type: System bus for system units, session bus for
                user units
            max_retries: The maximum number of connection attempts
            initial_backoff: Delay before the first retry in seconds
        """
        self._logger = logging.getLogger(__name__)

        self._bus_type = bus_type
        self._bus: MessageBus | None = None
        self._max_retries = max_retries
        self._initial_backoff = initial_backoff
        self._connection_lock = asyncio.Lock()

    @property
    def bus_type(self) -> BusType:
        return self._bus_type

    @property
    def connected(self) -> bool:
        """Whether a live bus connection is held.
        """
        return self._bus is not None and self._bus.connected

    async def connect(self) -> None:
        """Connect to D-Bus, retrying with exponential backoff.

        Raises:
            ConnectionError: If every attempt fails
        """
        async with self._connection_lock:
            if self.connected:
                self._logger.debug('Already connected to D-Bus.')
                return

            backoff = self._initial_backoff
            for attempt in range(1, self._max_retries + 1):
                self._logger.info(
                    'Connecting to the %s bus (attempt %d/%d)...',
                    self._bus_type.name.lower(),
                    attempt,
                    self._max_retries,
                )
                try:
                    self._bus = await MessageBus(
                        bus_type=self._bus_type,
                    ).connect()
                except (DBusError, OSError) as e:
                    self._logger.warning('Failed to connect to D-Bus: %s', e)
                else:
                    self._logger.info('Connected to D-Bus.')
                    return

                if attempt < self._max_retries:
                    self._logger.info('Retrying in %.2f seconds.', backoff)
                    await asyncio.sleep(backoff)
                    backoff *= ConnectionConfig.BACKOFF_MULTIPLIER

            self._logger.critical(
                'Could not connect to D-Bus after %d attempts.',
                self._max_retries,
            )
            raise ConnectionError(
                f'Failed to connect to D-Bus after {self._max_retries} '
                'attempts.'
            )

    async def disconnect(self) -> None:
        """Disconnect from D-Bus if connected.
        """
        async with self._connection_lock:
            if self._bus:
                self._logger.info('Disconnecting from D-Bus.')
                self._bus.disconnect()
                self._bus = None

    async def get_bus(self) -> MessageBus:
        """Return the bus, reconnecting if the connection is down.

        Raises:
            ConnectionError: If a connection cannot be established
        """
        if not await self.health_check():
            self._logger.warning(
                'D-Bus connection is down. Attempting to reconnect.'
            )
            await self.connect()

        if not self._bus:
            raise ConnectionError('Failed to get a valid D-Bus connection.')

        return self._bus

    async def health_check(self) -> bool:
        """Check that the bus answers a lightweight GetId call.
        """
        if not self.connected:
            return False

        try:
            introspection = await self._bus.introspect(  # type: ignore
                DBusConstants.SERVICE_NAME,
                DBusConstants.OBJECT_PATH,
            )
            proxy = self._bus.get_proxy_object(  # type: ignore
                DBusConstants.SERVICE_NAME,
                DBusConstants.OBJECT_PATH,
                introspection,
            )
            interface = proxy.get_interface(DBusConstants.INTERFACE)
            await interface.call_get_id()  # type: ignore
            return True
        except DBusError as e:
            self._logger.warning('D-Bus health check failed: %s', e)
            return False

    @classmethod
    def get_instance(cls, bus_type: BusType = BusType.SYSTEM) -> Self:
        """Return the shared manager for a bus type.
        """
        return cls(bus_type)
