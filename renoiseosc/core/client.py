"""Renoise OSC client: encoder + send primitive over a destination registry.

Callers own a ``RenoiseClient`` or use the process-wide default one via
the module-level functions (``set_host``, ``send_message``, ...).
"""

import logging
import socket
import threading
from typing import Any

from renoiseosc.core.config import DEFAULT_ROOT, Settings
from renoiseosc.core.destination import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    Destination,
    DestinationRegistry,
    IPAddress,
)
from renoiseosc.core.errors import TransportError
from renoiseosc.core.osc import build_osc_message
from renoiseosc.core.result import SendResult
from renoiseosc.core.transport import send_datagram

logger = logging.getLogger(__name__)


class RenoiseClient:
    """Sends OSC messages to one Renoise instance.

    Thread-safe: destination changes and socket creation are serialized by
    the registry; encoding is pure.

    Usage:
        client = RenoiseClient(port=8001)
        client.post("song/bpm", "i", 132)
    """

    def __init__(
        self,
        host: "str | IPAddress" = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        root: str = DEFAULT_ROOT,
        registry: DestinationRegistry | None = None,
    ) -> None:
        """Initialize client.

        Args:
            host: Renoise hostname or IP. Ignored when ``registry`` is given.
            port: Renoise OSC port. Ignored when ``registry`` is given.
            root: Prefix prepended by ``post``.
            registry: Existing registry to share.
        """
        self._registry = registry or DestinationRegistry(host, port)
        self._root = root.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RenoiseClient":
        return cls(settings.host, settings.port, settings.root)

    @property
    def registry(self) -> DestinationRegistry:
        return self._registry

    @property
    def root(self) -> str:
        return self._root or "/"

    def set_host(self, host: "str | IPAddress") -> Destination:
        return self._registry.set_host(host)

    def set_port(self, port: int) -> Destination:
        return self._registry.set_port(port)

    def set_address(self, host: "str | IPAddress", port: int) -> Destination:
        return self._registry.set_address(host, port)

    def current_destination(self) -> Destination:
        return self._registry.current_destination()

    def socket(self) -> socket.socket:
        return self._registry.socket()

    def send_message(self, address: str, type_tags: str = "", *args: Any) -> SendResult:
        """Encode and send one OSC message.

        Args:
            address: Full OSC address pattern.
            type_tags: Type tag string without the leading comma.
            *args: Values for the tags.

        Returns:
            ``SENT`` or ``TRANSPORT_ERROR`` result.

        Raises:
            OscEncodeError: If the message is malformed.
        """
        data = build_osc_message(address, type_tags, *args)
        try:
            destination, sock = self._registry.snapshot()
            size = send_datagram(sock, data, destination)
        except TransportError as e:
            return SendResult.transport_error(address, e)
        logger.debug("OSC %s ,%s -> %s (%d bytes)", address, type_tags, destination, size)
        return SendResult.sent(address, size)

    def post(self, path: str, type_tags: str = "", *args: Any) -> SendResult:
        """Send a message to ``path`` under the root (e.g., "song/bpm")."""
        return self.send_message(f"{self._root}/{path.lstrip('/')}", type_tags, *args)

    def close(self) -> None:
        self._registry.close()

    def __repr__(self) -> str:
        return f"RenoiseClient({self.current_destination()}{self.root})"


_default_client: RenoiseClient | None = None
_default_lock = threading.Lock()


def get_default_client() -> RenoiseClient:
    """Get the process-wide client, creating it on first call."""
    global _default_client
    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = RenoiseClient()
    return _default_client


def set_default_client(client: RenoiseClient | None) -> None:
    """Replace the process-wide client. None drops it (recreated on demand)."""
    global _default_client
    with _default_lock:
        _default_client = client


def set_host(host: "str | IPAddress") -> Destination:
    return get_default_client().set_host(host)


def set_port(port: int) -> Destination:
    return get_default_client().set_port(port)


def set_address(host: "str | IPAddress", port: int) -> Destination:
    return get_default_client().set_address(host, port)


def current_destination() -> Destination:
    return get_default_client().current_destination()


def send_message(address: str, type_tags: str = "", *args: Any) -> SendResult:
    return get_default_client().send_message(address, type_tags, *args)
