"""Destination registry: the remote OSC endpoint and its outbound socket."""

import ipaddress
import socket as _socket
import threading
from dataclasses import dataclass

from renoiseosc.core.errors import DestinationError, TransportError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class Destination:
    """Resolved (host, port) pair of the Renoise OSC server."""

    host: str
    port: int

    @property
    def family(self) -> int:
        """Address family of ``host`` (AF_INET or AF_INET6)."""
        if ipaddress.ip_address(self.host).version == 6:
            return _socket.AF_INET6
        return _socket.AF_INET

    def __str__(self) -> str:
        if self.family == _socket.AF_INET6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def resolve_host(host: "str | IPAddress") -> str:
    """Resolve a hostname or IP to a literal IP address string.

    Args:
        host: Hostname, IP literal, or ``ipaddress`` address object.

    Returns:
        IP address as a string.

    Raises:
        DestinationError: If the name cannot be resolved.
    """
    if isinstance(host, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return str(host)
    if not isinstance(host, str) or not host:
        raise DestinationError(f"Invalid host: {host!r}")

    try:
        return str(ipaddress.ip_address(host))
    except ValueError:
        pass

    try:
        infos = _socket.getaddrinfo(host, None, type=_socket.SOCK_DGRAM)
    except (_socket.gaierror, UnicodeError) as e:
        raise DestinationError(f"Cannot resolve host {host!r}: {e}") from e
    if not infos:
        raise DestinationError(f"Cannot resolve host {host!r}: no addresses")
    return infos[0][4][0]


def validate_port(port: int) -> int:
    """Check that ``port`` is an integer in 0..65535.

    Raises:
        DestinationError: If it is not.
    """
    if isinstance(port, bool) or not isinstance(port, int):
        raise DestinationError(f"Port must be an int, got {type(port).__name__}")
    if not 0 <= port <= 65535:
        raise DestinationError(f"Port {port} is outside 0..65535")
    return port


class DestinationRegistry:
    """Holds the current destination and the reusable UDP socket.

    One lock guards destination changes and lazy socket creation.
    Concurrent setters are last-writer-wins. Sockets are created on first
    use (one per address family) and kept for the registry's lifetime.

    Usage:
        registry = DestinationRegistry()
        registry.set_port(8001)
        sock = registry.socket()
    """

    def __init__(self, host: "str | IPAddress" = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        self._destination = Destination(resolve_host(host), validate_port(port))
        self._sockets: dict[int, _socket.socket] = {}
        self._lock = threading.Lock()

    def set_host(self, host: "str | IPAddress") -> Destination:
        """Replace the host, keeping the current port."""
        resolved = resolve_host(host)
        with self._lock:
            self._destination = Destination(resolved, self._destination.port)
            return self._destination

    def set_port(self, port: int) -> Destination:
        """Replace the port, keeping the current host."""
        validate_port(port)
        with self._lock:
            self._destination = Destination(self._destination.host, port)
            return self._destination

    def set_address(self, host: "str | IPAddress", port: int) -> Destination:
        """Replace host and port together."""
        destination = Destination(resolve_host(host), validate_port(port))
        with self._lock:
            self._destination = destination
            return destination

    def current_destination(self) -> Destination:
        with self._lock:
            return self._destination

    def socket(self, family: int | None = None) -> _socket.socket:
        """Return the shared UDP socket, creating it on first call.

        Args:
            family: Address family; defaults to the current destination's.
        """
        with self._lock:
            return self._ensure_socket(family or self._destination.family)

    def snapshot(self) -> tuple[Destination, _socket.socket]:
        """Return the destination and its socket as one consistent pair."""
        with self._lock:
            destination = self._destination
            return destination, self._ensure_socket(destination.family)

    def _ensure_socket(self, family: int) -> _socket.socket:
        sock = self._sockets.get(family)
        if sock is None:
            try:
                sock = _socket.socket(family, _socket.SOCK_DGRAM)
            except OSError as e:
                raise TransportError(f"Cannot create UDP socket: {e}") from e
            self._sockets[family] = sock
        return sock

    def close(self) -> None:
        """Close the sockets (shutdown and tests only)."""
        with self._lock:
            for sock in self._sockets.values():
                sock.close()
            self._sockets.clear()

    def __repr__(self) -> str:
        return f"DestinationRegistry({self._destination})"
