"""UDP send primitive. Fire-and-forget: one datagram, no retry."""

import socket

from renoiseosc.core.destination import Destination
from renoiseosc.core.errors import TransportError


def send_datagram(sock: socket.socket, data: bytes, destination: Destination) -> int:
    """Send ``data`` as a single UDP datagram to ``destination``.

    Args:
        sock: Unconnected UDP socket.
        data: Encoded OSC message.
        destination: Target host and port.

    Returns:
        Number of bytes handed to the OS.

    Raises:
        TransportError: If the OS refuses the datagram.
    """
    try:
        return sock.sendto(data, (destination.host, destination.port))
    except OSError as e:
        raise TransportError(f"OSC send to {destination} failed: {e}") from e
