"""Shared fixtures: a RenoiseClient whose UDP socket is a mock."""

from unittest.mock import MagicMock, patch

import pytest

from renoiseosc.core.client import RenoiseClient, set_default_client


@pytest.fixture
def mock_socket():
    """Patch socket creation; sendto reports every byte as sent."""
    with patch("renoiseosc.core.destination._socket.socket") as mock_socket_cls:
        sock = MagicMock()
        sock.sendto.side_effect = lambda data, addr: len(data)
        mock_socket_cls.return_value = sock
        yield sock


@pytest.fixture
def client(mock_socket):
    c = RenoiseClient()
    yield c
    c.close()


@pytest.fixture
def default_client(mock_socket):
    """Install a fresh process-wide client for module-level calls."""
    c = RenoiseClient()
    set_default_client(c)
    yield c
    set_default_client(None)


@pytest.fixture
def sent(mock_socket):
    """Callable returning every datagram passed to sendto, in order."""
    return lambda: [c.args[0] for c in mock_socket.sendto.call_args_list]
