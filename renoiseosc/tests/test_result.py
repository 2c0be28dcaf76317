"""Tests for renoiseosc.core.result — send outcomes."""

from renoiseosc.core.errors import TransportError
from renoiseosc.core.result import SendResult, SendStatus


def test_sent_is_truthy():
    result = SendResult.sent("/renoise/song/bpm", 28)
    assert result.ok
    assert bool(result) is True
    assert result.status is SendStatus.SENT
    assert result.size == 28


def test_rejected_is_falsy():
    result = SendResult.rejected("Can't set bpm to 31")
    assert not result
    assert result.status is SendStatus.REJECTED
    assert result.reason == "Can't set bpm to 31"
    assert result.address == ""


def test_transport_error_keeps_cause():
    error = TransportError("unreachable")
    result = SendResult.transport_error("/renoise/transport/start", error)
    assert not result
    assert result.status is SendStatus.TRANSPORT_ERROR
    assert result.error is error
