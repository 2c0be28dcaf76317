"""Outcome of a send: sent, rejected by validation, or transport failure."""

from dataclasses import dataclass
from enum import Enum

from renoiseosc.core.errors import TransportError


class SendStatus(Enum):
    SENT = "sent"
    REJECTED = "rejected"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class SendResult:
    """What happened to one command.

    Attributes:
        status: Outcome kind.
        address: Full OSC address (empty when rejected before encoding).
        size: Datagram size in bytes when sent.
        reason: Validation message when rejected.
        error: Transport error when the send failed.
    """

    status: SendStatus
    address: str = ""
    size: int = 0
    reason: str = ""
    error: TransportError | None = None

    @classmethod
    def sent(cls, address: str, size: int) -> "SendResult":
        return cls(SendStatus.SENT, address=address, size=size)

    @classmethod
    def rejected(cls, reason: str) -> "SendResult":
        return cls(SendStatus.REJECTED, reason=reason)

    @classmethod
    def transport_error(cls, address: str, error: TransportError) -> "SendResult":
        return cls(SendStatus.TRANSPORT_ERROR, address=address, error=error)

    @property
    def ok(self) -> bool:
        return self.status is SendStatus.SENT

    def __bool__(self) -> bool:
        return self.ok
