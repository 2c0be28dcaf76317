"""Exception types raised by renoiseosc."""


class RenoiseOscError(Exception):
    """Base class for every error raised by this package."""


class OscEncodeError(RenoiseOscError, ValueError):
    """Message could not be encoded (bad address, tag, arity or value).

    This is a contract violation by the caller, never a runtime condition.
    """


class DestinationError(RenoiseOscError, ValueError):
    """Invalid host or port given to the destination registry."""


class TransportError(RenoiseOscError, OSError):
    """Datagram could not be handed to the network."""


class ConfigError(RenoiseOscError):
    """Settings file could not be read or validated."""
