"""OSC 1.0 message encoder.

Implements the send-side subset of OSC used to drive Renoise: int32,
int64, float32, float64, string, blob, boolean true/false and 4-byte MIDI
messages. Bundles and time tags are not supported.

OSC spec: http://opensoundcontrol.org/spec-1_0
"""

import struct
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from renoiseosc.core.errors import OscEncodeError

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

# Tags whose truth value lives in the tag itself.
BOOLEAN_TAGS = frozenset("TF")


@dataclass(frozen=True)
class Int32:
    value: int
    tag = "i"


@dataclass(frozen=True)
class Int64:
    value: int
    tag = "h"


@dataclass(frozen=True)
class Float32:
    value: float
    tag = "f"


@dataclass(frozen=True)
class Float64:
    value: float
    tag = "d"


@dataclass(frozen=True)
class String:
    value: str
    tag = "s"


@dataclass(frozen=True)
class Blob:
    value: bytes
    tag = "b"


@dataclass(frozen=True)
class Boolean:
    """True/false argument. Contributes no payload bytes."""

    value: bool

    @property
    def tag(self) -> str:
        return "T" if self.value else "F"


@dataclass(frozen=True)
class MidiQuad:
    """Raw MIDI message: port id, status byte, data1, data2."""

    value: bytes
    tag = "m"


OscArgument = Union[Int32, Int64, Float32, Float64, String, Blob, Boolean, MidiQuad]

_VARIANTS = (Int32, Int64, Float32, Float64, String, Blob, Boolean, MidiQuad)

SUPPORTED_TAGS = frozenset("ihfdsbTFm")


def osc_string(s: str) -> bytes:
    """Encode string as OSC string (ASCII, null-terminated, 4-byte padded).

    Args:
        s: String to encode.

    Returns:
        Padded bytes.

    Raises:
        OscEncodeError: If the string holds a NUL or a non-ASCII character.
    """
    try:
        encoded = s.encode("ascii")
    except UnicodeEncodeError as e:
        raise OscEncodeError(f"OSC strings must be ASCII: {s!r}") from e
    if b"\x00" in encoded:
        raise OscEncodeError(f"OSC strings must not contain NUL: {s!r}")
    return _pad(encoded + b"\x00")


def osc_int(value: int) -> bytes:
    """Encode int32 big-endian two's complement."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise OscEncodeError(f"{value} does not fit in an OSC int32")
    return struct.pack(">i", value)


def osc_int64(value: int) -> bytes:
    """Encode int64 big-endian two's complement."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise OscEncodeError(f"{value} does not fit in an OSC int64")
    return struct.pack(">q", value)


def osc_float(value: float) -> bytes:
    """Encode float32 big-endian (IEEE 754)."""
    try:
        return struct.pack(">f", value)
    except OverflowError as e:
        raise OscEncodeError(f"{value} does not fit in an OSC float32") from e


def osc_double(value: float) -> bytes:
    """Encode float64 big-endian (IEEE 754)."""
    return struct.pack(">d", value)


def osc_blob(data: bytes) -> bytes:
    """Encode blob: int32 size, then the bytes padded to 4."""
    return struct.pack(">i", len(data)) + _pad(bytes(data))


def osc_midi(data: bytes) -> bytes:
    """Encode a MIDI message: exactly 4 raw bytes, no prefix or padding."""
    if len(data) != 4:
        raise OscEncodeError(f"MIDI message must be 4 bytes, got {len(data)}")
    return bytes(data)


def _pad(data: bytes) -> bytes:
    padded_len = (len(data) + 3) & ~3
    return data.ljust(padded_len, b"\x00")


def _coerce(tag: str, value: Any) -> OscArgument:
    """Build the argument variant for ``tag`` from a typed or plain value."""
    if isinstance(value, _VARIANTS):
        if value.tag != tag:
            raise OscEncodeError(f"Argument {value!r} does not match type tag {tag!r}")
        return value

    if tag in BOOLEAN_TAGS:
        if value is not None and bool(value) != (tag == "T"):
            raise OscEncodeError(f"Boolean value {value!r} contradicts type tag {tag!r}")
        return Boolean(tag == "T")

    if tag in "ih":
        if isinstance(value, bool) or not isinstance(value, int):
            raise OscEncodeError(f"Type tag {tag!r} needs an int, got {type(value).__name__}")
        return Int32(value) if tag == "i" else Int64(value)

    if tag in "fd":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise OscEncodeError(f"Type tag {tag!r} needs a number, got {type(value).__name__}")
        return Float32(float(value)) if tag == "f" else Float64(float(value))

    if tag == "s":
        if not isinstance(value, str):
            raise OscEncodeError(f"Type tag 's' needs a str, got {type(value).__name__}")
        return String(value)

    if tag == "b":
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise OscEncodeError(f"Type tag 'b' needs bytes, got {type(value).__name__}")
        return Blob(bytes(value))

    # tag == "m"
    if isinstance(value, (int, str)):
        raise OscEncodeError(f"Type tag 'm' needs 4 bytes, got {type(value).__name__}")
    try:
        data = bytes(value)
    except (TypeError, ValueError) as e:
        raise OscEncodeError(f"MIDI message bytes must be in 0..255: {value!r}") from e
    return MidiQuad(data)


def _payload(arg: OscArgument) -> bytes:
    if isinstance(arg, Int32):
        return osc_int(arg.value)
    if isinstance(arg, Int64):
        return osc_int64(arg.value)
    if isinstance(arg, Float32):
        return osc_float(arg.value)
    if isinstance(arg, Float64):
        return osc_double(arg.value)
    if isinstance(arg, String):
        return osc_string(arg.value)
    if isinstance(arg, Blob):
        return osc_blob(arg.value)
    if isinstance(arg, MidiQuad):
        return osc_midi(arg.value)
    return b""


def build_arguments(type_tags: str, args: Sequence[Any]) -> list[OscArgument]:
    """Pair each type tag with its argument.

    ``args`` holds either one slot per tag, or one slot per payload-bearing
    tag with the ``T``/``F`` slots left out.

    Raises:
        OscEncodeError: On unknown tags, arity mismatch or bad values.
    """
    for tag in type_tags:
        if tag not in SUPPORTED_TAGS:
            raise OscEncodeError(f"Unsupported OSC type tag: {tag!r}")

    payload_tags = [t for t in type_tags if t not in BOOLEAN_TAGS]
    if len(args) == len(type_tags):
        return [_coerce(tag, value) for tag, value in zip(type_tags, args)]
    if len(args) == len(payload_tags):
        values = iter(args)
        return [
            Boolean(tag == "T") if tag in BOOLEAN_TAGS else _coerce(tag, next(values))
            for tag in type_tags
        ]
    raise OscEncodeError(
        f"Type tags {type_tags!r} expect {len(type_tags)} arguments, got {len(args)}"
    )


def build_osc_message(address: str, type_tags: str = "", *args: Any) -> bytes:
    """Build a complete OSC message.

    Args:
        address: OSC address pattern (e.g., "/renoise/song/bpm").
        type_tags: Type tag string without the leading comma (e.g., "id").
        *args: One value per tag, either an argument variant or a plain
            Python value convertible to it.

    Returns:
        Complete OSC binary message.

    Raises:
        OscEncodeError: If the address, tags or arguments are malformed.
    """
    if not isinstance(address, str) or not address.startswith("/"):
        raise OscEncodeError(f"OSC address must start with '/': {address!r}")

    arguments = build_arguments(type_tags, args)

    data = osc_string(address)
    data += osc_string("," + type_tags)
    for arg in arguments:
        data += _payload(arg)
    return data
