"""Realtime triggers: raw MIDI events and notes."""

import logging

from renoiseosc.commands.base import SELECTED, reject, resolve
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.osc import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from renoiseosc.core.result import SendResult

logger = logging.getLogger(__name__)


def midi_event(
    port: int,
    status: int,
    data1: int,
    data2: int,
    *,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Fire a raw MIDI event (port id, status byte, two data bytes)."""
    event = (port, status, data1, data2)
    if not all(0 <= b <= 255 for b in event):
        return reject(logger, f"Can't send MIDI event {event}, bytes must be in 0..255")
    return resolve(client).post("trigger/midi", "m", bytes(event))


def midi_event_packed(value: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Fire a MIDI event packed into one integer.

    Values fitting 32 bits go out as int32, larger ones as int64. Unsigned
    values are sent with the same bit pattern.
    """
    if 0 <= value < 2**32:
        signed = value - 2**32 if value > INT32_MAX else value
        return resolve(client).post("trigger/midi", "i", signed)
    if INT32_MIN <= value < 0:
        return resolve(client).post("trigger/midi", "i", value)
    if 0 <= value < 2**64:
        signed = value - 2**64 if value > INT64_MAX else value
        return resolve(client).post("trigger/midi", "h", signed)
    if INT64_MIN <= value < 0:
        return resolve(client).post("trigger/midi", "h", value)
    return reject(logger, f"Can't send MIDI event {value}, it does not fit in 64 bits")


def note_on(
    pitch: int,
    velocity: int,
    *,
    instrument: int = SELECTED,
    track: int = SELECTED,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Turn on a note with the given velocity."""
    return resolve(client).post("trigger/note_on", "iiii", instrument, track, pitch, velocity)


def note_off(
    pitch: int,
    *,
    instrument: int = SELECTED,
    track: int = SELECTED,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Turn off a note."""
    return resolve(client).post("trigger/note_off", "iii", instrument, track, pitch)
