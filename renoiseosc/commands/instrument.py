"""Instrument commands.

All functions target the currently selected instrument unless
``instrument`` is given.
"""

import logging

from renoiseosc.commands.base import (
    MAX_VOLUME,
    SELECTED,
    clamp,
    flag,
    not_a_number,
    not_one_of,
    out_of_range,
    reject,
    resolve,
)
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.result import SendResult

logger = logging.getLogger(__name__)

PHRASE_PLAYBACK_MODES = ("Off", "Program", "Keymap")
QUANTIZATION_MODES = ("None", "Line", "Beat", "Bar")
SCALE_KEYS = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


def _path(instrument: int, name: str) -> str:
    return f"song/instrument/{instrument}/{name}"


def macro_param(
    param: int,
    value: float,
    *,
    instrument: int = SELECTED,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Set an instrument macro's value [0.0..1.0]."""
    return resolve(client).post(_path(instrument, f"macro{param}"), "d", float(value))


def monophonic(
    on: bool, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Enable or disable monophonic playback."""
    return resolve(client).post(_path(instrument, "monophonic"), flag(on))


def monophonic_glide(
    glide: int, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the glide amount [0..255]."""
    reason = out_of_range("monophonic glide", glide, 0, 255)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_path(instrument, "monophonic_glide"), "i", glide)


def phrase_playback(
    mode: str, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the phrase playback mode: "Off", "Program" or "Keymap"."""
    reason = not_one_of("phrase playback mode", mode, PHRASE_PLAYBACK_MODES)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_path(instrument, "phrase_playback"), "s", mode)


def phrase_program(
    program: int, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the phrase program number [0..127]."""
    reason = out_of_range("phrase program", program, 0, 127)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_path(instrument, "phrase_program"), "i", program)


def quantization_mode(
    mode: str, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the note quantization: "None", "Line", "Beat" or "Bar"."""
    reason = not_one_of("quantization mode", mode, QUANTIZATION_MODES)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_path(instrument, "quantize"), "s", mode)


def scale_key(
    key: str, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the note scaling key: "C", "C#", ... "B"."""
    reason = not_one_of("scale key", key, SCALE_KEYS)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_path(instrument, "scale_key"), "s", key)


def scale_mode(
    mode: str, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the note scaling mode (e.g., "Major", "Natural Minor").

    Not validated: the list of scales depends on the Renoise version.
    """
    return resolve(client).post(_path(instrument, "scale_mode"), "s", mode)


def transpose(
    pitch: int, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the global pitch transpose [-120..120]."""
    reason = out_of_range("transpose", pitch, -120, 120)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_path(instrument, "transpose"), "i", pitch)


def volume(
    level: float, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the global volume, clamped to [0.0..db2lin(6.0)]."""
    reason = not_a_number("volume", level)
    if reason:
        return reject(logger, reason)
    level = clamp(level, 0.0, MAX_VOLUME)
    return resolve(client).post(_path(instrument, "volume"), "d", level)


def volume_db(
    level: float, *, instrument: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the global volume in decibels, clamped to [0.0..6.0]."""
    reason = not_a_number("volume db", level)
    if reason:
        return reject(logger, reason)
    level = clamp(level, 0.0, 6.0)
    return resolve(client).post(_path(instrument, "volume_db"), "d", level)
