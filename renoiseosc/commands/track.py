"""Track and device commands.

``track`` and ``device`` default to the current selection in Renoise.
"""

import logging

from renoiseosc.commands.base import (
    MAX_VOLUME,
    SELECTED,
    clamp,
    flag,
    not_a_number,
    out_of_range,
    reject,
    resolve,
)
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.result import SendResult

logger = logging.getLogger(__name__)


def _track(track: int, name: str) -> str:
    return f"song/track/{track}/{name}"


def _device(track: int, device: int, name: str) -> str:
    return f"song/track/{track}/device/{device}/{name}"


def bypass(
    bypassed: bool,
    *,
    track: int = SELECTED,
    device: int = SELECTED,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Bypass (True) or enable (False) a device."""
    return resolve(client).post(_device(track, device, "bypass"), flag(bypassed))


def set_parameter(
    key: int | str,
    value: float,
    *,
    track: int = SELECTED,
    device: int = SELECTED,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Set a device parameter by index or by name.

    Args:
        key: Parameter index (int) or name (str).
        value: New value, clamped to [0.0..1.0].
    """
    reason = not_a_number("parameter value", value)
    if reason:
        return reject(logger, reason)
    value = clamp(value, 0.0, 1.0)
    if isinstance(key, str):
        path = _device(track, device, "set_parameter_by_name")
        return resolve(client).post(path, "sd", key, value)
    path = _device(track, device, "set_parameter_by_index")
    return resolve(client).post(path, "id", key, value)


def mute(
    muted: bool = True, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Mute (or unmute) the track."""
    return resolve(client).post(_track(track, "mute" if muted else "unmute"))


def unmute(*, track: int = SELECTED, client: RenoiseClient | None = None) -> SendResult:
    """Unmute the track."""
    return mute(False, track=track, client=client)


def solo(*, track: int = SELECTED, client: RenoiseClient | None = None) -> SendResult:
    """Toggle solo for the track."""
    return resolve(client).post(_track(track, "solo"))


def output_delay(
    delay_ms: float, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set the track's output delay in milliseconds [-100.0..100.0]."""
    reason = out_of_range("output delay", delay_ms, -100.0, 100.0)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_track(track, "output_delay"), "d", float(delay_ms))


def _panning(name: str, pan: int, track: int, client: RenoiseClient | None) -> SendResult:
    reason = out_of_range(name.replace("_", " "), pan, -50, 50)
    if reason:
        return reject(logger, reason)
    return resolve(client).post(_track(track, name), "i", pan)


def postfx_panning(
    pan: int, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set post-FX panning [-50..50], left to right."""
    return _panning("postfx_panning", pan, track, client)


def prefx_panning(
    pan: int, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set pre-FX panning [-50..50], left to right."""
    return _panning("prefx_panning", pan, track, client)


def postfx_volume(
    level: float, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set post-FX volume, clamped to [0.0..db2lin(6.0)] (-inf..+6 dB)."""
    reason = not_a_number("post-FX volume", level)
    if reason:
        return reject(logger, reason)
    level = clamp(level, 0.0, MAX_VOLUME)
    return resolve(client).post(_track(track, "postfx_volume"), "d", level)


def prefx_volume(
    level: float, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set pre-FX volume, clamped to [0.0..db2lin(6.0)] (-inf..+6 dB)."""
    reason = not_a_number("pre-FX volume", level)
    if reason:
        return reject(logger, reason)
    level = clamp(level, 0.0, MAX_VOLUME)
    return resolve(client).post(_track(track, "prefx_volume"), "d", level)


def postfx_volume_db(
    level: float, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set post-FX volume in decibels, clamped to [-200.0..3.0]."""
    reason = not_a_number("post-FX volume db", level)
    if reason:
        return reject(logger, reason)
    level = clamp(level, -200.0, 3.0)
    return resolve(client).post(_track(track, "postfx_volume_db"), "d", level)


def prefx_volume_db(
    level: float, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set pre-FX volume in decibels, clamped to [-200.0..3.0]."""
    reason = not_a_number("pre-FX volume db", level)
    if reason:
        return reject(logger, reason)
    level = clamp(level, -200.0, 3.0)
    return resolve(client).post(_track(track, "prefx_volume_db"), "d", level)


def prefx_width(
    width: float, *, track: int = SELECTED, client: RenoiseClient | None = None
) -> SendResult:
    """Set pre-FX stereo width, clamped to [0.0..1.0]."""
    reason = not_a_number("pre-FX width", width)
    if reason:
        return reject(logger, reason)
    level = clamp(width, 0.0, 1.0)
    return resolve(client).post(_track(track, "prefx_width"), "d", level)
