"""Shared helpers for the command catalog.

Commands validate their parameters before encoding. Invalid values are
logged as warnings and nothing is sent; volume-like values are clamped.
"""

import logging
import math
from collections.abc import Collection

from renoiseosc.core.client import RenoiseClient, get_default_client
from renoiseosc.core.result import SendResult

# Current selection in Renoise (instrument, track, device).
SELECTED = -1

# db2lin(6.0): the +6 dB ceiling of Renoise's linear volume controls.
MAX_VOLUME = 1.9952623149688795


def resolve(client: RenoiseClient | None) -> RenoiseClient:
    return client if client is not None else get_default_client()


def reject(logger: logging.Logger, reason: str) -> SendResult:
    """Log a validation warning and return a REJECTED result."""
    logger.warning("%s", reason)
    return SendResult.rejected(reason)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def not_a_number(name: str, value: float) -> str | None:
    """Return a rejection message if ``value`` is not a real number or is NaN."""
    if _is_number(value) and not math.isnan(value):
        return None
    return f"Can't set {name} to {value!r}, {name} must be a number"


def out_of_range(name: str, value: float, low: float, high: float) -> str | None:
    """Return a rejection message if ``value`` is outside [low, high]."""
    if not _is_number(value):
        return not_a_number(name, value)
    if low <= value <= high:
        return None
    return f"Can't set {name} to {value}, {name} must be in {low}..{high}"


def not_one_of(name: str, value: str, choices: Collection[str]) -> str | None:
    """Return a rejection message if ``value`` is not in ``choices``."""
    if value in choices:
        return None
    options = ", ".join(f'"{c}"' for c in choices)
    return f'Can\'t set {name} to "{value}", {name} must be one of [{options}]'


def clamp(value: float, low: float, high: float) -> float:
    # NaN must be rejected by the caller; min/max would turn it into ``high``.
    return max(low, min(high, float(value)))


def flag(on: bool) -> str:
    """Type tag carrying a boolean."""
    return "T" if on else "F"
