"""Song-wide commands: tempo, edit settings, recording and sequencer."""

import logging

from renoiseosc.commands.base import flag, out_of_range, reject, resolve
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.result import SendResult

logger = logging.getLogger(__name__)


def evaluate(expr: str, *, client: RenoiseClient | None = None) -> SendResult:
    """Evaluate a Lua expression inside Renoise's scripting environment.

    Example:
        evaluate("renoise.song().transport.bpm = 132")
    """
    return resolve(client).post("evaluate", "s", expr)


def tempo(bpm: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Set the song's current bpm [32..999]."""
    reason = out_of_range("bpm", bpm, 32, 999)
    if reason:
        return reject(logger, reason)
    return resolve(client).post("song/bpm", "i", bpm)


def edit_mode(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable pattern edit mode."""
    return resolve(client).post("song/edit/mode", flag(on))


def octave(number: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Set the song's current octave [0..8]."""
    reason = out_of_range("octave", number, 0, 8)
    if reason:
        return reject(logger, reason)
    return resolve(client).post("song/edit/octave", "i", number)


def pattern_follow(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable pattern follow."""
    return resolve(client).post("song/edit/pattern_follow", flag(on))


def edit_step(step: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Set the song's current edit step [0..8]."""
    reason = out_of_range("edit step", step, 0, 8)
    if reason:
        return reject(logger, reason)
    return resolve(client).post("song/edit/step", "i", step)


def lines_per_beat(lpb: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Set the song's current lines per beat [1..255]."""
    reason = out_of_range("lines per beat", lpb, 1, 255)
    if reason:
        return reject(logger, reason)
    return resolve(client).post("song/lpb", "i", lpb)


def ticks_per_line(tpl: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Set the song's current ticks per line [1..16]."""
    reason = out_of_range("ticks per line", tpl, 1, 16)
    if reason:
        return reject(logger, reason)
    return resolve(client).post("song/tpl", "i", tpl)


def metronome(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable the metronome."""
    return resolve(client).post("song/record/metronome", flag(on))


def metronome_precount(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable the metronome precount when recording."""
    return resolve(client).post("song/record/metronome_precount", flag(on))


def quantization(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable global record quantization."""
    return resolve(client).post("song/record/quantization", flag(on))


def quantization_step(step: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Set the global record quantization step [1..32]."""
    reason = out_of_range("quantization step", step, 1, 32)
    if reason:
        return reject(logger, reason)
    return resolve(client).post("song/record/quantization_step", "i", step)


def schedule_add(sequence: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Add a scheduled sequence playback position."""
    return resolve(client).post("song/sequence/schedule_add", "i", sequence)


def schedule_set(sequence: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Replace the current scheduled sequence playback position."""
    return resolve(client).post("song/sequence/schedule_set", "i", sequence)


def trigger_sequence(sequence: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Jump playback to the given sequence position."""
    return resolve(client).post("song/sequence/trigger", "i", sequence)


def slot_mute(
    track: int,
    sequence: int,
    mute: bool = True,
    *,
    client: RenoiseClient | None = None,
) -> SendResult:
    """Mute (or unmute) the given track/sequence slot in the matrix."""
    path = "song/sequence/slot_mute" if mute else "song/sequence/slot_unmute"
    return resolve(client).post(path, "ii", track, sequence)


def slot_unmute(track: int, sequence: int, *, client: RenoiseClient | None = None) -> SendResult:
    """Unmute the given track/sequence slot in the matrix."""
    return slot_mute(track, sequence, False, client=client)
