"""Playback transport commands: start/stop and loop control."""

from renoiseosc.commands.base import flag, resolve
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.result import SendResult


def start(*, client: RenoiseClient | None = None) -> SendResult:
    """Start playback or restart the current pattern."""
    return resolve(client).post("transport/start")


def stop(*, client: RenoiseClient | None = None) -> SendResult:
    """Stop playback."""
    return resolve(client).post("transport/stop")


def resume(*, client: RenoiseClient | None = None) -> SendResult:
    """Continue playback from the current position."""
    return resolve(client).post("transport/continue")


def panic(*, client: RenoiseClient | None = None) -> SendResult:
    """Stop playback and reset all playing instruments and DSPs."""
    return resolve(client).post("transport/panic")


def loop_block(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable the block loop."""
    return resolve(client).post("transport/loop/block", flag(on))


def loop_block_move_backwards(*, client: RenoiseClient | None = None) -> SendResult:
    """Move the block loop one segment backwards."""
    return resolve(client).post("transport/loop/block_move_backwards")


def loop_block_move_forwards(*, client: RenoiseClient | None = None) -> SendResult:
    """Move the block loop one segment forwards."""
    return resolve(client).post("transport/loop/block_move_forwards")


def loop_pattern(on: bool, *, client: RenoiseClient | None = None) -> SendResult:
    """Enable or disable pattern looping."""
    return resolve(client).post("transport/loop/pattern", flag(on))
