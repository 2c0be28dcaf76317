"""Name -> function table of every catalog command, used by the CLI."""

import inspect
from collections.abc import Callable

from renoiseosc.commands import instrument, song, track, transport, trigger
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.result import SendResult

COMMANDS: dict[str, Callable[..., SendResult]] = {
    fn.__name__: fn
    for module in (song, instrument, track, transport, trigger)
    for name, fn in inspect.getmembers(module, inspect.isfunction)
    if fn.__module__ == module.__name__ and not name.startswith("_")
}


def get_command(name: str) -> Callable[..., SendResult]:
    """Look up a command by name ("tempo", "edit-mode", "edit_mode").

    Raises:
        KeyError: If no command has that name.
    """
    key = name.replace("-", "_")
    if key not in COMMANDS:
        raise KeyError(name)
    return COMMANDS[key]


def selection_options(fn: Callable[..., SendResult]) -> set[str]:
    """Keyword-only selection parameters a command accepts."""
    params = inspect.signature(fn).parameters
    return {n for n in ("instrument", "track", "device") if n in params}


def positional_types(fn: Callable[..., SendResult]) -> list:
    """Annotations of a command's positional parameters, in order."""
    params = inspect.signature(fn).parameters.values()
    return [p.annotation for p in params if p.kind is p.POSITIONAL_OR_KEYWORD]


def run_command(
    name: str,
    args: list,
    client: RenoiseClient,
    **selection: int,
) -> SendResult:
    """Run a catalog command with positional ``args``.

    Selection keywords (instrument/track/device) the command doesn't take
    are ignored.
    """
    fn = get_command(name)
    accepted = selection_options(fn)
    kwargs = {k: v for k, v in selection.items() if k in accepted and v is not None}
    return fn(*args, client=client, **kwargs)
