"""renoiseosc - command line entry point.

Examples:
    renoiseosc tempo 132
    renoiseosc --port 8001 prefx-volume 0.5 --track 2
    renoiseosc send /renoise/song/bpm i 140
"""

import argparse
import logging
import sys
from pathlib import Path

from renoiseosc.commands.catalog import COMMANDS, get_command, positional_types, run_command
from renoiseosc.core.client import RenoiseClient
from renoiseosc.core.config import DEFAULT_CONFIG, load_settings
from renoiseosc.core.errors import RenoiseOscError
from renoiseosc.core.osc import BOOLEAN_TAGS
from renoiseosc.core.result import SendResult, SendStatus

logger = logging.getLogger("renoiseosc")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the command line tool."""
    level = logging.DEBUG if debug else logging.INFO
    format_str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=format_str,
        datefmt="%H:%M:%S",
    )


def parse_value(text: str) -> int | float | bool | str:
    """Parse a command line value: int, float, true/false, else string."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        pass
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return text


# Blobs and MIDI messages are written as hex on the command line ("00903c7f").
TAG_PARSERS = {
    "i": int,
    "h": int,
    "f": float,
    "d": float,
    "s": str,
    "b": bytes.fromhex,
    "m": bytes.fromhex,
}


def parse_tagged(type_tags: str, texts: list[str]) -> list:
    """Convert raw `send` values by their OSC type tags.

    Values cover either every tag or only the payload-bearing ones, the
    same two forms the encoder accepts. Extra values are passed through
    unchanged so the encoder reports the arity error.

    Raises:
        ValueError: If a value does not parse as its tag's type.
    """
    if len(texts) == len(type_tags):
        slots = type_tags
    else:
        slots = "".join(t for t in type_tags if t not in BOOLEAN_TAGS)
    values = [TAG_PARSERS.get(tag, parse_value)(text) for tag, text in zip(slots, texts)]
    values.extend(texts[len(slots) :])
    return values


def parse_command_args(name: str, texts: list[str]) -> list:
    """Convert raw values for a catalog command.

    Parameters annotated as ``str`` keep the raw text; the rest go
    through ``parse_value``.

    Raises:
        KeyError: If no command has that name.
    """
    types = positional_types(get_command(name))
    return [
        text if i < len(types) and types[i] is str else parse_value(text)
        for i, text in enumerate(texts)
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="renoiseosc",
        description="Send OSC commands to Renoise",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help=f"Path to config JSON file (default: {DEFAULT_CONFIG} if present)",
    )
    parser.add_argument("--host", help="Renoise host (overrides config)")
    parser.add_argument("--port", "-p", type=int, help="Renoise OSC port (overrides config)")
    parser.add_argument("--instrument", type=int, help="Instrument index (default: selected)")
    parser.add_argument("--track", type=int, help="Track index (default: selected)")
    parser.add_argument("--device", type=int, help="Device index (default: selected)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "command",
        help="Command name ('send' for a raw message, 'list' to show commands)",
    )
    parser.add_argument("args", nargs="*", help="Command arguments")
    return parser


def _report(result: SendResult) -> int:
    if result.status is SendStatus.SENT:
        logger.info("Sent %s (%d bytes)", result.address, result.size)
        return 0
    if result.status is SendStatus.TRANSPORT_ERROR:
        logger.error("%s", result.error)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    setup_logging(args.debug)

    if args.command == "list":
        for name in sorted(COMMANDS):
            print(name.replace("_", "-"))
        return 0

    config_path = args.config
    if config_path is None and DEFAULT_CONFIG.exists():
        config_path = DEFAULT_CONFIG

    try:
        settings = load_settings(config_path)
        client = RenoiseClient.from_settings(settings)
        if args.host is not None:
            client.set_host(args.host)
        if args.port is not None:
            client.set_port(args.port)
    except RenoiseOscError as e:
        logger.error("%s", e)
        return 2

    try:
        if args.command == "send":
            if not args.args:
                parser.error("send needs an OSC address")
            tags = args.args[1] if len(args.args) > 1 else ""
            values = parse_tagged(tags, args.args[2:])
            result = client.send_message(args.args[0], tags, *values)
        else:
            result = run_command(
                args.command,
                parse_command_args(args.command, args.args),
                client,
                instrument=args.instrument,
                track=args.track,
                device=args.device,
            )
    except KeyError:
        logger.error("Unknown command: %s (try 'list')", args.command)
        return 2
    except (RenoiseOscError, TypeError, ValueError) as e:
        logger.error("Invalid arguments for %s: %s", args.command, e)
        return 2
    finally:
        client.close()

    return _report(result)


if __name__ == "__main__":
    sys.exit(main())
