"""Command-line interface for port probing."""

from __future__ import annotations

import argparse
import logging
import sys

from ._internal.logging import configure_logging
from .core import PortUnavailableError, probe_port
from .types import PortProtocol, ProbeResult

logger = logging.getLogger(__name__)


def _format_result(result: ProbeResult, verbose: bool = False) -> str:
    """Format a ProbeResult for display.

    Args:
        result: The ProbeResult object.
        verbose: If True, show the result as JSON.

    Returns:
        Formatted string for display.
    """
    if verbose:
        return result.model_dump_json(indent=2)
    return result.port_str


def cmd_probe(args: argparse.Namespace) -> int:
    """Handle the tcp, udp and dual commands."""
    protocol = PortProtocol(args.protocol)
    result = ProbeResult(protocol=protocol, port=probe_port(protocol))
    print(_format_result(result, args.verbose))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="portprobe",
        description="Print an ephemeral port that is currently unused on this host",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the result as JSON",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=sorted(logging.getLevelNamesMapping()),
        default=None,
        help="Log level (default: PORTPROBE_LOG_LEVEL env var or WARNING)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    helps = {
        PortProtocol.TCP: "Probe a free TCP port",
        PortProtocol.UDP: "Probe a free UDP port",
        PortProtocol.DUAL: "Probe a port free for both TCP and UDP",
    }
    for protocol, help_text in helps.items():
        sub = subparsers.add_parser(protocol.value, help=help_text)
        sub.set_defaults(func=cmd_probe, protocol=protocol.value)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(log_level=args.log_level)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        logger.debug("Executing command: %s", args.command)
        return args.func(args)
    except PortUnavailableError as e:
        logger.error("Error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
