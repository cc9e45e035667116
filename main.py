"""
Command-line entry point.

Runs one send interception over an .eml file: scans it, asks for
confirmation on the terminal when something was found, and exits 0 when
the send is allowed and 1 when it is blocked.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from send_guard.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig
from send_guard.gate.confirmation import ConfirmationSurface
from send_guard.gate.interception import InterceptionGate
from send_guard.integrations.console.surface import ConsoleConfirmationSurface, ScriptedConfirmationSurface
from send_guard.integrations.eml.message import EmlMessageSource
from send_guard.scanning.models import Verdict
from send_guard.utils.safe_logging import configure_safe_logging

logger = logging.getLogger(__name__)


def positive_seconds(value: str) -> float:
    """argparse type for a strictly positive number of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive, got {value}")
    return seconds


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Screen an outgoing .eml message before sending")

    parser.add_argument(
        "message",
        type=Path,
        help="Path to the .eml file to screen"
    )
    parser.add_argument(
        "--answer",
        type=str,
        default=None,
        help="Answer the confirmation non-interactively (only 'allow' approves)"
    )
    parser.add_argument(
        "--timeout",
        type=positive_seconds,
        default=None,
        help="Seconds to wait for a confirmation before blocking (default: wait)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def build_surface(answer) -> ConfirmationSurface:
    if answer is not None:
        return ScriptedConfirmationSurface(answer)
    return ConsoleConfirmationSurface()


async def run(args) -> Verdict:
    config: GuardConfig = DEFAULT_GUARD_CONFIG
    if args.timeout is not None:
        config = config.with_overrides(confirmation_timeout=args.timeout)

    gate = InterceptionGate(build_surface(args.answer), config)
    source = EmlMessageSource.from_path(args.message)
    return await gate.on_message_send(
        source, lambda allow: logger.debug(f"Host completion called with allow={allow}")
    )


def main(argv=None) -> int:
    load_dotenv()
    args = parse_arguments(argv)
    configure_safe_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file
    )

    if not args.message.is_file():
        logger.error(f"Message file not found: {args.message}")
        print(Verdict.BLOCK.value.upper())
        return 1

    try:
        verdict = asyncio.run(run(args))
    except Exception as e:
        # Reading or parsing the message happens before the gate takes over
        logger.error(f"Could not screen {args.message}, blocking send: {e}", exc_info=True)
        verdict = Verdict.BLOCK
    print(verdict.value.upper())
    return 0 if verdict is Verdict.ALLOW else 1


if __name__ == "__main__":
    sys.exit(main())
