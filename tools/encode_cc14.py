#!/usr/bin/env python3
"""Encode a 14-bit Control Change as its two short messages.

Usage:
  # Print wire bytes (MSB message first):
  python tools/encode_cc14.py 5 2 1057
  #   B5 02 08
  #   B5 22 21

  # Print mido messages instead:
  python tools/encode_cc14.py 5 7 16383 --mido

  # Send to a MIDI output port:
  python tools/encode_cc14.py --list-ports
  python tools/encode_cc14.py 0 1 8192 --port "IAC Driver Bus 1"

Channels are 0-based (0-15) as on the wire.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

import mido

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from shortmsg import (  # noqa: E402
    U14,
    Channel,
    ControlChange14BitMessage,
    ControllerNumber,
    MidoMessageFactory,
)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode a 14-bit Control Change as two short messages",
    )
    parser.add_argument("channel", type=int, nargs="?", help="MIDI channel 0-15")
    parser.add_argument(
        "msb_controller", type=int, nargs="?", help="MSB controller number 0-31"
    )
    parser.add_argument("value", type=int, nargs="?", help="14-bit value 0-16383")
    parser.add_argument(
        "--mido",
        action="store_true",
        help="Print mido messages instead of hex bytes",
    )
    parser.add_argument(
        "--port",
        default=None,
        help="Send both messages to this MIDI output port",
    )
    parser.add_argument(
        "--list-ports",
        action="store_true",
        help="List MIDI output ports and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> int:
    parser = _build_arg_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.list_ports:
        ports = mido.get_output_names()
        if not ports:
            print("No MIDI output ports found.")
        for name in ports:
            print(f"  {name}")
        return 0

    if args.channel is None or args.msb_controller is None or args.value is None:
        parser.error("channel, msb_controller and value are required")

    try:
        msg = ControlChange14BitMessage(
            Channel(args.channel),
            ControllerNumber(args.msb_controller),
            U14(args.value),
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.port is not None:
        with mido.open_output(args.port) as port:
            for out in msg.to_messages(MidoMessageFactory):
                port.send(out)
        print(f"Sent {msg!r} -> {args.port}")
        return 0

    if args.mido:
        for out in msg.to_messages(MidoMessageFactory):
            print(out)
    else:
        for out in msg.to_messages():
            print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
