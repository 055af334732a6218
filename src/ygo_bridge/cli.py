#!/usr/bin/env python3
"""
Command-line interface for inspecting bridge encodings.

Usage:
    python -m ygo_bridge.cli spec om2a --player 0
    python -m ygo_bridge.cli places 0xffffff9f
    python -m ygo_bridge.cli deck decks/sample.ydk
    python -m ygo_bridge.cli opcodes 12345 1073742080 1073741829
    python -m ygo_bridge.cli sum 4 1 2 3 4
    python -m ygo_bridge.cli sum 8 4/6 2 6
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from . import __version__
from .decklist import read_decks
from .encoding.opcodes import parse_codes_from_opcodes
from .encoding.placement import decode_placements
from .encoding.spec import decode_spec, decode_spec_for_player
from .enumeration.sum_utils import combinations_with_weight, combinations_with_weight2
from .errors import BridgeError
from .sentry_config import capture_exception, init_sentry
from .tables import location_to_string

logger = logging.getLogger(__name__)


def _int(value: str) -> int:
    """Accept decimal or 0x-prefixed integers."""
    return int(value, 0)


def _parse_weights(values: Sequence[str]) -> List[List[int]]:
    """Parse weights; "a/b" gives an item two alternative weights."""
    return [[int(part) for part in value.split("/")] for value in values]


def cmd_spec(args) -> dict:
    if args.player is None:
        location, sequence, sub_index = decode_spec(args.spec)
        controller = None
    else:
        controller, location, sequence, sub_index = decode_spec_for_player(args.player, args.spec)
    return {
        "spec": args.spec,
        "controller": controller,
        "location": location,
        "location_name": location_to_string(location),
        "sequence": sequence,
        "sub_index": sub_index,
    }


def cmd_places(args) -> dict:
    placements = decode_placements(args.mask, invert=args.invert)
    return {
        "mask": args.mask,
        "invert": args.invert,
        "placements": [p.name for p in placements],
    }


def cmd_deck(args) -> dict:
    deck = read_decks(args.path)
    return {
        "main": list(deck.main),
        "extra": list(deck.extra),
        "side": list(deck.side),
    }


def cmd_opcodes(args) -> dict:
    return {"codes": parse_codes_from_opcodes(args.opcodes)}


def cmd_sum(args) -> dict:
    weights = _parse_weights(args.weights)
    if any(len(w) > 1 for w in weights):
        combos = combinations_with_weight2(weights, args.target)
    else:
        combos = combinations_with_weight([w[0] for w in weights], args.target)
    return {"target": args.target, "combinations": combos}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ygo-bridge", description="Inspect ygopro-core bridge encodings")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("spec", help="Decode a card spec string")
    p.add_argument("spec")
    p.add_argument("--player", type=int, choices=(0, 1), default=None,
                   help="Viewing player; resolves a leading 'o' to the controller")
    p.set_defaults(func=cmd_spec)

    p = sub.add_parser("places", help="Expand a zone availability mask")
    p.add_argument("mask", type=_int)
    p.add_argument("--invert", action="store_true",
                   help="List the zones whose bit is set instead of clear")
    p.set_defaults(func=cmd_places)

    p = sub.add_parser("deck", help="Load a deck list file")
    p.add_argument("path")
    p.set_defaults(func=cmd_deck)

    p = sub.add_parser("opcodes", help="Extract card codes from an opcode stream")
    p.add_argument("opcodes", type=_int, nargs="+")
    p.set_defaults(func=cmd_opcodes)

    p = sub.add_parser("sum", help="Enumerate index subsets summing to a target")
    p.add_argument("target", type=int)
    p.add_argument("weights", nargs="+", help="Item weights, 'a/b' for two alternatives")
    p.set_defaults(func=cmd_sum)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the bridge CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_sentry(command=args.command, release=f"ygo-bridge@{__version__}")

    try:
        result = args.func(args)
    except BridgeError as e:
        logger.error("%s failed: %s", args.command, e)
        capture_exception(e)
        print(json.dumps({"error": type(e).__name__, "message": str(e)}), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
