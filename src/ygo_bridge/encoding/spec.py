"""
Spec codec: compact zone/slot strings for a card's placement.

Grammar: [o]<zone-letter><1-based slot>[sub-letter]

    "h3"    third card in hand
    "m1a"   first overlay material under the monster in zone 1
    "os2"   opponent's spell/trap zone 2
    "12"    twelfth card of the deck (no letter)

The sub-letter only appears for overlay materials and is decoded back into
the LOCATION_OVERLAY bit, so encode -> decode -> encode is lossless.
"""

from typing import Tuple

from ..engine.bindings import (
    LOCATION_DECK, LOCATION_HAND, LOCATION_MZONE, LOCATION_SZONE,
    LOCATION_GRAVE, LOCATION_REMOVED, LOCATION_EXTRA, LOCATION_OVERLAY,
)
from ..errors import MalformedSpec


# Priority order matters: the first matching bit wins.
_ZONE_LETTERS = (
    (LOCATION_HAND, "h"),
    (LOCATION_MZONE, "m"),
    (LOCATION_SZONE, "s"),
    (LOCATION_GRAVE, "g"),
    (LOCATION_REMOVED, "r"),
    (LOCATION_EXTRA, "x"),
)

_LETTER_ZONES = {letter: location for location, letter in _ZONE_LETTERS}

OPPONENT_PREFIX = "o"

_DIGITS = frozenset("0123456789")


def encode_spec(location: int, sequence: int, sub_index: int = 0, opponent: bool = False) -> str:
    """Render a placement as a spec string.

    Args:
        location: LOCATION_* flags of the card (OVERLAY may be combined)
        sequence: 0-based slot index
        sub_index: Overlay material position, used only with LOCATION_OVERLAY
        opponent: Prefix with 'o' (card belongs to the viewer's opponent)

    Returns:
        Spec string such as "h3", "m1a" or "os2".
    """
    spec = ""
    for flag, letter in _ZONE_LETTERS:
        if location & flag:
            spec = letter
            break
    spec += str(sequence + 1)
    if location & LOCATION_OVERLAY:
        spec += chr(ord("a") + sub_index)
    if opponent:
        spec = OPPONENT_PREFIX + spec
    return spec


def decode_spec(spec: str) -> Tuple[int, int, int]:
    """Parse a spec string without an opponent prefix.

    Returns:
        (location, sequence, sub_index); location carries LOCATION_OVERLAY
        when a sub-letter is present.

    Raises:
        MalformedSpec: Empty spec, unknown zone letter, or missing slot digits
    """
    if not spec:
        raise MalformedSpec(spec, "Empty spec")

    head = spec[0]
    if head in _LETTER_ZONES:
        location = _LETTER_ZONES[head]
        offset = 1
    elif head in _DIGITS:
        location = LOCATION_DECK
        offset = 0
    else:
        raise MalformedSpec(spec, "Invalid spec")

    end = offset
    while end < len(spec) and spec[end] in _DIGITS:
        end += 1
    if end == offset:
        raise MalformedSpec(spec, "Spec has no slot number")
    sequence = int(spec[offset:end]) - 1

    sub_index = 0
    if end < len(spec):
        sub_index = ord(spec[end]) - ord("a")
        location |= LOCATION_OVERLAY
    return location, sequence, sub_index


def decode_spec_for_player(player: int, spec: str) -> Tuple[int, int, int, int]:
    """Parse a spec as seen by player, resolving the 'o' prefix.

    Returns:
        (controller, location, sequence, sub_index)
    """
    if player not in (0, 1):
        raise ValueError(f"player must be 0 or 1, got {player}")
    controller = player
    if spec.startswith(OPPONENT_PREFIX):
        controller = 1 - player
        spec = spec[1:]
    location, sequence, sub_index = decode_spec(spec)
    return controller, location, sequence, sub_index
