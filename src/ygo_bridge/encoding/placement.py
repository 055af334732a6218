"""
Placement enum and MSG_SELECT_PLACE bitmask decoding.

The engine reports free zones as a 32-bit mask of four 8-bit groups:

    bits  0-7   own monster zones      (7 slots, bit 7 unused)
    bits  8-15  own spell/trap zones   (8 slots)
    bits 16-23  opponent monster zones (7 slots, bit 23 unused)
    bits 24-31  opponent spell/trap zones

A set bit means the slot is blocked.
"""

from enum import IntEnum
from typing import List, Tuple

from ..engine.bindings import LOCATION_MZONE, LOCATION_SZONE


class Placement(IntEnum):
    """One physical slot a card or action can target."""
    NONE = 0
    MZONE1 = 1
    MZONE2 = 2
    MZONE3 = 3
    MZONE4 = 4
    MZONE5 = 5
    MZONE6 = 6
    MZONE7 = 7
    SZONE1 = 8
    SZONE2 = 9
    SZONE3 = 10
    SZONE4 = 11
    SZONE5 = 12
    SZONE6 = 13
    SZONE7 = 14
    SZONE8 = 15
    OP_MZONE1 = 16
    OP_MZONE2 = 17
    OP_MZONE3 = 18
    OP_MZONE4 = 19
    OP_MZONE5 = 20
    OP_MZONE6 = 21
    OP_MZONE7 = 22
    OP_SZONE1 = 23
    OP_SZONE2 = 24
    OP_SZONE3 = 25
    OP_SZONE4 = 26
    OP_SZONE5 = 27
    OP_SZONE6 = 28
    OP_SZONE7 = 29
    OP_SZONE8 = 30


# (first ordinal, slot count, opponent?, location) per 8-bit group
_GROUPS: Tuple[Tuple[int, int, bool, int], ...] = (
    (Placement.MZONE1, 7, False, LOCATION_MZONE),
    (Placement.SZONE1, 8, False, LOCATION_SZONE),
    (Placement.OP_MZONE1, 7, True, LOCATION_MZONE),
    (Placement.OP_SZONE1, 8, True, LOCATION_SZONE),
)


def decode_placements(flag: int, invert: bool = False) -> List[Placement]:
    """Expand a zone mask into placements, group-major then bit-minor.

    Args:
        flag: 32-bit mask from MSG_SELECT_PLACE / MSG_SELECT_DISFIELD
        invert: Return the placements whose bit is set instead of clear

    Returns:
        Ordered placements. An all-ones mask gives [] (all 30 with invert).
    """
    flag &= 0xFFFFFFFF
    placements = []
    for group, (base, slots, _, _) in enumerate(_GROUPS):
        bits = (flag >> (8 * group)) & 0xFF
        for i in range(slots):
            blocked = bool(bits & (1 << i))
            if blocked == invert:
                placements.append(Placement(base + i))
    return placements


def placement_to_location(placement: Placement) -> Tuple[bool, int, int]:
    """Return (is_opponent, location, sequence) for a field placement.

    Raises:
        ValueError: For Placement.NONE
    """
    for base, slots, opponent, location in _GROUPS:
        if base <= placement < base + slots:
            return opponent, location, placement - base
    raise ValueError(f"{placement!r} does not name a field slot")


def placement_from_location(opponent: bool, location: int, sequence: int) -> Placement:
    """Inverse of placement_to_location.

    Raises:
        ValueError: If location is not MZONE/SZONE or sequence is out of range
    """
    for base, slots, group_opponent, group_location in _GROUPS:
        if group_opponent == bool(opponent) and group_location == location:
            if not 0 <= sequence < slots:
                raise ValueError(f"sequence {sequence} out of range for location 0x{location:x}")
            return Placement(base + sequence)
    raise ValueError(f"location 0x{location:x} has no placements")
