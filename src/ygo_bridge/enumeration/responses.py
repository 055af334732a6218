"""
Response builders for the legacy ygopro-core engine.

Build the int or byte responses the engine expects after a selection message.
"""
import struct
from typing import Sequence, Tuple, Union

from ..encoding.placement import Placement, placement_to_location
from ..engine.bindings import (
    MSG_SELECT_IDLECMD, MSG_SELECT_BATTLECMD, MSG_SELECT_PLACE,
    MSG_SELECT_DISFIELD, MSG_SELECT_SUM, MSG_SELECT_OPTION,
    MSG_ANNOUNCE_CARD, MSG_ANNOUNCE_NUMBER, MSG_ANNOUNCE_ATTRIB,
)


# =============================================================================
# COMMAND TYPES
# =============================================================================
# MSG_SELECT_IDLECMD / MSG_SELECT_BATTLECMD respond with a single int:
#   (index << 16) | command
# where index is the position in the corresponding card list.

IDLE_RESPONSE_SUMMON = 0       # Normal summon
IDLE_RESPONSE_SPSUMMON = 1     # Special summon
IDLE_RESPONSE_REPOSITION = 2   # Change position
IDLE_RESPONSE_MSET = 3         # Monster set
IDLE_RESPONSE_SSET = 4         # Spell/trap set
IDLE_RESPONSE_ACTIVATE = 5     # Activate effect
IDLE_RESPONSE_TO_BATTLE = 6    # Go to battle phase
IDLE_RESPONSE_TO_END = 7       # End turn
IDLE_RESPONSE_SHUFFLE = 8      # Shuffle hand

BATTLE_RESPONSE_ACTIVATE = 0
BATTLE_RESPONSE_ATTACK = 1
BATTLE_RESPONSE_TO_MAIN2 = 2
BATTLE_RESPONSE_TO_END = 3

# =============================================================================
# RESPONSE FORMAT DOCUMENTATION
# =============================================================================
#
# MSG_SELECT_PLACE / MSG_SELECT_DISFIELD (18 / 24):
#   Response bytes: u8(player) + u8(location) + u8(sequence) per zone.
#   player is absolute, so opponent zones carry 1 - deciding player.
#
# MSG_SELECT_SUM (23):
#   Response bytes: u8(count) + count * u8(index), where indices count the
#   must-select cards first and the can-select cards after them.
#
# MSG_SELECT_OPTION (14) / MSG_ANNOUNCE_NUMBER (143):
#   Response int: 0-indexed option.
#
# MSG_ANNOUNCE_CARD (142):
#   Response int: declared card code.
#
# MSG_ANNOUNCE_ATTRIB (141):
#   Response int: mask of declared attributes.
#
# =============================================================================


def build_command_response(index: int, command: int) -> Tuple[int, bytes]:
    """Build an idle/battle command response.

    Returns:
        (value, bytes) - the response value and packed bytes.
    """
    value = (index << 16) | command
    return value, struct.pack("<I", value)


def build_select_place_response(player: int, placement: Placement) -> bytes:
    """Build the 3-byte response for a chosen zone."""
    opponent, location, sequence = placement_to_location(placement)
    owner = 1 - player if opponent else player
    return bytes([owner, location, sequence])


def build_select_sum_response(indices: Sequence[int]) -> bytes:
    """Build a count-prefixed index list response."""
    return bytes([len(indices), *indices])


def encode_response(action, player: int) -> Union[int, bytes]:
    """Encode a chosen LegalAction for EngineAdapter.set_response.

    Args:
        action: LegalAction produced by the actions module
        player: Deciding player (needed for absolute zone owners)

    Raises:
        ValueError: If the action's message has no known response format
    """
    msg = action.msg
    if msg in (MSG_SELECT_PLACE, MSG_SELECT_DISFIELD):
        return build_select_place_response(player, action.placement)
    if msg == MSG_SELECT_SUM:
        return build_select_sum_response(action.selection)
    if msg in (MSG_SELECT_IDLECMD, MSG_SELECT_BATTLECMD, MSG_SELECT_OPTION,
               MSG_ANNOUNCE_CARD, MSG_ANNOUNCE_NUMBER, MSG_ANNOUNCE_ATTRIB):
        return action.response
    raise ValueError(f"No response encoding for message {msg}")
