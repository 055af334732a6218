"""
Legal action construction.

Each builder takes a parsed message (see parsers.py) and returns the full list
of LegalAction values the agent may choose from. A LegalAction carries both a
structured description (spec, act, phase, placement, ...) and the protocol
echo fields responses.py needs to rebuild the engine response.

Actions are created fresh per decision point and never outlive it.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

from ..encoding.opcodes import parse_codes_from_opcodes
from ..encoding.placement import Placement, decode_placements
from ..encoding.spec import encode_spec
from ..engine.bindings import (
    MSG_SELECT_IDLECMD, MSG_SELECT_BATTLECMD, MSG_SELECT_PLACE,
    MSG_SELECT_DISFIELD, MSG_SELECT_SUM, MSG_SELECT_OPTION,
    MSG_ANNOUNCE_CARD, MSG_ANNOUNCE_NUMBER, MSG_ANNOUNCE_ATTRIB,
)
from ..tables import ATTRIBUTE_NAMES, system_string_to_id
from .responses import (
    IDLE_RESPONSE_SUMMON, IDLE_RESPONSE_SPSUMMON, IDLE_RESPONSE_REPOSITION,
    IDLE_RESPONSE_MSET, IDLE_RESPONSE_SSET, IDLE_RESPONSE_ACTIVATE,
    IDLE_RESPONSE_TO_BATTLE, IDLE_RESPONSE_TO_END,
    BATTLE_RESPONSE_ACTIVATE, BATTLE_RESPONSE_ATTACK,
    BATTLE_RESPONSE_TO_MAIN2, BATTLE_RESPONSE_TO_END,
)
from .sum_utils import combinations, find_valid_sum_combinations

logger = logging.getLogger(__name__)


class ActionAct(IntEnum):
    """What a selected card does."""
    NONE = 0
    SET = 1             # spell/trap set
    REPOSITION = 2
    SPECIAL_SUMMON = 3
    NORMAL_SUMMON = 4
    MSET = 5            # monster set (zone set)
    ATTACK = 6
    DIRECT_ATTACK = 7
    ACTIVATE = 8
    CANCEL = 9


class ActionPhase(IntEnum):
    """Target phase of a phase-change action."""
    NONE = 0
    BATTLE = 1
    MAIN2 = 2
    END = 3


@dataclass(frozen=True)
class LegalAction:
    """One selectable move.

    Attributes:
        spec: Spec of the acting card, relative to the deciding player
        act: ActionAct of the card
        phase: Target phase for phase changes
        placement: Target zone for place prompts
        number: Declared number
        attribute: Declared ATTRIBUTE_* mask
        effect: Effect-description index for activations
        msg: MSG_* id the action answers
        response: Index or command value echoed back to the engine
        code: Card passcode involved, 0 if none
        selection: Chosen indices for multi-select prompts
    """
    spec: str = ""
    act: ActionAct = ActionAct.NONE
    phase: ActionPhase = ActionPhase.NONE
    placement: Placement = Placement.NONE
    number: int = 0
    attribute: int = 0
    effect: int = -1
    msg: int = 0
    response: int = -1
    code: int = 0
    selection: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "spec": self.spec,
            "act": self.act.name,
            "phase": self.phase.name,
            "placement": self.placement.name,
            "number": self.number,
            "attribute": self.attribute,
            "effect": self.effect,
            "msg": self.msg,
            "response": self.response,
            "code": self.code,
            "selection": list(self.selection),
        }


def card_spec(player: int, card: Dict[str, int]) -> str:
    """Spec of a parsed card entry as seen by player."""
    return encode_spec(card["loc"], card["seq"], 0, opponent=card["con"] != player)


def effect_index(code: int, desc: int) -> int:
    """Map an effect description to a small index.

    Card-specific descriptions are (code << 4) + n and map to n; engine
    system strings map through the system string registry.
    """
    if desc == 0:
        return 0
    if code and desc >> 4 == code:
        return desc & 0xF
    if desc < 10000:
        return system_string_to_id(desc)
    # Description borrowed from another card's script
    return desc & 0xF


# =============================================================================
# MSG_SELECT_IDLECMD / MSG_SELECT_BATTLECMD
# =============================================================================

_IDLE_LISTS = (
    ("summonable", ActionAct.NORMAL_SUMMON, IDLE_RESPONSE_SUMMON),
    ("spsummon", ActionAct.SPECIAL_SUMMON, IDLE_RESPONSE_SPSUMMON),
    ("repos", ActionAct.REPOSITION, IDLE_RESPONSE_REPOSITION),
    ("mset", ActionAct.MSET, IDLE_RESPONSE_MSET),
    ("sset", ActionAct.SET, IDLE_RESPONSE_SSET),
)


def idle_actions(idle: Dict[str, Any]) -> List[LegalAction]:
    """All actions of a parsed MSG_SELECT_IDLECMD."""
    player = idle["player"]
    actions = []
    for key, act, cmd in _IDLE_LISTS:
        for i, card in enumerate(idle[key]):
            actions.append(LegalAction(
                spec=card_spec(player, card), act=act, msg=MSG_SELECT_IDLECMD,
                response=(i << 16) | cmd, code=card["code"],
            ))
    for i, card in enumerate(idle["activatable"]):
        actions.append(LegalAction(
            spec=card_spec(player, card), act=ActionAct.ACTIVATE,
            effect=effect_index(card["code"], card["desc"]),
            msg=MSG_SELECT_IDLECMD, response=(i << 16) | IDLE_RESPONSE_ACTIVATE,
            code=card["code"],
        ))
    if idle["to_bp"]:
        actions.append(LegalAction(
            phase=ActionPhase.BATTLE, msg=MSG_SELECT_IDLECMD,
            response=IDLE_RESPONSE_TO_BATTLE,
        ))
    if idle["to_ep"]:
        actions.append(LegalAction(
            phase=ActionPhase.END, msg=MSG_SELECT_IDLECMD,
            response=IDLE_RESPONSE_TO_END,
        ))
    return actions


def battle_actions(battle: Dict[str, Any]) -> List[LegalAction]:
    """All actions of a parsed MSG_SELECT_BATTLECMD."""
    player = battle["player"]
    actions = []
    for i, card in enumerate(battle["activatable"]):
        actions.append(LegalAction(
            spec=card_spec(player, card), act=ActionAct.ACTIVATE,
            effect=effect_index(card["code"], card["desc"]),
            msg=MSG_SELECT_BATTLECMD,
            response=(i << 16) | BATTLE_RESPONSE_ACTIVATE, code=card["code"],
        ))
    for i, card in enumerate(battle["attackable"]):
        act = ActionAct.DIRECT_ATTACK if card["direct_attackable"] else ActionAct.ATTACK
        actions.append(LegalAction(
            spec=card_spec(player, card), act=act, msg=MSG_SELECT_BATTLECMD,
            response=(i << 16) | BATTLE_RESPONSE_ATTACK, code=card["code"],
        ))
    if battle["to_m2"]:
        actions.append(LegalAction(
            phase=ActionPhase.MAIN2, msg=MSG_SELECT_BATTLECMD,
            response=BATTLE_RESPONSE_TO_MAIN2,
        ))
    if battle["to_ep"]:
        actions.append(LegalAction(
            phase=ActionPhase.END, msg=MSG_SELECT_BATTLECMD,
            response=BATTLE_RESPONSE_TO_END,
        ))
    return actions


# =============================================================================
# MSG_SELECT_PLACE / MSG_SELECT_DISFIELD
# =============================================================================

def place_actions(place: Dict[str, Any], msg: int = MSG_SELECT_PLACE) -> List[LegalAction]:
    """One action per free zone in a parsed place prompt."""
    if msg not in (MSG_SELECT_PLACE, MSG_SELECT_DISFIELD):
        raise ValueError(f"place_actions cannot answer message {msg}")
    return [
        LegalAction(placement=p, msg=msg, response=int(p))
        for p in decode_placements(place["flag"])
    ]


# =============================================================================
# MSG_SELECT_SUM
# =============================================================================

def sum_actions(sum_msg: Dict[str, Any]) -> List[LegalAction]:
    """One action per valid material selection in a parsed MSG_SELECT_SUM."""
    player = sum_msg["player"]
    must_select = sum_msg["must_select"]
    can_select = sum_msg["can_select"]
    combos = find_valid_sum_combinations(
        must_select, can_select, sum_msg["target_sum"],
        min_select=sum_msg["min"], max_select=sum_msg["max"],
        mode=sum_msg["select_mode"],
    )
    if not combos:
        logger.warning(
            "No valid SELECT_SUM selection for target %d over %d cards",
            sum_msg["target_sum"], len(can_select),
        )
    # Must-select slots come first; the rest index into can_select directly
    must_indices = tuple(range(len(must_select)))
    actions = []
    for i, combo in enumerate(combos):
        specs = [card_spec(player, can_select[j]) for j in combo]
        actions.append(LegalAction(
            spec=",".join(specs), msg=MSG_SELECT_SUM, response=i,
            selection=must_indices + tuple(combo),
        ))
    return actions


# =============================================================================
# ANNOUNCEMENTS / OPTIONS
# =============================================================================

def announce_card_actions(announce: Dict[str, Any]) -> List[LegalAction]:
    """One action per declarable card code.

    Raises:
        MalformedOpcodes: If the opcode stream is malformed
    """
    codes = parse_codes_from_opcodes(announce["opcodes"])
    return [
        LegalAction(msg=MSG_ANNOUNCE_CARD, response=code, code=code)
        for code in codes
    ]


def announce_number_actions(announce: Dict[str, Any]) -> List[LegalAction]:
    return [
        LegalAction(number=n, msg=MSG_ANNOUNCE_NUMBER, response=i)
        for i, n in enumerate(announce["numbers"])
    ]


def announce_attrib_actions(announce: Dict[str, Any]) -> List[LegalAction]:
    """One action per set of `count` declarable attributes."""
    available = [a for a in sorted(ATTRIBUTE_NAMES) if a & announce["available"]]
    actions = []
    for combo in combinations(len(available), announce["count"]):
        mask = 0
        for j in combo:
            mask |= available[j]
        actions.append(LegalAction(
            attribute=mask, msg=MSG_ANNOUNCE_ATTRIB, response=mask,
        ))
    return actions


def option_actions(option_msg: Dict[str, Any], code: Optional[int] = None) -> List[LegalAction]:
    """One action per option of a parsed MSG_SELECT_OPTION.

    Args:
        code: Card whose effect offers the options, used to index card
            descriptions
    """
    actions = []
    for option in option_msg["options"]:
        desc = option["desc"]
        actions.append(LegalAction(
            effect=effect_index(code or 0, desc), msg=MSG_SELECT_OPTION,
            response=option["index"],
        ))
    return actions
