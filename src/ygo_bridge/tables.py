"""
Static string tables and dense id registries for engine enums.

Everything here is built once at import time and exposed read-only. Display
helpers (*_to_string) fall back to "unknown"; id accessors (*_to_id) raise
LookupMiss because an unmapped value means the domain table is out of date.
"""

from types import MappingProxyType
from typing import List

from .engine.bindings import (
    LOCATION_DECK, LOCATION_HAND, LOCATION_MZONE, LOCATION_SZONE,
    LOCATION_GRAVE, LOCATION_REMOVED, LOCATION_EXTRA,
    POS_NONE, POS_FACEUP_ATTACK, POS_FACEDOWN_ATTACK, POS_ATTACK,
    POS_FACEUP_DEFENSE, POS_FACEUP, POS_FACEDOWN_DEFENSE, POS_FACEDOWN,
    POS_DEFENSE,
    ATTRIBUTE_NONE, ATTRIBUTE_EARTH, ATTRIBUTE_WATER, ATTRIBUTE_FIRE,
    ATTRIBUTE_WIND, ATTRIBUTE_LIGHT, ATTRIBUTE_DARK, ATTRIBUTE_DEVINE,
    RACE_NONE, RACE_WARRIOR, RACE_SPELLCASTER, RACE_FAIRY, RACE_FIEND,
    RACE_ZOMBIE, RACE_MACHINE, RACE_AQUA, RACE_PYRO, RACE_ROCK,
    RACE_WINDBEAST, RACE_PLANT, RACE_INSECT, RACE_THUNDER, RACE_DRAGON,
    RACE_BEAST, RACE_BEASTWARRIOR, RACE_DINOSAUR, RACE_FISH,
    RACE_SEASERPENT, RACE_REPTILE, RACE_PSYCHO, RACE_DEVINE,
    RACE_CREATORGOD, RACE_WYRM, RACE_CYBERSE, RACE_ILLUSION,
    TYPE_MONSTER, TYPE_SPELL, TYPE_TRAP, TYPE_NORMAL, TYPE_EFFECT,
    TYPE_FUSION, TYPE_RITUAL, TYPE_TRAPMONSTER, TYPE_SPIRIT, TYPE_UNION,
    TYPE_DUAL, TYPE_TUNER, TYPE_SYNCHRO, TYPE_TOKEN, TYPE_QUICKPLAY,
    TYPE_CONTINUOUS, TYPE_EQUIP, TYPE_FIELD, TYPE_COUNTER, TYPE_FLIP,
    TYPE_TOON, TYPE_XYZ, TYPE_PENDULUM, TYPE_SPSUMMON, TYPE_LINK,
    PHASE_DRAW, PHASE_STANDBY, PHASE_MAIN1, PHASE_BATTLE_START,
    PHASE_BATTLE_STEP, PHASE_DAMAGE, PHASE_DAMAGE_CAL, PHASE_BATTLE,
    PHASE_MAIN2, PHASE_END,
    MSG_RETRY, MSG_HINT, MSG_WIN,
    MSG_SELECT_BATTLECMD, MSG_SELECT_IDLECMD, MSG_SELECT_EFFECTYN,
    MSG_SELECT_YESNO, MSG_SELECT_OPTION, MSG_SELECT_CARD, MSG_SELECT_CHAIN,
    MSG_SELECT_PLACE, MSG_SELECT_POSITION, MSG_SELECT_TRIBUTE,
    MSG_SELECT_COUNTER, MSG_SELECT_SUM, MSG_SELECT_DISFIELD, MSG_SORT_CARD,
    MSG_SELECT_UNSELECT_CARD,
    MSG_CONFIRM_DECKTOP, MSG_CONFIRM_CARDS, MSG_SHUFFLE_DECK,
    MSG_SHUFFLE_HAND, MSG_SWAP_GRAVE_DECK, MSG_SHUFFLE_SET_CARD,
    MSG_REVERSE_DECK, MSG_DECK_TOP, MSG_SHUFFLE_EXTRA,
    MSG_NEW_TURN, MSG_NEW_PHASE, MSG_CONFIRM_EXTRATOP,
    MSG_MOVE, MSG_POS_CHANGE, MSG_SET, MSG_SWAP, MSG_FIELD_DISABLED,
    MSG_SUMMONING, MSG_SUMMONED, MSG_SPSUMMONING, MSG_SPSUMMONED,
    MSG_FLIPSUMMONING, MSG_FLIPSUMMONED,
    MSG_CHAINING, MSG_CHAINED, MSG_CHAIN_SOLVING, MSG_CHAIN_SOLVED,
    MSG_CHAIN_END, MSG_CHAIN_NEGATED, MSG_CHAIN_DISABLED,
    MSG_RANDOM_SELECTED, MSG_BECOME_TARGET,
    MSG_DRAW, MSG_DAMAGE, MSG_RECOVER, MSG_EQUIP, MSG_LPUPDATE,
    MSG_CARD_TARGET, MSG_CANCEL_TARGET, MSG_PAY_LPCOST,
    MSG_ADD_COUNTER, MSG_REMOVE_COUNTER,
    MSG_ATTACK, MSG_BATTLE, MSG_ATTACK_DISABLED,
    MSG_DAMAGE_STEP_START, MSG_DAMAGE_STEP_END,
    MSG_MISSED_EFFECT,
    MSG_TOSS_COIN, MSG_TOSS_DICE, MSG_ROCK_PAPER_SCISSORS, MSG_HAND_RES,
    MSG_ANNOUNCE_RACE, MSG_ANNOUNCE_ATTRIB, MSG_ANNOUNCE_CARD,
    MSG_ANNOUNCE_NUMBER,
    MSG_CARD_HINT, MSG_TAG_SWAP, MSG_RELOAD_FIELD, MSG_AI_NAME,
    MSG_SHOW_HINT, MSG_PLAYER_HINT, MSG_MATCH_KILL, MSG_CUSTOM_MSG,
)
from .registry import make_ids, lookup_or_fail


# =============================================================================
# STRING TABLES
# =============================================================================

MSG_NAMES = MappingProxyType({
    MSG_RETRY: "retry",
    MSG_HINT: "hint",
    MSG_WIN: "win",
    MSG_SELECT_BATTLECMD: "select_battlecmd",
    MSG_SELECT_IDLECMD: "select_idlecmd",
    MSG_SELECT_EFFECTYN: "select_effectyn",
    MSG_SELECT_YESNO: "select_yesno",
    MSG_SELECT_OPTION: "select_option",
    MSG_SELECT_CARD: "select_card",
    MSG_SELECT_CHAIN: "select_chain",
    MSG_SELECT_PLACE: "select_place",
    MSG_SELECT_POSITION: "select_position",
    MSG_SELECT_TRIBUTE: "select_tribute",
    MSG_SELECT_COUNTER: "select_counter",
    MSG_SELECT_SUM: "select_sum",
    MSG_SELECT_DISFIELD: "select_disfield",
    MSG_SORT_CARD: "sort_card",
    MSG_SELECT_UNSELECT_CARD: "select_unselect_card",
    MSG_CONFIRM_DECKTOP: "confirm_decktop",
    MSG_CONFIRM_CARDS: "confirm_cards",
    MSG_SHUFFLE_DECK: "shuffle_deck",
    MSG_SHUFFLE_HAND: "shuffle_hand",
    MSG_SWAP_GRAVE_DECK: "swap_grave_deck",
    MSG_SHUFFLE_SET_CARD: "shuffle_set_card",
    MSG_REVERSE_DECK: "reverse_deck",
    MSG_DECK_TOP: "deck_top",
    MSG_SHUFFLE_EXTRA: "shuffle_extra",
    MSG_NEW_TURN: "new_turn",
    MSG_NEW_PHASE: "new_phase",
    MSG_CONFIRM_EXTRATOP: "confirm_extratop",
    MSG_MOVE: "move",
    MSG_POS_CHANGE: "pos_change",
    MSG_SET: "set",
    MSG_SWAP: "swap",
    MSG_FIELD_DISABLED: "field_disabled",
    MSG_SUMMONING: "summoning",
    MSG_SUMMONED: "summoned",
    MSG_SPSUMMONING: "spsummoning",
    MSG_SPSUMMONED: "spsummoned",
    MSG_FLIPSUMMONING: "flipsummoning",
    MSG_FLIPSUMMONED: "flipsummoned",
    MSG_CHAINING: "chaining",
    MSG_CHAINED: "chained",
    MSG_CHAIN_SOLVING: "chain_solving",
    MSG_CHAIN_SOLVED: "chain_solved",
    MSG_CHAIN_END: "chain_end",
    MSG_CHAIN_NEGATED: "chain_negated",
    MSG_CHAIN_DISABLED: "chain_disabled",
    MSG_RANDOM_SELECTED: "random_selected",
    MSG_BECOME_TARGET: "become_target",
    MSG_DRAW: "draw",
    MSG_DAMAGE: "damage",
    MSG_RECOVER: "recover",
    MSG_EQUIP: "equip",
    MSG_LPUPDATE: "lpupdate",
    MSG_CARD_TARGET: "card_target",
    MSG_CANCEL_TARGET: "cancel_target",
    MSG_PAY_LPCOST: "pay_lpcost",
    MSG_ADD_COUNTER: "add_counter",
    MSG_REMOVE_COUNTER: "remove_counter",
    MSG_ATTACK: "attack",
    MSG_BATTLE: "battle",
    MSG_ATTACK_DISABLED: "attack_disabled",
    MSG_DAMAGE_STEP_START: "damage_step_start",
    MSG_DAMAGE_STEP_END: "damage_step_end",
    MSG_MISSED_EFFECT: "missed_effect",
    MSG_TOSS_COIN: "toss_coin",
    MSG_TOSS_DICE: "toss_dice",
    MSG_ROCK_PAPER_SCISSORS: "rock_paper_scissors",
    MSG_HAND_RES: "hand_res",
    MSG_ANNOUNCE_RACE: "announce_race",
    MSG_ANNOUNCE_ATTRIB: "announce_attrib",
    MSG_ANNOUNCE_CARD: "announce_card",
    MSG_ANNOUNCE_NUMBER: "announce_number",
    MSG_CARD_HINT: "card_hint",
    MSG_TAG_SWAP: "tag_swap",
    MSG_RELOAD_FIELD: "reload_field",
    MSG_AI_NAME: "ai_name",
    MSG_SHOW_HINT: "show_hint",
    MSG_PLAYER_HINT: "player_hint",
    MSG_MATCH_KILL: "match_kill",
    MSG_CUSTOM_MSG: "custom_msg",
})

SYSTEM_STRINGS = MappingProxyType({
    # announce type
    1050: "Monster",
    1051: "Spell",
    1052: "Trap",
    1054: "Normal",
    1055: "Effect",
    1056: "Fusion",
    1057: "Ritual",
    1058: "Trap Monsters",
    1059: "Spirit",
    1060: "Union",
    1061: "Gemini",
    1062: "Tuner",
    1063: "Synchro",
    1064: "Token",
    1066: "Quick-Play",
    1067: "Continuous",
    1068: "Equip",
    1069: "Field",
    1070: "Counter",
    1071: "Flip",
    1072: "Toon",
    1073: "Xyz",
    1074: "Pendulum",
    1075: "Special Summon",
    1076: "Link",
    1080: "(N/A)",
    1081: "Extra Monster Zone",
    # actions
    1150: "Activate",
    1151: "Normal Summon",
    1152: "Special Summon",
    1153: "Set",
    1154: "Flip Summon",
    1155: "To Defense",
    1156: "To Attack",
    1157: "Attack",
    1158: "View",
    1159: "S/T Set",
    1160: "Put in Pendulum Zone",
    1161: "Do Effect",
    1162: "Reset Effect",
    1163: "Pendulum Summon",
    1164: "Synchro Summon",
    1165: "Xyz Summon",
    1166: "Link Summon",
    1167: "Tribute Summon",
    1168: "Ritual Summon",
    1169: "Fusion Summon",
    1190: "Add to hand",
    1191: "Send to GY",
    1192: "Banish",
    1193: "Return to Deck",
    # prompts
    1: "Normal Summon",
    30: "Replay rules apply. Continue this attack?",
    31: "Attack directly with this monster?",
    80: "Start Step of the Battle Phase.",
    81: "During the End Phase.",
    90: "Conduct this Normal Summon without Tributing?",
    91: "Use additional Summon?",
    92: "Tribute your opponent's monster?",
    93: "Continue selecting Materials?",
    94: "Activate this card's effect now?",
    95: "Use the effect of [%ls]?",
    96: "Use the effect of [%ls] to avoid destruction?",
    97: "Place [%ls] to a Spell & Trap Zone?",
    98: "Tribute a monster(s) your opponent controls?",
    200: "From [%ls], activate [%ls]?",
    203: "Chain another card or effect?",
    210: "Continue selecting?",
    218: "Pay LP by Effect of [%ls], instead?",
    219: "Detach Xyz material by Effect of [%ls], instead?",
    220: "Remove Counter(s) by Effect of [%ls], instead?",
    221: "On [%ls], Activate Trigger Effect of [%ls]?",
    222: "Activate Trigger Effect?",
    1621: "Attack Negated",
    1622: "[%ls] Missed timing",
})

POSITION_NAMES = MappingProxyType({
    POS_NONE: "none",
    POS_FACEUP_ATTACK: "face-up attack",
    POS_FACEDOWN_ATTACK: "face-down attack",
    POS_ATTACK: "attack",
    POS_FACEUP_DEFENSE: "face-up defense",
    POS_FACEUP: "face-up",
    POS_FACEDOWN_DEFENSE: "face-down defense",
    POS_FACEDOWN: "face-down",
    POS_DEFENSE: "defense",
})

ATTRIBUTE_NAMES = MappingProxyType({
    ATTRIBUTE_NONE: "None",
    ATTRIBUTE_EARTH: "Earth",
    ATTRIBUTE_WATER: "Water",
    ATTRIBUTE_FIRE: "Fire",
    ATTRIBUTE_WIND: "Wind",
    ATTRIBUTE_LIGHT: "Light",
    ATTRIBUTE_DARK: "Dark",
    ATTRIBUTE_DEVINE: "Divine",
})

RACE_NAMES = MappingProxyType({
    RACE_NONE: "None",
    RACE_WARRIOR: "Warrior",
    RACE_SPELLCASTER: "Spellcaster",
    RACE_FAIRY: "Fairy",
    RACE_FIEND: "Fiend",
    RACE_ZOMBIE: "Zombie",
    RACE_MACHINE: "Machine",
    RACE_AQUA: "Aqua",
    RACE_PYRO: "Pyro",
    RACE_ROCK: "Rock",
    RACE_WINDBEAST: "Windbeast",
    RACE_PLANT: "Plant",
    RACE_INSECT: "Insect",
    RACE_THUNDER: "Thunder",
    RACE_DRAGON: "Dragon",
    RACE_BEAST: "Beast",
    RACE_BEASTWARRIOR: "Beast Warrior",
    RACE_DINOSAUR: "Dinosaur",
    RACE_FISH: "Fish",
    RACE_SEASERPENT: "Sea Serpent",
    RACE_REPTILE: "Reptile",
    RACE_PSYCHO: "Psycho",
    RACE_DEVINE: "Divine",
    RACE_CREATORGOD: "Creator God",
    RACE_WYRM: "Wyrm",
    RACE_CYBERSE: "Cyberse",
    RACE_ILLUSION: "Illusion",
})

TYPE_NAMES = MappingProxyType({
    TYPE_MONSTER: "Monster",
    TYPE_SPELL: "Spell",
    TYPE_TRAP: "Trap",
    TYPE_NORMAL: "Normal",
    TYPE_EFFECT: "Effect",
    TYPE_FUSION: "Fusion",
    TYPE_RITUAL: "Ritual",
    TYPE_TRAPMONSTER: "Trap Monster",
    TYPE_SPIRIT: "Spirit",
    TYPE_UNION: "Union",
    TYPE_DUAL: "Dual",
    TYPE_TUNER: "Tuner",
    TYPE_SYNCHRO: "Synchro",
    TYPE_TOKEN: "Token",
    TYPE_QUICKPLAY: "Quick-play",
    TYPE_CONTINUOUS: "Continuous",
    TYPE_EQUIP: "Equip",
    TYPE_FIELD: "Field",
    TYPE_COUNTER: "Counter",
    TYPE_FLIP: "Flip",
    TYPE_TOON: "Toon",
    TYPE_XYZ: "XYZ",
    TYPE_PENDULUM: "Pendulum",
    TYPE_SPSUMMON: "Special",
    TYPE_LINK: "Link",
})

PHASE_NAMES = MappingProxyType({
    PHASE_DRAW: "draw phase",
    PHASE_STANDBY: "standby phase",
    PHASE_MAIN1: "main1 phase",
    PHASE_BATTLE_START: "battle start phase",
    PHASE_BATTLE_STEP: "battle step phase",
    PHASE_DAMAGE: "damage phase",
    PHASE_DAMAGE_CAL: "damage calculation phase",
    PHASE_BATTLE: "battle phase",
    PHASE_MAIN2: "main2 phase",
    PHASE_END: "end phase",
})

LOCATION_NAMES = MappingProxyType({
    LOCATION_DECK: "Deck",
    LOCATION_HAND: "Hand",
    LOCATION_MZONE: "Main Monster Zone",
    LOCATION_SZONE: "Spell & Trap Zone",
    LOCATION_GRAVE: "Graveyard",
    LOCATION_REMOVED: "Banished",
    LOCATION_EXTRA: "Extra Deck",
})

WIN_REASONS = MappingProxyType({
    0x0: "Surrendered",
    0x1: "LP reached 0",
    0x2: "Cards can't be drawn",
    0x3: "Time limit up",
    0x4: "Lost connection",
})

# Messages that ask the agent for a decision, in action-feature order
SELECTION_MSGS = (
    MSG_SELECT_IDLECMD, MSG_SELECT_CHAIN, MSG_SELECT_CARD,
    MSG_SELECT_TRIBUTE, MSG_SELECT_POSITION, MSG_SELECT_EFFECTYN,
    MSG_SELECT_YESNO, MSG_SELECT_BATTLECMD, MSG_SELECT_UNSELECT_CARD,
    MSG_SELECT_OPTION, MSG_SELECT_PLACE, MSG_SELECT_SUM,
    MSG_SELECT_DISFIELD, MSG_ANNOUNCE_ATTRIB, MSG_ANNOUNCE_NUMBER,
    MSG_ANNOUNCE_CARD,
)


# =============================================================================
# DISPLAY HELPERS
# =============================================================================

def msg_to_string(msg: int) -> str:
    return MSG_NAMES.get(msg, "unknown_msg")


def attribute_to_string(attribute: int) -> str:
    return ATTRIBUTE_NAMES.get(attribute, "unknown")


def phase_to_string(phase: int) -> str:
    return PHASE_NAMES.get(phase, "unknown")


def position_to_string(position: int) -> str:
    return POSITION_NAMES.get(position, "unknown")


def location_to_string(location: int) -> str:
    return LOCATION_NAMES.get(location, "unknown")


def race_to_string(race: int) -> str:
    return RACE_NAMES.get(race, "unknown")


def reason_to_string(reason: int) -> str:
    """Describe a MSG_WIN reason byte."""
    return WIN_REASONS.get(reason, "Unknown")


def get_system_string(desc: int) -> str:
    """Look up an engine system string; unknown ids raise LookupMiss."""
    return lookup_or_fail(SYSTEM_STRINGS, desc, "system_string")


# =============================================================================
# ID REGISTRIES
# =============================================================================

# Ids 0..15 are left free for per-card effect descriptions.
SYSTEM_STRING_IDS = make_ids(SYSTEM_STRINGS, id_offset=16, name="system_string_to_id")
LOCATION_IDS = make_ids(LOCATION_NAMES, id_offset=1, name="location_to_id")
POSITION_IDS = make_ids(POSITION_NAMES, name="position_to_id")
ATTRIBUTE_IDS = make_ids(ATTRIBUTE_NAMES, name="attribute_to_id")
RACE_IDS = make_ids(RACE_NAMES, name="race_to_id")
PHASE_IDS = make_ids(PHASE_NAMES, name="phase_to_id")
MSG_IDS = make_ids(SELECTION_MSGS, id_offset=1, name="msg_to_id")


def system_string_to_id(desc: int) -> int:
    return SYSTEM_STRING_IDS.lookup(desc)


def location_to_id(location: int) -> int:
    return LOCATION_IDS.lookup(location)


def position_to_id(position: int) -> int:
    return POSITION_IDS.lookup(position)


def attribute_to_id(attribute: int) -> int:
    return ATTRIBUTE_IDS.lookup(attribute)


def race_to_id(race: int) -> int:
    return RACE_IDS.lookup(race)


def phase_to_id(phase: int) -> int:
    return PHASE_IDS.lookup(phase)


def msg_to_id(msg: int) -> int:
    return MSG_IDS.lookup(msg)


def type_to_ids(type_mask: int) -> List[int]:
    """Multi-hot encoding of a type bitmask, one slot per type flag ascending."""
    return [1 if type_mask & flag else 0 for flag in sorted(TYPE_NAMES)]
