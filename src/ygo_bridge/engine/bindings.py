"""
CFFI bindings for the legacy ygopro-core C API.

Based on ocgapi.h and common.h from:
https://github.com/Fluorohydride/ygopro-core

The duel handle is an opaque intptr_t owned by EngineAdapter; nothing in this
module creates or destroys duels.

Usage:
    from ygo_bridge.engine.bindings import ffi, get_lib

    lib = get_lib()
    pduel = lib.create_duel(seed)
"""

from cffi import FFI

ffi = FFI()

ffi.cdef("""
    /*** DUEL LIFECYCLE ***/
    intptr_t create_duel(uint32_t seed);
    void start_duel(intptr_t pduel, int32_t options);
    void end_duel(intptr_t pduel);

    /*** SETUP ***/
    void set_player_info(intptr_t pduel, int32_t playerid, int32_t lp,
                         int32_t startcount, int32_t drawcount);
    void new_card(intptr_t pduel, uint32_t code, uint8_t owner, uint8_t playerid,
                  uint8_t location, uint8_t sequence, uint8_t position);

    /*** MESSAGE PUMP ***/
    uint32_t process(intptr_t pduel);
    int32_t get_message(intptr_t pduel, uint8_t* buf);
    void set_responsei(intptr_t pduel, int32_t value);
    void set_responseb(intptr_t pduel, uint8_t* buf);

    /*** QUERIES ***/
    int32_t query_card(intptr_t pduel, uint8_t playerid, uint8_t location,
                       uint8_t sequence, int32_t query_flag, uint8_t* buf,
                       int32_t use_cache);
    int32_t query_field_card(intptr_t pduel, uint8_t playerid, uint8_t location,
                             uint32_t query_flag, uint8_t* buf, int32_t use_cache);
""")


def load_library():
    """Load the ocgcore shared library.

    Uses paths.get_library_path() for platform detection and overrides.
    """
    from .paths import get_library_path
    lib_path = get_library_path()
    if not lib_path.exists():
        raise FileNotFoundError(
            f"ocgcore library not found at {lib_path}. "
            f"Build ygopro-core or set YGOPRO_LIB_PATH."
        )
    return ffi.dlopen(str(lib_path))


# Module-level library instance (lazy loaded)
_lib = None


def get_lib():
    """Get the library instance, loading it if necessary."""
    global _lib
    if _lib is None:
        _lib = load_library()
    return _lib


# Location constants (from common.h)
LOCATION_DECK = 0x01
LOCATION_HAND = 0x02
LOCATION_MZONE = 0x04
LOCATION_SZONE = 0x08
LOCATION_GRAVE = 0x10
LOCATION_REMOVED = 0x20
LOCATION_EXTRA = 0x40
LOCATION_OVERLAY = 0x80
LOCATION_ONFIELD = LOCATION_MZONE | LOCATION_SZONE

# Position constants
POS_NONE = 0x0  # overlay materials
POS_FACEUP_ATTACK = 0x1
POS_FACEDOWN_ATTACK = 0x2
POS_FACEUP_DEFENSE = 0x4
POS_FACEDOWN_DEFENSE = 0x8
POS_FACEUP = POS_FACEUP_ATTACK | POS_FACEUP_DEFENSE
POS_FACEDOWN = POS_FACEDOWN_ATTACK | POS_FACEDOWN_DEFENSE
POS_ATTACK = POS_FACEUP_ATTACK | POS_FACEDOWN_ATTACK
POS_DEFENSE = POS_FACEUP_DEFENSE | POS_FACEDOWN_DEFENSE

# Query flags used by the adapter (everything up to the link data)
QUERY_INFO_FLAGS = 0x781fff

# Card type flags
TYPE_MONSTER = 0x1
TYPE_SPELL = 0x2
TYPE_TRAP = 0x4
TYPE_NORMAL = 0x10
TYPE_EFFECT = 0x20
TYPE_FUSION = 0x40
TYPE_RITUAL = 0x80
TYPE_TRAPMONSTER = 0x100
TYPE_SPIRIT = 0x200
TYPE_UNION = 0x400
TYPE_DUAL = 0x800
TYPE_TUNER = 0x1000
TYPE_SYNCHRO = 0x2000
TYPE_TOKEN = 0x4000
TYPE_QUICKPLAY = 0x10000
TYPE_CONTINUOUS = 0x20000
TYPE_EQUIP = 0x40000
TYPE_FIELD = 0x80000
TYPE_COUNTER = 0x100000
TYPE_FLIP = 0x200000
TYPE_TOON = 0x400000
TYPE_XYZ = 0x800000
TYPE_PENDULUM = 0x1000000
TYPE_SPSUMMON = 0x2000000
TYPE_LINK = 0x4000000

# Attributes
ATTRIBUTE_NONE = 0x0  # tokens
ATTRIBUTE_EARTH = 0x01
ATTRIBUTE_WATER = 0x02
ATTRIBUTE_FIRE = 0x04
ATTRIBUTE_WIND = 0x08
ATTRIBUTE_LIGHT = 0x10
ATTRIBUTE_DARK = 0x20
ATTRIBUTE_DEVINE = 0x40

# Races
RACE_NONE = 0x0  # tokens
RACE_WARRIOR = 0x1
RACE_SPELLCASTER = 0x2
RACE_FAIRY = 0x4
RACE_FIEND = 0x8
RACE_ZOMBIE = 0x10
RACE_MACHINE = 0x20
RACE_AQUA = 0x40
RACE_PYRO = 0x80
RACE_ROCK = 0x100
RACE_WINDBEAST = 0x200
RACE_PLANT = 0x400
RACE_INSECT = 0x800
RACE_THUNDER = 0x1000
RACE_DRAGON = 0x2000
RACE_BEAST = 0x4000
RACE_BEASTWARRIOR = 0x8000
RACE_DINOSAUR = 0x10000
RACE_FISH = 0x20000
RACE_SEASERPENT = 0x40000
RACE_REPTILE = 0x80000
RACE_PSYCHO = 0x100000
RACE_DEVINE = 0x200000
RACE_CREATORGOD = 0x400000
RACE_WYRM = 0x800000
RACE_CYBERSE = 0x1000000
RACE_ILLUSION = 0x2000000

# Phases
PHASE_DRAW = 0x01
PHASE_STANDBY = 0x02
PHASE_MAIN1 = 0x04
PHASE_BATTLE_START = 0x08
PHASE_BATTLE_STEP = 0x10
PHASE_DAMAGE = 0x20
PHASE_DAMAGE_CAL = 0x40
PHASE_BATTLE = 0x80
PHASE_MAIN2 = 0x100
PHASE_END = 0x200

# Duel options
DUEL_ATTACK_FIRST_TURN = 0x02
DUEL_OBSOLETE_RULING = 0x08
DUEL_PSEUDO_SHUFFLE = 0x10
DUEL_SIMPLE_AI = 0x40
DUEL_RETURN_DECK_TOP = 0x80

# process() status: low 28 bits are the pending message length, the high
# nibble flags whether the engine waits for a response or the duel has ended.
PROCESSOR_BUFFER_LEN = 0x0fffffff
PROCESSOR_FLAG = 0xf0000000
PROCESSOR_WAITING = 0x10000000
PROCESSOR_END = 0x20000000

# =============================================================================
# Message Types (from ygopro-core/common.h)
# =============================================================================

# Core messages
MSG_RETRY = 1
MSG_HINT = 2
MSG_WAITING = 3
MSG_START = 4
MSG_WIN = 5
MSG_UPDATE_DATA = 6
MSG_UPDATE_CARD = 7

# Selection messages (require player response)
MSG_SELECT_BATTLECMD = 10
MSG_SELECT_IDLECMD = 11
MSG_SELECT_EFFECTYN = 12
MSG_SELECT_YESNO = 13
MSG_SELECT_OPTION = 14
MSG_SELECT_CARD = 15
MSG_SELECT_CHAIN = 16
MSG_SELECT_PLACE = 18
MSG_SELECT_POSITION = 19
MSG_SELECT_TRIBUTE = 20
MSG_SORT_CHAIN = 21
MSG_SELECT_COUNTER = 22
MSG_SELECT_SUM = 23
MSG_SELECT_DISFIELD = 24
MSG_SORT_CARD = 25
MSG_SELECT_UNSELECT_CARD = 26

# Deck/hand operations
MSG_CONFIRM_DECKTOP = 30
MSG_CONFIRM_CARDS = 31
MSG_SHUFFLE_DECK = 32
MSG_SHUFFLE_HAND = 33
MSG_REFRESH_DECK = 34
MSG_SWAP_GRAVE_DECK = 35
MSG_SHUFFLE_SET_CARD = 36
MSG_REVERSE_DECK = 37
MSG_DECK_TOP = 38
MSG_SHUFFLE_EXTRA = 39

# Turn/phase messages
MSG_NEW_TURN = 40
MSG_NEW_PHASE = 41
MSG_CONFIRM_EXTRATOP = 42

# Card movement
MSG_MOVE = 50
MSG_POS_CHANGE = 53
MSG_SET = 54
MSG_SWAP = 55
MSG_FIELD_DISABLED = 56

# Summoning messages
MSG_SUMMONING = 60
MSG_SUMMONED = 61
MSG_SPSUMMONING = 62
MSG_SPSUMMONED = 63
MSG_FLIPSUMMONING = 64
MSG_FLIPSUMMONED = 65

# Chain messages
MSG_CHAINING = 70
MSG_CHAINED = 71
MSG_CHAIN_SOLVING = 72
MSG_CHAIN_SOLVED = 73
MSG_CHAIN_END = 74
MSG_CHAIN_NEGATED = 75
MSG_CHAIN_DISABLED = 76

# Selection feedback
MSG_CARD_SELECTED = 80
MSG_RANDOM_SELECTED = 81
MSG_BECOME_TARGET = 83

# LP and damage
MSG_DRAW = 90
MSG_DAMAGE = 91
MSG_RECOVER = 92
MSG_EQUIP = 93
MSG_LPUPDATE = 94
MSG_UNEQUIP = 95
MSG_CARD_TARGET = 96
MSG_CANCEL_TARGET = 97
MSG_PAY_LPCOST = 100
MSG_ADD_COUNTER = 101
MSG_REMOVE_COUNTER = 102

# Battle
MSG_ATTACK = 110
MSG_BATTLE = 111
MSG_ATTACK_DISABLED = 112
MSG_DAMAGE_STEP_START = 113
MSG_DAMAGE_STEP_END = 114

# Effect messages
MSG_MISSED_EFFECT = 120
MSG_BE_CHAIN_TARGET = 121
MSG_CREATE_RELATION = 122
MSG_RELEASE_RELATION = 123

# Random events
MSG_TOSS_COIN = 130
MSG_TOSS_DICE = 131
MSG_ROCK_PAPER_SCISSORS = 132
MSG_HAND_RES = 133

# Announcements
MSG_ANNOUNCE_RACE = 140
MSG_ANNOUNCE_ATTRIB = 141
MSG_ANNOUNCE_CARD = 142
MSG_ANNOUNCE_NUMBER = 143

# Hints and UI
MSG_CARD_HINT = 160
MSG_TAG_SWAP = 161
MSG_RELOAD_FIELD = 162
MSG_AI_NAME = 163
MSG_SHOW_HINT = 164
MSG_PLAYER_HINT = 165
MSG_MATCH_KILL = 170
MSG_CUSTOM_MSG = 180
