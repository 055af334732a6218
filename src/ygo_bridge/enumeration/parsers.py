"""
Message parsers for the legacy ygopro-core wire format.

Parse binary message bodies (the bytes after the MSG_* id) into Python
dictionaries. All multi-byte integers are little-endian.
"""
import io
import struct
from typing import Union, Dict, Any, List, BinaryIO


# =============================================================================
# BINARY READERS
# =============================================================================

def read_u8(buf: BinaryIO) -> int:
    return struct.unpack("<B", buf.read(1))[0]


def read_u16(buf: BinaryIO) -> int:
    return struct.unpack("<H", buf.read(2))[0]


def read_u32(buf: BinaryIO) -> int:
    return struct.unpack("<I", buf.read(4))[0]


def read_i32(buf: BinaryIO) -> int:
    return struct.unpack("<i", buf.read(4))[0]


def _as_stream(data: Union[bytes, BinaryIO]) -> BinaryIO:
    return io.BytesIO(data) if isinstance(data, (bytes, bytearray)) else data


def _read_card(buf: BinaryIO) -> Dict[str, int]:
    return {
        "code": read_u32(buf),
        "con": read_u8(buf),
        "loc": read_u8(buf),
        "seq": read_u8(buf),
    }


def _read_cardlist(buf: BinaryIO, desc: bool = False) -> List[Dict[str, int]]:
    cards = []
    count = read_u8(buf)
    for _ in range(count):
        card = _read_card(buf)
        if desc:
            card["desc"] = read_u32(buf)
        cards.append(card)
    return cards


# =============================================================================
# MESSAGE PARSERS
# =============================================================================

def parse_idle(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_SELECT_IDLECMD to extract all legal main-phase actions."""
    buf = _as_stream(data)

    player = read_u8(buf)
    return {
        "player": player,
        "summonable": _read_cardlist(buf),
        "spsummon": _read_cardlist(buf),
        "repos": _read_cardlist(buf),
        "mset": _read_cardlist(buf),
        "sset": _read_cardlist(buf),
        "activatable": _read_cardlist(buf, desc=True),
        "to_bp": read_u8(buf),
        "to_ep": read_u8(buf),
        "can_shuffle": read_u8(buf),
    }


def parse_battle(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_SELECT_BATTLECMD.

    Format:
    - player (1 byte)
    - activatable: count (1 byte), each code/con/loc/seq + desc (4 bytes)
    - attackable: count (1 byte), each code/con/loc/seq + direct flag (1 byte)
    - to_m2, to_ep (1 byte each)
    """
    buf = _as_stream(data)

    player = read_u8(buf)
    activatable = _read_cardlist(buf, desc=True)

    attackable = []
    count = read_u8(buf)
    for _ in range(count):
        card = _read_card(buf)
        card["direct_attackable"] = read_u8(buf)
        attackable.append(card)

    return {
        "player": player,
        "activatable": activatable,
        "attackable": attackable,
        "to_m2": read_u8(buf),
        "to_ep": read_u8(buf),
    }


def parse_select_place(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_SELECT_PLACE / MSG_SELECT_DISFIELD."""
    buf = _as_stream(data)

    player = read_u8(buf)
    count = read_u8(buf)
    flag = read_u32(buf)

    return {
        "player": player,
        "count": count,
        "flag": flag,
    }


def parse_select_option(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_SELECT_OPTION.

    Format:
    - player (1 byte)
    - count (1 byte)
    - options[] (count * 4 bytes, u32 desc for each option)
    """
    buf = _as_stream(data)

    player = read_u8(buf)
    count = read_u8(buf)
    options = [{"index": i, "desc": read_u32(buf)} for i in range(count)]

    return {
        "player": player,
        "count": count,
        "options": options,
    }


def _read_sum_card(buf: BinaryIO, index: int) -> Dict[str, int]:
    card = _read_card(buf)
    sum_param = read_u32(buf)
    # Low 16 bits: primary value; high 16 bits: alternative value
    card.update({
        "index": index,
        "sum_param": sum_param,
        "value": sum_param & 0xFFFF,
        "level2": (sum_param >> 16) & 0xFFFF,
    })
    return card


def parse_select_sum(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_SELECT_SUM for material/card selection.

    Format:
    - select_mode (1 byte): 0 = exactly equal, 1 = at least equal
    - player (1 byte)
    - target_sum (4 bytes)
    - min, max (1 byte each)
    - must_select: count (1 byte), each code/con/loc/seq + sum_param (4 bytes)
    - can_select: count (1 byte), same entries
    """
    buf = _as_stream(data)

    select_mode = read_u8(buf)
    player = read_u8(buf)
    target_sum = read_u32(buf)
    select_min = read_u8(buf)
    select_max = read_u8(buf)

    must_count = read_u8(buf)
    must_select = [_read_sum_card(buf, i) for i in range(must_count)]
    can_count = read_u8(buf)
    can_select = [_read_sum_card(buf, i) for i in range(can_count)]

    return {
        "player": player,
        "select_mode": select_mode,
        "target_sum": target_sum,
        "min": select_min,
        "max": select_max,
        "must_select": must_select,
        "can_select": can_select,
    }


def parse_announce_card(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_ANNOUNCE_CARD: player, count, then count u32 opcodes."""
    buf = _as_stream(data)

    player = read_u8(buf)
    count = read_u8(buf)
    return {
        "player": player,
        "opcodes": [read_u32(buf) for _ in range(count)],
    }


def parse_announce_number(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_ANNOUNCE_NUMBER: player, count, then count u32 values."""
    buf = _as_stream(data)

    player = read_u8(buf)
    count = read_u8(buf)
    return {
        "player": player,
        "numbers": [read_u32(buf) for _ in range(count)],
    }


def parse_announce_attrib(data: Union[bytes, BinaryIO]) -> Dict[str, Any]:
    """Parse MSG_ANNOUNCE_ATTRIB: player, how many to declare, allowed mask."""
    buf = _as_stream(data)

    player = read_u8(buf)
    count = read_u8(buf)
    available = read_u32(buf)
    return {
        "player": player,
        "count": count,
        "available": available,
    }
