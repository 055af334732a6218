"""
Unit tests for enumeration/parsers.py.

Message bodies are built byte by byte in the engine's little-endian layout.
"""

import io
import struct

import pytest

from ygo_bridge.engine.bindings import LOCATION_GRAVE, LOCATION_HAND, LOCATION_MZONE
from ygo_bridge.enumeration.parsers import (
    parse_announce_attrib,
    parse_announce_card,
    parse_announce_number,
    parse_battle,
    parse_idle,
    parse_select_option,
    parse_select_place,
    parse_select_sum,
    read_i32,
    read_u16,
    read_u32,
    read_u8,
)

from conftest import CAESAR, ENGRAVER, REQUIEM, card_entry


class TestBinaryReaders:

    def test_readers_little_endian(self):
        buf = io.BytesIO(bytes([0x01, 0x34, 0x12, 0x78, 0x56, 0x34, 0x12, 0xFF, 0xFF, 0xFF, 0xFF]))
        assert read_u8(buf) == 0x01
        assert read_u16(buf) == 0x1234
        assert read_u32(buf) == 0x12345678
        assert read_i32(buf) == -1

    def test_short_buffer_raises(self):
        with pytest.raises(struct.error):
            read_u32(io.BytesIO(b"\x01\x02"))


class TestParseIdle:

    def test_full_message(self):
        data = (
            bytes([0])                                         # player
            + bytes([1]) + card_entry(CAESAR, 0, LOCATION_HAND, 0)     # summonable
            + bytes([0])                                       # spsummon
            + bytes([0])                                       # repos
            + bytes([1]) + card_entry(CAESAR, 0, LOCATION_HAND, 0)     # mset
            + bytes([0])                                       # sset
            + bytes([1]) + card_entry(ENGRAVER, 0, LOCATION_GRAVE, 2)
            + struct.pack("<I", ENGRAVER << 4 | 1)             # activatable + desc
            + bytes([1, 1, 0])                                 # to_bp, to_ep, can_shuffle
        )
        idle = parse_idle(data)
        assert idle["player"] == 0
        assert idle["summonable"] == [{"code": CAESAR, "con": 0, "loc": LOCATION_HAND, "seq": 0}]
        assert idle["spsummon"] == []
        assert idle["repos"] == []
        assert len(idle["mset"]) == 1
        assert idle["sset"] == []
        assert idle["activatable"] == [{
            "code": ENGRAVER, "con": 0, "loc": LOCATION_GRAVE, "seq": 2,
            "desc": ENGRAVER << 4 | 1,
        }]
        assert idle["to_bp"] == 1
        assert idle["to_ep"] == 1
        assert idle["can_shuffle"] == 0

    def test_accepts_stream(self):
        data = bytes([1, 0, 0, 0, 0, 0, 0, 0, 1, 0])
        idle = parse_idle(io.BytesIO(data))
        assert idle["player"] == 1
        assert idle["to_ep"] == 1


class TestParseBattle:

    def test_attackers(self):
        data = (
            bytes([1])
            + bytes([0])                                            # activatable
            + bytes([2])
            + card_entry(CAESAR, 1, LOCATION_MZONE, 0) + bytes([0])
            + card_entry(REQUIEM, 1, LOCATION_MZONE, 3) + bytes([1])
            + bytes([1, 0])
        )
        battle = parse_battle(data)
        assert battle["player"] == 1
        assert battle["activatable"] == []
        assert [c["code"] for c in battle["attackable"]] == [CAESAR, REQUIEM]
        assert [c["direct_attackable"] for c in battle["attackable"]] == [0, 1]
        assert battle["to_m2"] == 1
        assert battle["to_ep"] == 0


class TestParseSimpleMessages:

    def test_select_place(self):
        data = bytes([0, 1]) + struct.pack("<I", 0xFFFFFF9F)
        assert parse_select_place(data) == {"player": 0, "count": 1, "flag": 0xFFFFFF9F}

    def test_select_option(self):
        data = bytes([0, 2]) + struct.pack("<II", 1150, ENGRAVER << 4)
        option = parse_select_option(data)
        assert option["count"] == 2
        assert option["options"] == [
            {"index": 0, "desc": 1150},
            {"index": 1, "desc": ENGRAVER << 4},
        ]

    def test_announce_card(self):
        data = bytes([1, 2]) + struct.pack("<II", CAESAR, 0x40000100)
        assert parse_announce_card(data) == {"player": 1, "opcodes": [CAESAR, 0x40000100]}

    def test_announce_number(self):
        data = bytes([0, 3]) + struct.pack("<III", 1, 2, 3)
        assert parse_announce_number(data)["numbers"] == [1, 2, 3]

    def test_announce_attrib(self):
        data = bytes([0, 1]) + struct.pack("<I", 0x30)
        assert parse_announce_attrib(data) == {"player": 0, "count": 1, "available": 0x30}


class TestParseSelectSum:

    def test_must_and_can(self):
        data = (
            bytes([0, 1]) + struct.pack("<I", 8) + bytes([1, 3])
            + bytes([1]) + card_entry(REQUIEM, 1, LOCATION_MZONE, 0) + struct.pack("<I", 2)
            + bytes([2])
            + card_entry(ENGRAVER, 1, LOCATION_MZONE, 1) + struct.pack("<I", 6)
            + card_entry(CAESAR, 1, LOCATION_MZONE, 2) + struct.pack("<I", (6 << 16) | 4)
        )
        msg = parse_select_sum(data)
        assert msg["select_mode"] == 0
        assert msg["player"] == 1
        assert msg["target_sum"] == 8
        assert msg["min"] == 1
        assert msg["max"] == 3
        assert [c["code"] for c in msg["must_select"]] == [REQUIEM]
        assert msg["must_select"][0]["value"] == 2
        can = msg["can_select"]
        assert [c["index"] for c in can] == [0, 1]
        assert can[0]["value"] == 6
        assert can[0]["level2"] == 0
        assert can[1]["value"] == 4
        assert can[1]["level2"] == 6
