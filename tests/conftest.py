"""Shared pytest fixtures for ygo-bridge tests."""

import struct

import pytest

from ygo_bridge.engine.bindings import ffi


# Card passcode constants for tests
CAESAR = 79559912
REQUIEM = 2463794
ENGRAVER = 60764609
SP_LITTLE_KNIGHT = 29301450


def card_entry(code, con, loc, seq):
    """Pack one code/con/loc/seq card entry as the engine sends it."""
    return struct.pack("<IBBB", code, con, loc, seq)


def field_record(code, controller=0, location=0, sequence=0, position=0,
                 type_=0, attack=0, defense=0, level=0, race=0, attribute=0):
    """Pack one 32-byte field query record."""
    return struct.pack("<I4B6I", code, controller, location, sequence, position,
                       type_, attack, defense, level, race, attribute)


class FakeLib:
    """Stand-in for the ocgcore library.

    Records every call and writes canned bytes into the cffi buffers the
    adapter passes in.
    """

    def __init__(self, pduel=0x1234, message=b"", field=b"", card=b"",
                 card_length=None):
        self.pduel = pduel
        self.message = message
        self.field = field
        self.card = card
        self.card_length = len(card) if card_length is None else card_length
        self.calls = []
        self.responseb = None

    def create_duel(self, seed):
        self.calls.append(("create_duel", seed))
        return self.pduel

    def end_duel(self, pduel):
        self.calls.append(("end_duel", pduel))

    def set_player_info(self, pduel, player, lp, start_count, draw_count):
        self.calls.append(("set_player_info", pduel, player, lp, start_count, draw_count))

    def new_card(self, pduel, code, owner, player, location, sequence, position):
        self.calls.append(("new_card", pduel, code, owner, player, location, sequence, position))

    def start_duel(self, pduel, options):
        self.calls.append(("start_duel", pduel, options))

    def process(self, pduel):
        self.calls.append(("process", pduel))
        return 0x10000000 | len(self.message)

    def get_message(self, pduel, buf):
        self.calls.append(("get_message", pduel))
        if self.message:
            ffi.memmove(buf, self.message, len(self.message))
        return len(self.message)

    def set_responsei(self, pduel, value):
        self.calls.append(("set_responsei", pduel, value))

    def set_responseb(self, pduel, buf):
        self.calls.append(("set_responseb", pduel))
        self.responseb = bytes(ffi.buffer(buf, 64))

    def query_field_card(self, pduel, player, location, flags, buf, use_cache):
        self.calls.append(("query_field_card", pduel, player, location, flags, use_cache))
        if self.field:
            ffi.memmove(buf, self.field, len(self.field))
        return len(self.field)

    def query_card(self, pduel, player, location, sequence, flags, buf, use_cache):
        self.calls.append(("query_card", pduel, player, location, sequence, flags, use_cache))
        if self.card:
            ffi.memmove(buf, self.card, len(self.card))
        return self.card_length


@pytest.fixture
def fake_lib():
    """Fake engine library with no pending data."""
    return FakeLib()


@pytest.fixture
def deck_file(tmp_path):
    """Write a deck file from main/extra/side code lists and return its path."""
    def _write(main, extra=(), side=(), name="deck.ydk"):
        lines = ["#created by tests", "#main"]
        lines += [str(c) for c in main]
        if extra:
            lines.append("#extra")
            lines += [str(c) for c in extra]
        if side:
            lines.append("!side")
            lines += [str(c) for c in side]
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_sum_msg():
    """Parsed MSG_SELECT_SUM: Level 2 tuner (must) plus Level 6 / Level 4."""
    return {
        "player": 0,
        "select_mode": 0,
        "target_sum": 8,
        "min": 0,
        "max": 99,
        "must_select": [
            {"code": REQUIEM, "con": 0, "loc": 0x04, "seq": 0, "index": 0,
             "value": 2, "level2": 0},
        ],
        "can_select": [
            {"code": ENGRAVER, "con": 0, "loc": 0x04, "seq": 1, "index": 0,
             "value": 6, "level2": 0},
            {"code": CAESAR, "con": 0, "loc": 0x02, "seq": 2, "index": 1,
             "value": 4, "level2": 0},
        ],
    }
