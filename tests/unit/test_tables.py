"""
Unit tests for tables.py.

Display helpers degrade to "unknown"; id accessors fail loudly.
"""

import pytest

from ygo_bridge.engine.bindings import (
    ATTRIBUTE_DARK, ATTRIBUTE_EARTH, ATTRIBUTE_NONE,
    LOCATION_DECK, LOCATION_EXTRA, LOCATION_HAND, LOCATION_MZONE,
    MSG_ANNOUNCE_CARD, MSG_SELECT_IDLECMD, MSG_SELECT_SUM, MSG_WIN,
    PHASE_DRAW, PHASE_END, POS_FACEUP_ATTACK, POS_NONE,
    TYPE_EFFECT, TYPE_MONSTER, TYPE_LINK,
)
from ygo_bridge.errors import LookupMiss
from ygo_bridge.tables import (
    LOCATION_IDS, SELECTION_MSGS, SYSTEM_STRINGS, SYSTEM_STRING_IDS, TYPE_NAMES,
    attribute_to_id, attribute_to_string, get_system_string, location_to_id,
    location_to_string, msg_to_id, msg_to_string, phase_to_id, phase_to_string,
    position_to_id, position_to_string, race_to_string, reason_to_string,
    system_string_to_id, type_to_ids,
)


class TestDisplayHelpers:

    def test_known_values(self):
        assert location_to_string(LOCATION_HAND) == "Hand"
        assert position_to_string(POS_FACEUP_ATTACK) == "face-up attack"
        assert attribute_to_string(ATTRIBUTE_DARK) == "Dark"
        assert phase_to_string(PHASE_END) == "end phase"
        assert msg_to_string(MSG_WIN) == "win"
        assert reason_to_string(0x1) == "LP reached 0"

    def test_unknown_values_fall_back(self):
        assert location_to_string(0x1000) == "unknown"
        assert race_to_string(0x80000000) == "unknown"
        assert msg_to_string(250) == "unknown_msg"
        assert reason_to_string(0x99) == "Unknown"

    def test_system_string_lookup(self):
        assert get_system_string(1150) == "Activate"

    def test_system_string_miss(self):
        with pytest.raises(LookupMiss) as exc_info:
            get_system_string(9999)
        assert exc_info.value.key == 9999


class TestIdRegistries:

    def test_system_strings_start_after_card_descriptions(self):
        """Ids 0..15 belong to per-card effect descriptions."""
        assert min(SYSTEM_STRING_IDS.values()) == 16
        assert system_string_to_id(min(SYSTEM_STRINGS)) == 16
        assert max(SYSTEM_STRING_IDS.values()) == 16 + len(SYSTEM_STRINGS) - 1

    def test_system_string_ids_follow_numeric_order(self):
        assert system_string_to_id(1) == 16
        assert system_string_to_id(30) == 17
        assert system_string_to_id(1150) < system_string_to_id(1151)

    def test_location_ids(self):
        assert location_to_id(LOCATION_DECK) == 1
        assert location_to_id(LOCATION_HAND) == 2
        assert location_to_id(LOCATION_MZONE) == 3
        assert location_to_id(LOCATION_EXTRA) == len(LOCATION_IDS)

    def test_position_ids(self):
        assert position_to_id(POS_NONE) == 0
        assert position_to_id(POS_FACEUP_ATTACK) == 1

    def test_attribute_ids(self):
        assert attribute_to_id(ATTRIBUTE_NONE) == 0
        assert attribute_to_id(ATTRIBUTE_EARTH) == 1

    def test_phase_ids(self):
        assert phase_to_id(PHASE_DRAW) == 0

    def test_msg_ids_follow_selection_order(self):
        assert msg_to_id(MSG_SELECT_IDLECMD) == 1
        assert msg_to_id(MSG_ANNOUNCE_CARD) == len(SELECTION_MSGS)
        assert MSG_SELECT_SUM in SELECTION_MSGS

    def test_id_miss_is_fatal(self):
        with pytest.raises(LookupMiss):
            location_to_id(0x1000)
        with pytest.raises(LookupMiss):
            msg_to_id(MSG_WIN)
        with pytest.raises(LookupMiss):
            system_string_to_id(5)

    def test_type_to_ids_multi_hot(self):
        ids = type_to_ids(TYPE_MONSTER | TYPE_EFFECT)
        assert len(ids) == len(TYPE_NAMES)
        assert sum(ids) == 2
        flags = sorted(TYPE_NAMES)
        assert ids[flags.index(TYPE_MONSTER)] == 1
        assert ids[flags.index(TYPE_EFFECT)] == 1
        assert ids[flags.index(TYPE_LINK)] == 0

    def test_type_to_ids_empty(self):
        assert sum(type_to_ids(0)) == 0
