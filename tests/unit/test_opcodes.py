"""
Unit tests for encoding/opcodes.py.
"""

import logging

import pytest

from ygo_bridge.encoding.opcodes import OPCODE_ISCODE, OPCODE_OR, parse_codes_from_opcodes
from ygo_bridge.errors import MalformedOpcodes, MalformedProtocol

from conftest import CAESAR, ENGRAVER, REQUIEM


class TestParseCodesFromOpcodes:

    def test_single_entry(self):
        assert parse_codes_from_opcodes([CAESAR, OPCODE_ISCODE]) == [CAESAR]

    def test_length_two_takes_first_value_verbatim(self):
        assert parse_codes_from_opcodes([7, 9]) == [7]

    def test_one_extra_entry(self):
        stream = [CAESAR, OPCODE_ISCODE, ENGRAVER, OPCODE_ISCODE, OPCODE_OR]
        assert parse_codes_from_opcodes(stream) == [ENGRAVER]

    def test_several_entries(self):
        stream = [
            CAESAR, OPCODE_ISCODE,
            ENGRAVER, OPCODE_ISCODE, OPCODE_OR,
            REQUIEM, OPCODE_ISCODE, OPCODE_OR,
        ]
        assert parse_codes_from_opcodes(stream) == [ENGRAVER, REQUIEM]

    @pytest.mark.parametrize("length", [0, 1, 3, 4, 6, 7])
    def test_bad_length(self, length):
        with pytest.raises(MalformedOpcodes) as exc_info:
            parse_codes_from_opcodes([OPCODE_ISCODE] * length)
        assert exc_info.value.index is None

    def test_bad_sentinel_reports_index(self):
        stream = [
            CAESAR, OPCODE_ISCODE,
            ENGRAVER, OPCODE_ISCODE, OPCODE_OR,
            REQUIEM, OPCODE_OR, OPCODE_ISCODE,
        ]
        with pytest.raises(MalformedOpcodes) as exc_info:
            parse_codes_from_opcodes(stream)
        assert exc_info.value.index == 5
        assert exc_info.value.opcodes == stream
        assert "5" in str(exc_info.value)

    def test_first_sentinel_wrong(self):
        with pytest.raises(MalformedProtocol):
            parse_codes_from_opcodes([1, OPCODE_ISCODE, 2, 0, OPCODE_OR])

    def test_malformed_stream_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="ygo_bridge.encoding.opcodes"):
            with pytest.raises(MalformedOpcodes):
                parse_codes_from_opcodes([1, 2, 3, 4])
        assert len(caplog.records) == 4
