"""
Opcode stream parsing for MSG_ANNOUNCE_CARD.

The engine describes which card names may be declared as a small stack
program. Streams accepted here have the shape

    [code, ISCODE]                                  single card
    [code, ISCODE, code, ISCODE, OR, code, ISCODE, OR, ...]

Only the codes at positions 2, 5, 8, ... are extracted when more than one
entry is present.
"""

import logging
from typing import List, Sequence

from ..errors import MalformedOpcodes

logger = logging.getLogger(__name__)

OPCODE_ISCODE = 0x40000100  # 1073742080
OPCODE_OR = 0x40000005      # 1073741829


def _log_stream(opcodes: Sequence[int]) -> None:
    for i, op in enumerate(opcodes):
        logger.error("%d: %d", i, op)


def parse_codes_from_opcodes(opcodes: Sequence[int]) -> List[int]:
    """Extract card codes from an announce-card opcode stream.

    Args:
        opcodes: Flat sequence of u32 values from the message

    Returns:
        Card codes, one per entry, in stream order.

    Raises:
        MalformedOpcodes: Bad length, or a sentinel mismatch (index set to
            the entry's code position)
    """
    n = len(opcodes)
    if n == 2:
        return [opcodes[0]]

    if (n - 2) % 3 != 0:
        _log_stream(opcodes)
        raise MalformedOpcodes(f"invalid format of opcodes (length {n})", opcodes)

    codes = []
    for i in range(2, n, 3):
        codes.append(opcodes[i])
        if opcodes[i + 1] != OPCODE_ISCODE or opcodes[i + 2] != OPCODE_OR:
            _log_stream(opcodes)
            raise MalformedOpcodes(
                f"invalid format of opcodes starting from {i}", opcodes, index=i
            )
    return codes
