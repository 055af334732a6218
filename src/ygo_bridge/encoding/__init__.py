"""
Protocol encodings.

This module provides:
- Spec codec for compact card placements (spec.py)
- Placement enum and zone bitmask decoding (placement.py)
- Announce-card opcode stream parsing (opcodes.py)
"""

from .spec import encode_spec, decode_spec, decode_spec_for_player
from .placement import (
    Placement,
    decode_placements,
    placement_to_location,
    placement_from_location,
)
from .opcodes import OPCODE_ISCODE, OPCODE_OR, parse_codes_from_opcodes

__all__ = [
    # Spec
    'encode_spec', 'decode_spec', 'decode_spec_for_player',
    # Placement
    'Placement', 'decode_placements', 'placement_to_location',
    'placement_from_location',
    # Opcodes
    'OPCODE_ISCODE', 'OPCODE_OR', 'parse_codes_from_opcodes',
]
