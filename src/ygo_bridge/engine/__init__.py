"""
Engine layer: ygopro-core interface.

This module provides:
- CFFI bindings to ygopro-core (bindings.py)
- Session adapter and query parsing (adapter.py)
- Card snapshot types (board_types.py)
- Path configuration (paths.py)
"""

from .bindings import (
    # Library access
    ffi, load_library, get_lib,
    # Location constants
    LOCATION_DECK, LOCATION_HAND, LOCATION_EXTRA, LOCATION_MZONE,
    LOCATION_GRAVE, LOCATION_SZONE, LOCATION_REMOVED, LOCATION_OVERLAY,
    LOCATION_ONFIELD,
    # Position constants
    POS_FACEUP_ATTACK, POS_FACEDOWN_ATTACK, POS_FACEUP_DEFENSE,
    POS_FACEDOWN_DEFENSE, POS_FACEUP, POS_FACEDOWN,
    # Process status
    PROCESSOR_BUFFER_LEN, PROCESSOR_WAITING, PROCESSOR_END,
)

from .board_types import CardDefinition, CardPlacement, CardSnapshot

from .adapter import (
    EngineAdapter,
    parse_field_query,
    parse_card_query,
    derive_duel_seed,
)

from .paths import get_library_path

__all__ = [
    # Bindings
    'ffi', 'load_library', 'get_lib',
    # Location constants
    'LOCATION_DECK', 'LOCATION_HAND', 'LOCATION_EXTRA', 'LOCATION_MZONE',
    'LOCATION_GRAVE', 'LOCATION_SZONE', 'LOCATION_REMOVED', 'LOCATION_OVERLAY',
    'LOCATION_ONFIELD',
    # Position constants
    'POS_FACEUP_ATTACK', 'POS_FACEDOWN_ATTACK', 'POS_FACEUP_DEFENSE',
    'POS_FACEDOWN_DEFENSE', 'POS_FACEUP', 'POS_FACEDOWN',
    'PROCESSOR_BUFFER_LEN', 'PROCESSOR_WAITING', 'PROCESSOR_END',
    # Types
    'CardDefinition', 'CardPlacement', 'CardSnapshot',
    # Adapter
    'EngineAdapter', 'parse_field_query', 'parse_card_query', 'derive_duel_seed',
    # Paths
    'get_library_path',
]
