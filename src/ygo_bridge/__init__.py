"""
ygo-bridge: protocol layer between an agent and the ygopro-core duel engine.

Provides the engine session adapter, the compact spec and placement encodings,
message parsing and legal action enumeration, and the dense id registries used
for feature encoding.

Submodules:
    engine      - CFFI bindings, session adapter and card snapshots
    encoding    - Spec codec, placement masks and opcode streams
    enumeration - Message parsers, subset-sum search, actions and responses
    tables      - Display strings and dense id registries
    decklist    - Deck file loading

Usage:
    from ygo_bridge.engine import EngineAdapter
    from ygo_bridge.encoding import encode_spec, decode_placements
    from ygo_bridge.enumeration import parse_idle, idle_actions
"""

__version__ = "0.1.0"

from .engine import (
    ffi,
    load_library,
    get_lib,
    EngineAdapter,
    CardDefinition,
    CardPlacement,
    CardSnapshot,
)

from .encoding import (
    Placement,
    encode_spec,
    decode_spec,
    decode_spec_for_player,
    decode_placements,
    parse_codes_from_opcodes,
)

from .enumeration import (
    ActionAct,
    ActionPhase,
    LegalAction,
    encode_response,
    find_valid_sum_combinations,
)

from .registry import IdRegistry, make_ids, lookup_or_fail
from .decklist import Deck, read_decks

from .errors import (
    BridgeError,
    MalformedProtocol,
    MalformedSpec,
    MalformedOpcodes,
    LookupMiss,
    QueryFailed,
    ConfigurationError,
    EngineError,
    EngineClosedError,
)

__all__ = [
    '__version__',
    # Engine
    'ffi', 'load_library', 'get_lib', 'EngineAdapter',
    'CardDefinition', 'CardPlacement', 'CardSnapshot',
    # Encoding
    'Placement', 'encode_spec', 'decode_spec', 'decode_spec_for_player',
    'decode_placements', 'parse_codes_from_opcodes',
    # Enumeration
    'ActionAct', 'ActionPhase', 'LegalAction', 'encode_response',
    'find_valid_sum_combinations',
    # Registries and decks
    'IdRegistry', 'make_ids', 'lookup_or_fail', 'Deck', 'read_decks',
    # Errors
    'BridgeError', 'MalformedProtocol', 'MalformedSpec', 'MalformedOpcodes',
    'LookupMiss', 'QueryFailed', 'ConfigurationError', 'EngineError',
    'EngineClosedError',
]
