"""
Engine adapter: exclusive owner of one ygopro-core duel handle.

The adapter is Open from construction until close(); every call after close()
raises EngineClosedError. The handle must not be shared between adapters or
threads, as the engine is single-threaded and strictly call/response:

    with EngineAdapter(seed=42) as duel:
        duel.set_player_info(0, 8000, 5, 1)
        ...
        duel.start_duel(options)
        while True:
            status = duel.process()
            data = duel.get_message()
            ...                      # decode, choose
            duel.set_response(value)

Query buffers are parsed by the module-level functions parse_field_query and
parse_card_query, which do not touch the engine.
"""

import logging
import random
import struct
from typing import List, Optional, Union

from .bindings import (
    ffi,
    get_lib,
    LOCATION_HAND, LOCATION_MZONE, LOCATION_SZONE,
    QUERY_INFO_FLAGS,
)
from .board_types import CardSnapshot
from ..errors import EngineClosedError, EngineError, QueryFailed

logger = logging.getLogger(__name__)

MESSAGE_BUFFER_SIZE = 0x10000
QUERY_FIELD_BUFFER_SIZE = 4096
QUERY_CARD_BUFFER_SIZE = 1024

# set_responseb always copies this many bytes from the buffer
RESPONSE_BUFFER_SIZE = 64

FIELD_RECORD_SIZE = 32
_FIELD_RECORD = struct.Struct("<I4B6I")
_CARD_RECORD = struct.Struct("<8I")

FIELD_QUERY_LOCATIONS = LOCATION_MZONE | LOCATION_SZONE | LOCATION_HAND


# =============================================================================
# QUERY BUFFER PARSING
# =============================================================================

def parse_field_query(data: bytes, length: Optional[int] = None) -> List[CardSnapshot]:
    """Parse a field query buffer of fixed 32-byte records.

    A record whose leading code is 0 is padding and is skipped whole.

    Args:
        data: Raw buffer
        length: Valid byte count reported by the engine (defaults to len(data))

    Returns:
        Non-empty cards in buffer order.
    """
    if length is None:
        length = len(data)
    cards = []
    for i in range(length // FIELD_RECORD_SIZE):
        (code, controller, location, sequence, position,
         type_, attack, defense, level, race, attribute) = _FIELD_RECORD.unpack_from(
            data, i * FIELD_RECORD_SIZE)
        if code == 0:
            continue
        cards.append(CardSnapshot(
            code=code,
            controller=controller,
            location=location,
            sequence=sequence,
            position=position,
            type=type_,
            attack=attack,
            defense=defense,
            level=level,
            race=race,
            attribute=attribute,
        ))
    return cards


def parse_card_query(data: bytes, controller: int = 0, location: int = 0,
                     sequence: int = 0) -> CardSnapshot:
    """Parse the leading fields of a single-card query buffer.

    Layout: code, alias (ignored), type, level, race, attribute, attack,
    defense; anything after is not decoded. The placement is not part of the
    record, so the queried one is attached.
    """
    code, _alias, type_, level, race, attribute, attack, defense = _CARD_RECORD.unpack_from(data, 0)
    return CardSnapshot(
        code=code,
        controller=controller,
        location=location,
        sequence=sequence,
        type=type_,
        attack=attack,
        defense=defense,
        level=level,
        race=race,
        attribute=attribute,
    )


def derive_duel_seed(seed: int) -> int:
    """Derive the 32-bit engine seed: seeded Mersenne Twister, first draw burned."""
    rng = random.Random(seed)
    rng.getrandbits(32)
    return rng.getrandbits(32)


# =============================================================================
# ADAPTER
# =============================================================================

class EngineAdapter:
    """One open duel session.

    Args:
        seed: Caller seed, turned into the engine seed by derive_duel_seed
        lib: Loaded library (defaults to get_lib()); tests pass a fake

    Raises:
        EngineError: If the engine fails to create the duel
    """

    def __init__(self, seed: int, lib=None):
        self._lib = lib if lib is not None else get_lib()
        self.seed = seed
        self._pduel = self._lib.create_duel(derive_duel_seed(seed))
        if not self._pduel:
            raise EngineError(f"Failed to create duel (seed={seed})")
        logger.debug("Created duel %#x (seed=%d)", self._pduel, seed)

    # -------------------------------------------------------------------------
    # lifecycle
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._pduel == 0

    def _handle(self) -> int:
        if self._pduel == 0:
            raise EngineClosedError("Engine adapter used after close()")
        return self._pduel

    def close(self) -> None:
        """Release the duel. Further calls on this adapter raise EngineClosedError."""
        if self._pduel:
            logger.debug("Ending duel %#x", self._pduel)
            self._lib.end_duel(self._pduel)
            self._pduel = 0

    def __enter__(self) -> "EngineAdapter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # setup
    # -------------------------------------------------------------------------

    def set_player_info(self, player: int, lp: int, start_count: int, draw_count: int) -> None:
        self._lib.set_player_info(self._handle(), player, lp, start_count, draw_count)

    def add_card(self, code: int, owner: int, player: int, location: int,
                 sequence: int, position: int) -> None:
        self._lib.new_card(self._handle(), code, owner, player, location, sequence, position)

    def start_duel(self, options: int) -> None:
        self._lib.start_duel(self._handle(), options)

    # -------------------------------------------------------------------------
    # message pump
    # -------------------------------------------------------------------------

    def process(self) -> int:
        """Advance the engine one step and return its status word."""
        status = self._lib.process(self._handle())
        logger.debug("process() -> %#x", status)
        return status

    pump = process

    def next_message(self, buffer) -> int:
        """Copy pending messages into a cffi uint8_t buffer; return the length."""
        return self._lib.get_message(self._handle(), buffer)

    def get_message(self) -> bytes:
        """Return pending messages as bytes."""
        buf = ffi.new("uint8_t[]", MESSAGE_BUFFER_SIZE)
        length = self.next_message(buf)
        if length <= 0:
            return b""
        return bytes(ffi.buffer(buf, length))

    def set_response(self, response: Union[int, bytes]) -> None:
        """Submit exactly one response for the pending request."""
        handle = self._handle()
        if isinstance(response, int):
            logger.debug("set_responsei(%d)", response)
            self._lib.set_responsei(handle, response)
            return
        data = bytes(response)
        if len(data) > RESPONSE_BUFFER_SIZE:
            raise ValueError(
                f"Response of {len(data)} bytes exceeds {RESPONSE_BUFFER_SIZE}"
            )
        logger.debug("set_responseb(%s)", data.hex())
        buf = ffi.new("uint8_t[]", RESPONSE_BUFFER_SIZE)
        ffi.memmove(buf, data, len(data))
        self._lib.set_responseb(handle, buf)

    submit_response = set_response

    # -------------------------------------------------------------------------
    # queries
    # -------------------------------------------------------------------------

    def query_field(self, player: int) -> List[CardSnapshot]:
        """Snapshot hand, monster and spell/trap cards visible to player."""
        buf = ffi.new("uint8_t[]", QUERY_FIELD_BUFFER_SIZE)
        length = self._lib.query_field_card(
            self._handle(), player, FIELD_QUERY_LOCATIONS, QUERY_INFO_FLAGS,
            buf, 1)
        if length <= 0:
            logger.debug("query_field(%d) returned %d", player, length)
            return []
        length = min(length, QUERY_FIELD_BUFFER_SIZE)
        return parse_field_query(bytes(ffi.buffer(buf, length)))

    def query_card(self, player: int, location: int, sequence: int) -> CardSnapshot:
        """Snapshot one card.

        Raises:
            QueryFailed: If the engine reports zero or negative length
        """
        buf = ffi.new("uint8_t[]", QUERY_CARD_BUFFER_SIZE)
        length = self._lib.query_card(
            self._handle(), player, location, sequence, QUERY_INFO_FLAGS, buf, 1)
        if length <= 0:
            raise QueryFailed(player, location, sequence, length)
        return parse_card_query(bytes(ffi.buffer(buf, QUERY_CARD_BUFFER_SIZE)),
                                controller=player, location=location, sequence=sequence)
