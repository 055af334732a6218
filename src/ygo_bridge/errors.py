"""
Error taxonomy for the engine bridge.

Every error raised by this package derives from BridgeError so callers can
catch the whole family at a decision point. None of these are retried here;
retry policy belongs to the caller.

Types:
    MalformedProtocol: Binary or textual protocol data has an invalid shape
    LookupMiss: Key absent from a closed static registry
    QueryFailed: Engine reported no data for a card query
    ConfigurationError: Deck list missing, unreadable, or too small
    EngineError: Session could not be created or was used after close
"""

from typing import Any, List, Optional, Sequence


class BridgeError(Exception):
    """Base class for all ygo_bridge errors."""
    pass


class MalformedProtocol(BridgeError):
    """Raised when engine data violates the expected wire grammar."""
    pass


class MalformedSpec(MalformedProtocol):
    """Raised when a spec string has no recognised zone prefix or slot."""

    def __init__(self, spec: str, reason: str = "invalid spec"):
        super().__init__(f"{reason}: {spec!r}")
        self.spec = spec


class MalformedOpcodes(MalformedProtocol):
    """Raised when an opcode stream has a bad length or sentinel.

    Attributes:
        index: Offending position in the stream (None for a length error)
        opcodes: The full stream, kept for diagnosis
    """

    def __init__(self, message: str, opcodes: Sequence[int], index: Optional[int] = None):
        super().__init__(message)
        self.index = index
        self.opcodes: List[int] = list(opcodes)


class LookupMiss(BridgeError, KeyError):
    """Raised when a key is not part of a registry's closed domain."""

    def __init__(self, key: Any, table: str = "registry"):
        super().__init__(key)
        self.key = key
        self.table = table

    def __str__(self) -> str:
        return f"[{self.table}] cannot find id: {self.key!r}"


class QueryFailed(BridgeError):
    """Raised when the engine returns zero or negative length for a query."""

    def __init__(self, player: int, location: int, sequence: int, length: int):
        super().__init__(
            f"Failed to query card: player={player} location=0x{location:x} "
            f"sequence={sequence} (engine returned length {length})"
        )
        self.player = player
        self.location = location
        self.sequence = sequence
        self.length = length


class ConfigurationError(BridgeError):
    """Raised at load time for a missing, unreadable, or undersized deck."""

    def __init__(self, message: str, path: Any = None, count: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.count = count


class EngineError(BridgeError):
    """Raised when the engine session cannot be created."""
    pass


class EngineClosedError(EngineError):
    """Raised when an adapter is used after close()."""
    pass


__all__ = [
    'BridgeError',
    'MalformedProtocol',
    'MalformedSpec',
    'MalformedOpcodes',
    'LookupMiss',
    'QueryFailed',
    'ConfigurationError',
    'EngineError',
    'EngineClosedError',
]
