"""
Dense id registries.

Projects closed domains (engine enum values, message codes, string ids) onto
consecutive small integers for fixed-size feature encodings.

Canonical ordering:
    - Mapping domains are ordered by their key (numeric sort), never by the
      container's insertion order.
    - Sequence domains keep the order given.

Usage:
    from ygo_bridge.registry import make_ids

    location2id = make_ids({0x01: "Deck", 0x02: "Hand"}, id_offset=1)
    location2id.lookup(0x02)  # -> 2
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, Union

from .errors import LookupMiss


class IdRegistry(Mapping):
    """Read-only key -> dense id mapping built once from a domain.

    Attributes:
        name: Table name reported in LookupMiss errors
        id_offset: First id handed out
    """

    def __init__(self, ids: Dict[Hashable, int], name: str, id_offset: int):
        self._ids = MappingProxyType(dict(ids))
        self.name = name
        self.id_offset = id_offset

    def __getitem__(self, key: Hashable) -> int:
        return self.lookup(key)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def lookup(self, key: Hashable) -> int:
        """Return the id for key, raising LookupMiss outside the domain."""
        return lookup_or_fail(self._ids, key, self.name)

    def __repr__(self) -> str:
        return f"IdRegistry({self.name!r}, size={len(self)}, offset={self.id_offset})"


def lookup_or_fail(table: Mapping, key: Hashable, name: str = "registry") -> Any:
    """Look key up in table or raise LookupMiss naming the table and key."""
    try:
        return table[key]
    except KeyError:
        raise LookupMiss(key, name) from None


def make_ids(
    domain: Union[Mapping, Sequence],
    id_offset: int = 0,
    skip: int = 0,
    name: str = "registry",
) -> IdRegistry:
    """Assign consecutive ids to the keys of a domain.

    Args:
        domain: Mapping (keys sorted ascending) or sequence (order kept)
        id_offset: Id given to the first kept key
        skip: Number of leading keys to leave out
        name: Table name for error messages

    Returns:
        IdRegistry over the kept keys, a bijection onto
        [id_offset, id_offset + len(domain) - skip).

    Raises:
        ValueError: If skip is negative or the sequence repeats a key
    """
    if skip < 0:
        raise ValueError(f"skip must be non-negative, got {skip}")

    if isinstance(domain, Mapping):
        keys = sorted(domain)
    else:
        keys = list(domain)
        if len(set(keys)) != len(keys):
            raise ValueError(f"[{name}] domain contains duplicate keys: {keys}")

    ids = {key: i - skip + id_offset for i, key in enumerate(keys) if i >= skip}
    return IdRegistry(ids, name=name, id_offset=id_offset)


__all__ = ['IdRegistry', 'make_ids', 'lookup_or_fail']
