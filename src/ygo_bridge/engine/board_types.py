"""
Validated card view types.

CardSnapshot is the point-in-time result of a field or card query. It never
references the live session, so it stays valid after the engine advances.

The snapshot mixes two concerns that are often needed separately:
    CardDefinition: what the printed card is (code and stats)
    CardPlacement: where the physical copy currently sits
"""

from dataclasses import dataclass
from typing import Any, Dict

from .bindings import LOCATION_OVERLAY


@dataclass(frozen=True)
class CardDefinition:
    """Static definition of a printed card, keyed by passcode.

    Attributes:
        code: Card passcode
        type: TYPE_* bitmask
        level: Level, rank, or link rating
        race: RACE_* flag
        attribute: ATTRIBUTE_* flag
        attack: Printed/current ATK
        defense: Printed/current DEF
    """
    code: int
    type: int = 0
    level: int = 0
    race: int = 0
    attribute: int = 0
    attack: int = 0
    defense: int = 0


@dataclass(frozen=True)
class CardPlacement:
    """Location of one physical card."""
    controller: int
    location: int
    sequence: int
    sub_index: int = 0

    def spec(self, player: int) -> str:
        """Spec string of this placement as seen by player."""
        from ..encoding.spec import encode_spec
        return encode_spec(self.location, self.sequence, self.sub_index,
                           opponent=self.controller != player)


@dataclass(frozen=True)
class CardSnapshot:
    """One card as reported by a query.

    For field queries, position carries the overlay sub-index when location
    includes LOCATION_OVERLAY.
    """
    code: int
    controller: int = 0
    location: int = 0
    sequence: int = 0
    position: int = 0
    type: int = 0
    attack: int = 0
    defense: int = 0
    level: int = 0
    race: int = 0
    attribute: int = 0

    def definition(self) -> CardDefinition:
        return CardDefinition(
            code=self.code,
            type=self.type,
            level=self.level,
            race=self.race,
            attribute=self.attribute,
            attack=self.attack,
            defense=self.defense,
        )

    def placement(self) -> CardPlacement:
        return CardPlacement(
            controller=self.controller,
            location=self.location,
            sequence=self.sequence,
            sub_index=self.position if self.location & LOCATION_OVERLAY else 0,
        )

    def spec(self, player: int) -> str:
        return self.placement().spec(player)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "controller": self.controller,
            "location": self.location,
            "sequence": self.sequence,
            "position": self.position,
            "type": self.type,
            "attack": self.attack,
            "defense": self.defense,
            "level": self.level,
            "race": self.race,
            "attribute": self.attribute,
        }
