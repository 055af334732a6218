"""
Deck list loading.

Reads the plain passcode-per-line deck format (compatible with .ydk files):
digit-only lines are card codes, a line containing "extra" starts the extra
deck and a line containing "side" starts the side deck. Anything else is
ignored.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MIN_MAIN_DECK = 40


@dataclass(frozen=True)
class Deck:
    """Card codes of one deck file, in file order."""
    main: Tuple[int, ...]
    extra: Tuple[int, ...] = ()
    side: Tuple[int, ...] = ()

    def counts(self) -> Tuple[int, int, int]:
        return len(self.main), len(self.extra), len(self.side)


def parse_deck_text(text: str) -> Tuple[List[int], List[int], List[int]]:
    sections = {"main": [], "extra": [], "side": []}
    current = "main"
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if "side" in line:
            current = "side"
            continue
        if "extra" in line:
            # The side deck is always last
            if current == "main":
                current = "extra"
            continue
        if line.isascii() and line.isdigit():
            sections[current].append(int(line))
    return sections["main"], sections["extra"], sections["side"]


def read_decks(path: Union[str, Path]) -> Deck:
    """Load a deck file.

    Raises:
        ConfigurationError: If the file is missing or unreadable, or the main
            deck holds fewer than 40 cards
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read deck file {path}: {e}", path=path) from e

    main, extra, side = parse_deck_text(text)
    if len(main) < MIN_MAIN_DECK:
        raise ConfigurationError(
            f"Main deck must contain at least {MIN_MAIN_DECK} cards, "
            f"found: {len(main)}, file: {path}",
            path=path, count=len(main),
        )

    logger.debug("Loaded %s: main=%d extra=%d side=%d",
                 path, len(main), len(extra), len(side))
    return Deck(main=tuple(main), extra=tuple(extra), side=tuple(side))
