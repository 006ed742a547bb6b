"""
Word reference locators.

Clue hints can point at other entries ("See 17-Across"). The display layer
turns such references into links of the form ``ref://<direction>/<number>``
and citation markers into ``cite://<direction>/<number>``, where direction
is the integer code of a Direction. Hints are stored verbatim so that
those references can be found in the original text.
"""

import re
from dataclasses import dataclass
from typing import Optional

from models import Crossword, Direction, Word


PROTOCOL_REF = "ref"
PROTOCOL_CITATION = "cite"

PROTOCOLS = (PROTOCOL_REF, PROTOCOL_CITATION)

EXTRACT_REF = re.compile(r"^(\w+)://(\d+)/(\d+)$")


@dataclass(frozen=True)
class WordLocator:
    """A parsed reference or citation link."""
    protocol: str
    direction: Direction
    number: int

    def to_url(self) -> str:
        return make_locator(self.protocol, self.direction, self.number)


def make_locator(protocol: str, direction: Direction, number: int) -> str:
    if protocol not in PROTOCOLS:
        raise ValueError(f"Unknown locator protocol: '{protocol}'")
    return f"{protocol}://{direction.code}/{number}"


def parse_locator(url: str) -> Optional[WordLocator]:
    """
    Parse a ref:// or cite:// locator.

    Returns None for anything that is not a well-formed locator with a
    known protocol and direction code.
    """
    match = EXTRACT_REF.match(url or "")
    if not match:
        return None

    protocol = match.group(1)
    if protocol not in PROTOCOLS:
        return None

    try:
        direction = Direction.from_code(int(match.group(2)))
    except ValueError:
        return None

    return WordLocator(protocol, direction, int(match.group(3)))


def resolve_locator(url: str, crossword: Crossword) -> Optional[Word]:
    """Return the word a locator points at, or None."""
    locator = parse_locator(url)
    if locator is None:
        return None
    return crossword.find_word(locator.direction, locator.number)
