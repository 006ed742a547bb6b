"""
Data models for loaded crossword puzzles.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


class Direction(Enum):
    ACROSS = "across"
    DOWN = "down"

    @property
    def code(self) -> int:
        """Stable integer code, used by word reference locators."""
        return 0 if self is Direction.ACROSS else 1

    @classmethod
    def from_code(cls, code: int) -> 'Direction':
        for direction in cls:
            if direction.code == code:
                return direction
        raise ValueError(f"Unknown direction code: {code}")

    @classmethod
    def from_title(cls, title: str) -> 'Direction':
        """Match a clue bucket title ("Across", "DOWN", ...) to a direction."""
        if title is not None:
            lowered = title.lower()
            for direction in cls:
                if direction.value == lowered:
                    return direction
        raise ValueError(f"Invalid direction: '{title}'")


@dataclass(frozen=True)
class Cell:
    """A single answer cell of a word."""
    chars: str
    attributes: Optional[int] = None  # Unset for formats without cell flags


@dataclass(frozen=True)
class Word:
    """A clued entry anchored on the grid."""
    direction: Direction
    number: int
    hint: str
    start_row: int
    start_column: int
    cells: Tuple[Cell, ...] = ()

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def answer(self) -> str:
        return "".join(cell.chars for cell in self.cells)

    def positions(self) -> List[Tuple[int, int]]:
        """
        Grid coordinates covered by this word, in answer order.

        Coordinates are not checked against the grid size.
        """
        positions = []
        for i in range(self.length):
            if self.direction == Direction.ACROSS:
                positions.append((self.start_row, self.start_column + i))
            else:
                positions.append((self.start_row + i, self.start_column))
        return positions


@dataclass(frozen=True)
class Crossword:
    """A fully loaded crossword puzzle."""
    width: int
    height: int
    title: str = ""
    description: str = ""
    author: str = ""
    copyright: str = ""
    release_date: Optional[datetime] = None
    words: Tuple[Word, ...] = ()

    @property
    def words_across(self) -> List[Word]:
        return [w for w in self.words if w.direction == Direction.ACROSS]

    @property
    def words_down(self) -> List[Word]:
        return [w for w in self.words if w.direction == Direction.DOWN]

    def find_word(self, direction: Direction, number: int) -> Optional[Word]:
        """Return the first word with the given direction and clue number."""
        for word in self.words:
            if word.direction == direction and word.number == number:
                return word
        return None


@dataclass
class WordBuilder:
    """Accumulates the fields and cells of a single word."""
    direction: Direction = Direction.ACROSS
    number: int = 0
    hint: str = ""
    start_row: int = 0
    start_column: int = 0
    cells: List[Cell] = field(default_factory=list)

    def add_cell(self, chars: str, attributes: Optional[int] = None) -> 'WordBuilder':
        self.cells.append(Cell(chars=chars, attributes=attributes))
        return self

    def build(self) -> Word:
        return Word(
            direction=self.direction,
            number=self.number,
            hint=self.hint,
            start_row=self.start_row,
            start_column=self.start_column,
            cells=tuple(self.cells),
        )


@dataclass
class CrosswordBuilder:
    """
    Mutable accumulator filled in by a formatter.

    Geometry is taken as given: the builder does not check that words fit
    inside width x height.
    """
    width: int = 0
    height: int = 0
    title: str = ""
    description: str = ""
    author: str = ""
    copyright: str = ""
    release_date: Optional[datetime] = None
    words: List[Word] = field(default_factory=list)

    def add_word(self, word: Word) -> 'CrosswordBuilder':
        self.words.append(word)
        return self

    def build(self) -> Crossword:
        return Crossword(
            width=self.width,
            height=self.height,
            title=self.title,
            description=self.description,
            author=self.author,
            copyright=self.copyright,
            release_date=self.release_date,
            words=tuple(self.words),
        )
