# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Reader for the Wall Street Journal JSON puzzle feed.

The feed wraps everything under ``data.copy``:

    {"data": {"copy": {
        "title": ..., "description": ..., "publisher": ..., "byline": ...,
        "date-release": "2017-02-17 00:00:00",
        "gridsize": {"cols": 15, "rows": 15},
        "words": [{"id": 1, "x": "1-5", "y": "1"}, ...],
        "clues": [{"title": "Across", "clues": [
                      {"word": 1, "number": 1, "clue": ..., "answer": ...}]},
                  {"title": "Down", "clues": [...]}]
    }}}

Word positions live in ``words`` and are joined to the clues through the
numeric word id. Only reading is supported.
"""

import io
import json
import logging
import math
import re
from datetime import datetime
from typing import Any, BinaryIO, Dict, List, Tuple

from models import Crossword, CrosswordBuilder, Direction, Word, WordBuilder
from crossword_formatter import (
    CrosswordFormatter, CrossReferenceError, DecodeError, FieldError,
    MissingStructureError, ReleaseDateError, ShapeError,
    UnsupportedOperationError, DEFAULT_ENCODING, register_formatter,
)


logger = logging.getLogger(__name__)

RELEASE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# (row, column), zero-based
Anchor = Tuple[int, int]

COORDINATE = re.compile(r"[+-]?[0-9]+")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: '{name}'")


def _opt_string(obj: Dict[str, Any], key: str) -> str:
    """Lenient string lookup: missing or null gives an empty string."""
    value = obj.get(key)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _opt_int(obj: Dict[str, Any], key: str, default: int = 0) -> int:
    """Lenient integer lookup: numbers and numeric strings are accepted."""
    value = obj.get(key)
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str) and COORDINATE.fullmatch(value.strip()):
        return int(value.strip())
    return default


def parse_leading(value: str) -> int:
    """
    Parse a 1-based coordinate or coordinate range ("3" or "3-5").

    Only the number before the first dash is used.

    Raises:
        ValueError: If the leading part is not an ASCII integer
    """
    dash = value.find('-')
    if dash != -1:
        value = value[:dash]
    if not COORDINATE.fullmatch(value):
        raise ValueError(f"Invalid coordinate: '{value}'")
    return int(value)


def resolve_word_table(words_array: List[Any]) -> Dict[int, Anchor]:
    """
    Build the word id -> (row, column) anchor table from ``data.copy.words``.

    Args:
        words_array: The raw JSON word records

    Returns:
        Mapping from word id to zero-based (row, column)

    Raises:
        FieldError: If a record is malformed
    """
    anchors: Dict[int, Anchor] = {}

    for i, word_obj in enumerate(words_array):
        path = f"data.copy.words[{i}]"
        if not isinstance(word_obj, dict):
            raise FieldError(f"'{path}' is not an object", path=path)

        coords = {}
        for key in ('x', 'y'):
            if word_obj.get(key) is None:
                raise FieldError(f"Word missing '{key}' at '{path}'", path=path)
            raw = _opt_string(word_obj, key)
            try:
                coords[key] = parse_leading(raw) - 1
            except ValueError as e:
                raise FieldError(
                    f"Can't parse '{raw}' as coordinate at '{path}.{key}'",
                    path=f"{path}.{key}",
                ) from e

        word_id = _opt_int(word_obj, 'id', -1)
        if word_id < 0:
            raise FieldError(f"Word missing identifier at '{path}'", path=path)

        if word_id in anchors:
            logger.debug(f"Word id {word_id} at '{path}' replaces an earlier record")
        anchors[word_id] = (coords['y'], coords['x'])

    logger.debug(f"Resolved {len(anchors)} word anchors")
    return anchors


def check_clues_length(clues_array: List[Any]):
    """Raise ShapeError unless there is exactly one bucket per direction."""
    if len(clues_array) != 2:
        raise ShapeError(
            f"Unexpected clues length of '{len(clues_array)}'",
            path="data.copy.clues",
        )


def cross_reference_clues(
    clues_array: List[Any],
    anchors: Dict[int, Anchor]
) -> List[Word]:
    """
    Join the two direction buckets of ``data.copy.clues`` to the word table.

    Args:
        clues_array: The raw JSON clue buckets (Across and Down)
        anchors: Output of resolve_word_table()

    Returns:
        Words in the order the buckets and their clues appear

    Raises:
        FormatError: On the first malformed bucket or clue
    """
    check_clues_length(clues_array)
    words: List[Word] = []

    for i, bucket in enumerate(clues_array):
        bucket_path = f"data.copy.clues[{i}]"
        if not isinstance(bucket, dict):
            raise ShapeError(f"'{bucket_path}' is not an object", path=bucket_path)

        subclues = bucket.get('clues')
        if not isinstance(subclues, list):
            raise MissingStructureError(
                f"Missing '{bucket_path}.clues'", path=f"{bucket_path}.clues"
            )

        title = _opt_string(bucket, 'title')
        try:
            direction = Direction.from_title(title)
        except ValueError as e:
            raise ShapeError(str(e), path=f"{bucket_path}.title") from e

        for j, subclue in enumerate(subclues):
            clue_path = f"{bucket_path}.clues[{j}]"
            if not isinstance(subclue, dict):
                raise ShapeError(f"'{clue_path}' is not an object", path=clue_path)

            anchor = anchors.get(_opt_int(subclue, 'word', -1))
            if anchor is None:
                raise CrossReferenceError(
                    f"No matching word for clue at '{clue_path}.word'",
                    path=f"{clue_path}.word",
                )

            if subclue.get('answer') is None:
                raise FieldError(
                    f"Missing '{clue_path}.answer'", path=f"{clue_path}.answer"
                )

            builder = WordBuilder(
                direction=direction,
                number=_opt_int(subclue, 'number'),
                hint=_opt_string(subclue, 'clue'),
                start_row=anchor[0],
                start_column=anchor[1],
            )
            for ch in _opt_string(subclue, 'answer'):
                builder.add_cell(ch)

            words.append(builder.build())

        logger.debug(f"Read {len(subclues)} {direction.value} clues")

    return words


class WSJFormatter(CrosswordFormatter):
    """
    Read-only formatter for WSJ JSON puzzles.

    Usage:
        formatter = WSJFormatter()
        builder = CrosswordBuilder()
        formatter.read(builder, stream)
        crossword = builder.build()
    """

    def read(self, builder: CrosswordBuilder, stream: BinaryIO):
        """
        Read one puzzle from stream into builder.

        The stream is read to exhaustion before parsing and is left open.
        Nothing is added to the builder unless the whole puzzle parses.

        Raises:
            FormatError: On the first problem found in the input
        """
        content = stream.read()
        copy_obj = self._read_envelope(content)

        grid_obj = copy_obj.get('gridsize')
        if not isinstance(grid_obj, dict):
            raise MissingStructureError(
                "Missing 'data.copy.gridsize'", path="data.copy.gridsize"
            )

        release = _opt_string(copy_obj, 'date-release')
        try:
            release_date = datetime.strptime(release, RELEASE_DATE_FORMAT)
        except ValueError as e:
            raise ReleaseDateError(
                f"Can't parse '{release}' as release date",
                path="data.copy.date-release",
            ) from e

        words = self._read_words(copy_obj)

        builder.title = _opt_string(copy_obj, 'title')
        builder.description = _opt_string(copy_obj, 'description')
        builder.copyright = _opt_string(copy_obj, 'publisher')
        builder.author = _opt_string(copy_obj, 'byline')
        builder.release_date = release_date
        builder.width = _opt_int(grid_obj, 'cols')
        builder.height = _opt_int(grid_obj, 'rows')
        for word in words:
            builder.add_word(word)

        logger.debug(
            f"Read '{builder.title}' ({builder.width}x{builder.height}, "
            f"{len(words)} words)"
        )

    def write(self, crossword: Crossword, stream: BinaryIO):
        raise UnsupportedOperationError("Writing not supported")

    def can_read(self) -> bool:
        return True

    def can_write(self) -> bool:
        return False

    def _read_envelope(self, content) -> Dict[str, Any]:
        """Decode content and descend to ``data.copy``."""
        try:
            if isinstance(content, (bytes, bytearray)):
                content = content.decode(self.encoding)
            obj = json.loads(content, parse_constant=_reject_constant)
        except (ValueError, LookupError, RecursionError) as e:
            raise DecodeError("Error parsing JSON object") from e

        if not isinstance(obj, dict):
            raise DecodeError("Error parsing JSON object")

        data_obj = obj.get('data')
        if not isinstance(data_obj, dict):
            raise MissingStructureError("Missing 'data'", path="data")

        copy_obj = data_obj.get('copy')
        if not isinstance(copy_obj, dict):
            raise MissingStructureError("Missing 'data.copy'", path="data.copy")

        return copy_obj

    @staticmethod
    def _read_words(copy_obj: Dict[str, Any]) -> List[Word]:
        clues_array = copy_obj.get('clues')
        if not isinstance(clues_array, list):
            raise MissingStructureError(
                "Missing 'data.copy.clues[]'", path="data.copy.clues"
            )
        check_clues_length(clues_array)

        words_array = copy_obj.get('words')
        if not isinstance(words_array, list):
            raise MissingStructureError(
                "Missing 'data.copy.words[]'", path="data.copy.words"
            )

        anchors = resolve_word_table(words_array)
        return cross_reference_clues(clues_array, anchors)


def read_crossword(
    data: bytes,
    encoding: str = DEFAULT_ENCODING
) -> Crossword:
    """
    Parse a WSJ JSON puzzle held in memory.

    Args:
        data: Raw puzzle bytes
        encoding: Text encoding of data

    Returns:
        The loaded Crossword

    Raises:
        FormatError: If the puzzle cannot be parsed or encoding is not a
            text encoding
    """
    formatter = WSJFormatter()
    try:
        formatter.set_encoding(encoding)
    except ValueError as e:
        raise DecodeError(str(e)) from e
    builder = CrosswordBuilder()
    formatter.read(builder, io.BytesIO(data))
    return builder.build()


register_formatter("wsj", WSJFormatter)
