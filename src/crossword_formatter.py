# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Formatter capability shared by all puzzle source formats.

A formatter reads a byte stream into a CrosswordBuilder and, where the
format allows it, writes a Crossword back out. Failures are reported with
the exception hierarchy below; the exception class identifies the kind of
failure and ``path`` locates the offending JSON node when known.
"""

import codecs
from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Dict, Optional

from models import Crossword, CrosswordBuilder


DEFAULT_ENCODING = "UTF-8"


def is_text_encoding(encoding: str) -> bool:
    """True if encoding names a codec that decodes bytes to str."""
    try:
        info = codecs.lookup(encoding)
    except (LookupError, TypeError):
        return False
    # Codecs such as base64 and rot13 are registered but not text encodings
    return getattr(info, '_is_text_encoding', True)


class CrosswordError(Exception):
    """Base class for all puzzle loading failures."""
    pass


class FormatError(CrosswordError):
    """Raised when the input does not match the expected puzzle format."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DecodeError(FormatError):
    """Input bytes are not valid text or not a valid JSON object."""
    pass


class MissingStructureError(FormatError):
    """A required nested object or array is absent."""
    pass


class ShapeError(FormatError):
    """A container has the wrong size, type or direction title."""
    pass


class FieldError(FormatError):
    """A record is missing a required field or holds an unparsable value."""
    pass


class CrossReferenceError(FormatError):
    """A clue refers to a word identifier with no word record."""
    pass


class ReleaseDateError(FormatError):
    """The release date does not match the expected timestamp pattern."""
    pass


class UnsupportedOperationError(CrosswordError):
    """The requested operation is not available for this format."""
    pass


class CrosswordFormatter(ABC):
    """
    Reads (and optionally writes) crosswords in one source format.

    Usage:
        formatter = get_formatter("wsj")
        builder = CrosswordBuilder()
        with open('puzzle.json', 'rb') as f:
            formatter.read(builder, f)
        crossword = builder.build()
    """

    def __init__(self):
        self.encoding = DEFAULT_ENCODING

    def set_encoding(self, encoding: str):
        """
        Set the text encoding used to decode input streams.

        Raises:
            ValueError: If the encoding is unknown
        """
        if not is_text_encoding(encoding):
            raise ValueError(f"Unknown text encoding: '{encoding}'")
        self.encoding = encoding

    @abstractmethod
    def read(self, builder: CrosswordBuilder, stream: BinaryIO):
        """Read one puzzle from stream into builder."""

    @abstractmethod
    def write(self, crossword: Crossword, stream: BinaryIO):
        """Write crossword to stream."""

    @abstractmethod
    def can_read(self) -> bool:
        pass

    @abstractmethod
    def can_write(self) -> bool:
        pass


_REGISTRY: Dict[str, Callable[[], CrosswordFormatter]] = {}


def register_formatter(name: str, factory: Callable[[], CrosswordFormatter]):
    """Register a formatter factory under a short format name."""
    _REGISTRY[name.lower()] = factory


def available_formats():
    return sorted(_REGISTRY)


def get_formatter(name: str) -> CrosswordFormatter:
    """
    Create a new formatter for the named format.

    Raises:
        ValueError: If no formatter is registered under name
    """
    factory = _REGISTRY.get(name.lower())
    if factory is None:
        raise ValueError(
            f"Unknown puzzle format '{name}'. "
            f"Must be one of: {available_formats()}"
        )
    return factory()
