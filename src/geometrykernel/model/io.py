"""
Text Input/Output for Vector3.

The write format is "Vector3[x, y, z]" and is meant for logs and debugging.
The read format is three whitespace-separated scalars. Neither is versioned.
"""
from __future__ import annotations

import io
import logging
import math
from typing import Protocol

from geometrykernel.errors import VectorParseError
from geometrykernel.model.geometry_primitives import Vector3

# Get module logger
logger = logging.getLogger(__name__)

COMPONENT_COUNT = 3


class TextSink(Protocol):
    def write(self, text: str, /) -> int: ...


class TextSource(Protocol):
    def read(self, size: int = -1, /) -> str: ...


def format_vector(vector: Vector3) -> str:
    return str(vector)


def write_vector(sink: TextSink, vector: Vector3) -> None:
    """Write the text representation of a vector to a sink (e.g. a file or io.StringIO)."""
    sink.write(format_vector(vector))


def read_vector(source: TextSource) -> Vector3:
    """
    Read the next three whitespace-separated scalars from a text source.

    Only the three tokens and the single delimiter after the last one are
    consumed, so consecutive vectors can be read from the same stream.

    Raises:
        VectorParseError: If the source ends early or a token is not a finite number.
            No partially read vector is ever returned.
    """
    components: list[float] = []
    for axis in "xyz":
        token = _read_token(source)
        if not token:
            logger.error(f"Unexpected end of input while reading component '{axis}'")
            raise VectorParseError(f"Unexpected end of input while reading component '{axis}'.")
        components.append(_parse_component(token, axis))
    return Vector3(*components)


def parse_vector(text: str) -> Vector3:
    """
    Parse a string holding exactly three whitespace-separated scalars.

    Raises:
        VectorParseError: On too few, too many or malformed values.
    """
    source = io.StringIO(text)
    vector = read_vector(source)
    trailing = source.read().strip()
    if trailing:
        logger.error(f"Unexpected trailing input after vector: '{trailing}'")
        raise VectorParseError(f"Expected {COMPONENT_COUNT} values, found trailing input '{trailing}'.")
    return vector


def _read_token(source: TextSource) -> str:
    """Skip leading whitespace and read up to (and including) the next whitespace character."""
    char = source.read(1)
    while char and char.isspace():
        char = source.read(1)

    chars: list[str] = []
    while char and not char.isspace():
        chars.append(char)
        char = source.read(1)
    return "".join(chars)


def _parse_component(token: str, axis: str) -> float:
    try:
        # ASCII decimal notation only, no digit separators
        if "_" in token or not token.isascii():
            raise ValueError(token)
        value = float(token)
    except ValueError as e:
        logger.error(f"Invalid value '{token}' for component '{axis}'")
        raise VectorParseError(f"Invalid value '{token}' for component '{axis}'.") from e

    if not math.isfinite(value):
        logger.error(f"Non-finite value '{token}' for component '{axis}'")
        raise VectorParseError(f"Non-finite value '{token}' for component '{axis}'.")
    return value
