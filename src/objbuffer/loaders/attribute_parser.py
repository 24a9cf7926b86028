"""Parsers for ``v``, ``vt`` and ``vn`` statement payloads."""

import re
from typing import Sequence

from objbuffer.constants import NORMAL_SIZE, POSITION_SIZE, TEXCOORD_SIZE
from objbuffer.core.errors import FloatParseError, InvalidFormatError
from objbuffer.core.mesh import Normal, Position, TextureCoordinate

# Decimal notation with optional exponent, or inf/infinity/nan.
# Tokens arrive lowercased.  ASCII digits only.
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)"
)


def parse_float(token: str) -> float:
    """Parse one floating-point token, rejecting Python-only spellings."""
    if not _FLOAT_RE.fullmatch(token):
        raise FloatParseError(repr(token))
    return float(token)


def _parse_floats(tokens: Sequence[str], count: int, what: str) -> tuple[float, ...]:
    if len(tokens) != count:
        raise InvalidFormatError(f"{what} needs {count} values, got {len(tokens)}")
    return tuple(parse_float(t) for t in tokens)


def parse_position(tokens: Sequence[str]) -> Position:
    """``v x y z`` payload -> (x, y, z)."""
    return _parse_floats(tokens, POSITION_SIZE, "position")


def parse_texture_coordinate(tokens: Sequence[str]) -> TextureCoordinate:
    """``vt u v`` payload -> (u, v)."""
    return _parse_floats(tokens, TEXCOORD_SIZE, "texture coordinate")


def parse_normal(tokens: Sequence[str]) -> Normal:
    """``vn x y z`` payload -> (x, y, z)."""
    return _parse_floats(tokens, NORMAL_SIZE, "normal")
