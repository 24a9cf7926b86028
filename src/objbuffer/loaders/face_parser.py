"""Decode ``f`` statements into vertex keys.

Only fully specified, positive ``pos/tex/norm`` corners are accepted.
Bounds are not checked here; see :mod:`objbuffer.loaders.vertex_resolver`.
"""

import re
from typing import Sequence

from objbuffer.constants import (
    FACE_CORNERS, INDEX_SEPARATOR, KEY_COMPONENTS, MAX_INDEX, MAX_INDEX_DIGITS,
)
from objbuffer.core.errors import IntParseError, InvalidFormatError
from objbuffer.core.mesh import VertexKey

_INT_RE = re.compile(r"\+?[0-9]+")


def parse_index(token: str) -> int:
    """Parse a non-negative decimal integer component.

    Values above ``MAX_INDEX`` are rejected before conversion.
    """
    if not _INT_RE.fullmatch(token):
        raise IntParseError(repr(token))
    if len(token.lstrip("+").lstrip("0")) > MAX_INDEX_DIGITS:
        raise IntParseError(f"{len(token)}-character index exceeds {MAX_INDEX}")
    value = int(token)
    if value > MAX_INDEX:
        raise IntParseError(f"{token} exceeds {MAX_INDEX}")
    return value


def parse_vertex_key(token: str) -> VertexKey:
    """Split ``a/b/c`` into a (position, texcoord, normal) index triple."""
    parts = token.split(INDEX_SEPARATOR)
    if len(parts) != KEY_COMPONENTS:
        raise InvalidFormatError(
            f"vertex key {token!r} has {len(parts)} components, expected {KEY_COMPONENTS}"
        )
    return (parse_index(parts[0]), parse_index(parts[1]), parse_index(parts[2]))


def parse_face(tokens: Sequence[str]) -> tuple[VertexKey, VertexKey, VertexKey]:
    """Parse a triangular face payload into its three corner keys."""
    if len(tokens) != FACE_CORNERS:
        raise InvalidFormatError(
            f"face needs {FACE_CORNERS} corners, got {len(tokens)}"
        )
    return (
        parse_vertex_key(tokens[0]),
        parse_vertex_key(tokens[1]),
        parse_vertex_key(tokens[2]),
    )
