"""Wavefront OBJ parser → MeshBuffers."""

import logging

import numpy as np
from numpy.typing import NDArray

from objbuffer.constants import (
    FACE_CORNERS, INDEX_DTYPE, KEYWORD_FACE, KEYWORD_NORMAL, KEYWORD_POSITION,
    KEYWORD_TEXCOORD, VERTEX_DTYPE,
)
from objbuffer.core.errors import ObjParseError
from objbuffer.core.mesh import MeshBuffers, ObjAttributes
from objbuffer.loaders.attribute_parser import (
    parse_normal, parse_position, parse_texture_coordinate,
)
from objbuffer.loaders.face_parser import parse_face
from objbuffer.loaders.line_classifier import classify_lines, is_recognized
from objbuffer.loaders.vertex_resolver import resolve_vertices

logger = logging.getLogger(__name__)


def read_attributes(text: str) -> ObjAttributes:
    """Collect attribute lists and raw face corners from OBJ text.

    Supports ``v``, ``vt``, ``vn`` and triangular ``f`` lines; every other
    keyword is skipped.  The first malformed statement raises, tagged with
    its line number.

    Parameters
    ----------
    text : str
        The OBJ file contents.

    Returns
    -------
    ObjAttributes
    """
    attrs = ObjAttributes()

    for stmt in classify_lines(text):
        key = stmt.keyword
        if not is_recognized(key):
            continue
        try:
            if key == KEYWORD_POSITION:
                attrs.positions.append(parse_position(stmt.tokens))
            elif key == KEYWORD_TEXCOORD:
                attrs.texcoords.append(parse_texture_coordinate(stmt.tokens))
            elif key == KEYWORD_NORMAL:
                attrs.normals.append(parse_normal(stmt.tokens))
            elif key == KEYWORD_FACE:
                attrs.vertex_keys.extend(parse_face(stmt.tokens))
                attrs.key_lines.extend([stmt.line_number] * FACE_CORNERS)
        except ObjParseError as exc:
            exc.at_line(stmt.line_number)
            raise

    return attrs


def parse_obj(
    text: str,
    vertex_dtype=VERTEX_DTYPE,
    index_dtype=INDEX_DTYPE,
) -> MeshBuffers:
    """Parse a Wavefront OBJ string into deduplicated, indexed buffers.

    Each distinct ``pos/tex/norm`` corner becomes one 8-float vertex, in
    order of first appearance; the index buffer holds 3 entries per face.

    Parameters
    ----------
    text : str
        The OBJ file contents.
    vertex_dtype, index_dtype : numpy dtype
        Output array types (float32 / uint32 by default).

    Returns
    -------
    MeshBuffers

    Raises
    ------
    ObjParseError
        On the first malformed statement or unresolvable vertex key.
    """
    attrs = read_attributes(text)
    if not attrs.vertex_keys:
        logger.debug(
            "Parsed OBJ without faces: %d positions, %d texcoords, %d normals",
            len(attrs.positions), len(attrs.texcoords), len(attrs.normals),
        )
        return MeshBuffers.empty(vertex_dtype=vertex_dtype, index_dtype=index_dtype)

    vertices, indices = resolve_vertices(
        attrs.vertex_keys,
        attrs.positions,
        attrs.texcoords,
        attrs.normals,
        key_lines=attrs.key_lines,
        vertex_dtype=vertex_dtype,
        index_dtype=index_dtype,
    )

    logger.debug(
        "Parsed OBJ: %d positions, %d texcoords, %d normals, %d faces -> %d vertices",
        len(attrs.positions), len(attrs.texcoords), len(attrs.normals),
        attrs.face_count, len(vertices),
    )
    return MeshBuffers(vertices=vertices, indices=indices)


def parse(text: str) -> tuple[NDArray[np.float32], NDArray[np.uint32]]:
    """Parse OBJ text and return ``(vertices, indices)`` arrays."""
    buffers = parse_obj(text)
    return buffers.vertices, buffers.indices
