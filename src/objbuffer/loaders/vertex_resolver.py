"""Vertex key deduplication and vertex buffer assembly."""

from typing import Optional, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from objbuffer.constants import INDEX_DTYPE, VERTEX_DTYPE, VERTEX_SIZE
from objbuffer.core.errors import InvalidFormatError
from objbuffer.core.mesh import Normal, Position, TextureCoordinate, Vertex, VertexKey

T = TypeVar("T")


def deduplicate_keys(keys: Sequence[VertexKey]) -> tuple[list[VertexKey], list[int]]:
    """Collapse repeated keys, keeping first-appearance order.

    Returns
    -------
    unique_keys : list of VertexKey
        Each distinct key once, ordered by first occurrence.
    indices : list of int
        For every input key, its position in ``unique_keys``.
    """
    # dict preserves insertion order: key -> assigned index
    key_map: dict[VertexKey, int] = {}
    indices: list[int] = []
    for key in keys:
        idx = key_map.get(key)
        if idx is None:
            idx = len(key_map)
            key_map[key] = idx
        indices.append(idx)
    return list(key_map), indices


def _lookup(items: Sequence[T], one_based: int, what: str) -> T:
    i = one_based - 1
    if i < 0 or i >= len(items):
        raise InvalidFormatError(
            f"{what} index {one_based} out of range 1..{len(items)}"
        )
    return items[i]


def resolve_vertex(
    key: VertexKey,
    positions: Sequence[Position],
    texcoords: Sequence[TextureCoordinate],
    normals: Sequence[Normal],
) -> Vertex:
    """Look up a 1-based key and concatenate position, texcoord, normal."""
    pos_idx, tex_idx, norm_idx = key
    position = _lookup(positions, pos_idx, "position")
    texcoord = _lookup(texcoords, tex_idx, "texture coordinate")
    normal = _lookup(normals, norm_idx, "normal")
    return (*position, *texcoord, *normal)


def resolve_vertices(
    keys: Sequence[VertexKey],
    positions: Sequence[Position],
    texcoords: Sequence[TextureCoordinate],
    normals: Sequence[Normal],
    key_lines: Optional[Sequence[int]] = None,
    vertex_dtype=VERTEX_DTYPE,
    index_dtype=INDEX_DTYPE,
) -> tuple[NDArray, NDArray]:
    """Build the deduplicated vertex buffer and the matching index buffer.

    Parameters
    ----------
    keys : sequence of VertexKey
        Raw face corners, 3 per face, in face-then-corner order.
    positions, texcoords, normals : sequences
        Attribute lists the 1-based key components refer to.
    key_lines : sequence of int, optional
        Source line for each key; used to report where a bad key came from.

    Returns
    -------
    vertices : ndarray, shape (N, 8)
    indices : ndarray, shape (len(keys),)

    Raises
    ------
    InvalidFormatError
        If any key component is zero or past the end of its list.  Nothing
        is returned in that case.
    """
    unique_keys, index_list = deduplicate_keys(keys)

    first_line: dict[VertexKey, int] = {}
    if key_lines is not None:
        for key, line in zip(keys, key_lines):
            first_line.setdefault(key, line)

    vertices = np.empty((len(unique_keys), VERTEX_SIZE), dtype=vertex_dtype)
    for i, key in enumerate(unique_keys):
        try:
            vertices[i] = resolve_vertex(key, positions, texcoords, normals)
        except InvalidFormatError as exc:
            line = first_line.get(key)
            if line is not None:
                exc.at_line(line)
            raise

    indices = np.array(index_list, dtype=index_dtype)
    return vertices, indices
