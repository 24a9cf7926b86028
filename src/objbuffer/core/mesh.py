"""Mesh data structures for parsed OBJ geometry (no GL dependencies)."""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from objbuffer.constants import (
    FACE_CORNERS, INDEX_DTYPE, NORMAL_SIZE, POSITION_SIZE, TEXCOORD_SIZE, VERTEX_DTYPE,
    VERTEX_SIZE,
)

Position = tuple[float, float, float]
TextureCoordinate = tuple[float, float]
Normal = tuple[float, float, float]
VertexKey = tuple[int, int, int]  # 1-based (position, texcoord, normal)
Vertex = tuple[float, float, float, float, float, float, float, float]

_TEX_START = POSITION_SIZE
_NORMAL_START = POSITION_SIZE + TEXCOORD_SIZE


@dataclass
class ObjAttributes:
    """Attribute lists and raw face corners accumulated from OBJ statements.

    positions, texcoords, normals: in order of appearance in the source
    vertex_keys: one key per face corner, in face-then-corner order
    key_lines: source line of the face each key came from
    """
    positions: list[Position] = field(default_factory=list)
    texcoords: list[TextureCoordinate] = field(default_factory=list)
    normals: list[Normal] = field(default_factory=list)
    vertex_keys: list[VertexKey] = field(default_factory=list)
    key_lines: list[int] = field(default_factory=list)

    @property
    def face_count(self) -> int:
        return len(self.vertex_keys) // FACE_CORNERS


@dataclass
class MeshBuffers:
    """Interleaved vertex buffer plus triangle index buffer.

    vertices: (N, 8) float32 array, each row px,py,pz,u,v,nx,ny,nz
    indices: flat uint32 array, 3 entries per triangle
    """
    vertices: NDArray[np.float32]
    indices: NDArray[np.uint32]

    def __post_init__(self):
        self.vertices = np.ascontiguousarray(self.vertices).reshape(-1, VERTEX_SIZE)
        self.indices = np.ascontiguousarray(self.indices).reshape(-1)

    @classmethod
    def empty(cls, vertex_dtype=VERTEX_DTYPE, index_dtype=INDEX_DTYPE) -> "MeshBuffers":
        """Buffers for a mesh without faces."""
        return cls(
            vertices=np.empty((0, VERTEX_SIZE), dtype=vertex_dtype),
            indices=np.empty(0, dtype=index_dtype),
        )

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // FACE_CORNERS

    @property
    def has_indices(self) -> bool:
        return len(self.indices) > 0

    @property
    def positions(self) -> NDArray[np.float32]:
        return self.vertices[:, :_TEX_START]

    @property
    def texcoords(self) -> NDArray[np.float32]:
        return self.vertices[:, _TEX_START:_NORMAL_START]

    @property
    def normals(self) -> NDArray[np.float32]:
        return self.vertices[:, _NORMAL_START:_NORMAL_START + NORMAL_SIZE]

    def triangles(self) -> NDArray[np.uint32]:
        """Index buffer viewed as (triangle_count, 3)."""
        return self.indices.reshape(-1, FACE_CORNERS)

    def clone(self) -> "MeshBuffers":
        """Create a deep copy."""
        return MeshBuffers(
            vertices=self.vertices.copy(),
            indices=self.indices.copy(),
        )
