"""objbuffer -- Wavefront OBJ text to interleaved vertex and index buffers."""

from objbuffer.core.errors import (
    ErrorKind, FloatParseError, IntParseError, InvalidFormatError, ObjParseError,
)
from objbuffer.core.mesh import MeshBuffers, ObjAttributes
from objbuffer.loaders.obj_parser import parse, parse_obj, read_attributes

__all__ = [
    "ErrorKind",
    "FloatParseError",
    "IntParseError",
    "InvalidFormatError",
    "MeshBuffers",
    "ObjAttributes",
    "ObjParseError",
    "parse",
    "parse_obj",
    "read_attributes",
]
