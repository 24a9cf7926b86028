"""Shared constants and defaults for objbuffer."""

import numpy as np

# Output buffer dtypes
VERTEX_DTYPE = np.float32
INDEX_DTYPE = np.uint32

# Record layout: position (3) + texcoord (2) + normal (3)
POSITION_SIZE = 3
TEXCOORD_SIZE = 2
NORMAL_SIZE = 3
VERTEX_SIZE = POSITION_SIZE + TEXCOORD_SIZE + NORMAL_SIZE  # 8

# Faces are strictly triangulated
FACE_CORNERS = 3
KEY_COMPONENTS = 3  # pos/tex/norm
INDEX_SEPARATOR = "/"

# Largest accepted face index component (unsigned 64-bit)
MAX_INDEX = 2**64 - 1
MAX_INDEX_DIGITS = len(str(MAX_INDEX))  # 20

# Statement keywords (matched after lowercasing)
KEYWORD_POSITION = "v"
KEYWORD_TEXCOORD = "vt"
KEYWORD_NORMAL = "vn"
KEYWORD_FACE = "f"

RECOGNIZED_KEYWORDS = frozenset({
    KEYWORD_POSITION,
    KEYWORD_TEXCOORD,
    KEYWORD_NORMAL,
    KEYWORD_FACE,
})
