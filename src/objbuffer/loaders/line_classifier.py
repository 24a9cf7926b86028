"""Split OBJ text into keyword-tagged statements."""

from dataclasses import dataclass
from typing import Iterator

from objbuffer.constants import RECOGNIZED_KEYWORDS


@dataclass(frozen=True)
class Statement:
    keyword: str
    tokens: tuple[str, ...]
    line_number: int  # 1-based


def classify_lines(text: str) -> Iterator[Statement]:
    """Yield one statement per non-blank line, in document order.

    Lines are lowercased before tokenizing, so keywords match
    case-insensitively.  Blank and whitespace-only lines produce nothing.
    Unrecognized keywords (comments, ``o``, ``g``, ``usemtl`` ...) are
    still yielded; it is up to the caller to ignore them.
    """
    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = line.lower().split()
        if not parts:
            continue
        yield Statement(parts[0], tuple(parts[1:]), line_number)


def is_recognized(keyword: str) -> bool:
    return keyword in RECOGNIZED_KEYWORDS
