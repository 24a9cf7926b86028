"""Parse error types raised by the OBJ pipeline."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    FLOAT_PARSE = "failed to parse float"
    INT_PARSE = "failed to parse integer"
    INVALID_FORMAT = "invalid format"


class ObjParseError(ValueError):
    """Base class for all OBJ parse failures.

    Parameters
    ----------
    detail : str, optional
        Extra context appended to the kind's fixed message.
    line_number : int, optional
        1-based source line the failure is attributed to.
    """
    kind: ErrorKind = ErrorKind.INVALID_FORMAT

    def __init__(self, detail: Optional[str] = None, line_number: Optional[int] = None):
        self.detail = detail
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        msg = self.kind.value
        if self.detail:
            msg = f"{msg}: {self.detail}"
        if self.line_number is not None:
            msg = f"{msg} (line {self.line_number})"
        return msg

    def at_line(self, line_number: int) -> "ObjParseError":
        """Attach a line number unless one is already set; returns self."""
        if self.line_number is None:
            self.line_number = line_number
            self.args = (self._format(),)
        return self

    def __str__(self) -> str:
        return self._format()


class FloatParseError(ObjParseError):
    kind = ErrorKind.FLOAT_PARSE


class IntParseError(ObjParseError):
    kind = ErrorKind.INT_PARSE


class InvalidFormatError(ObjParseError):
    kind = ErrorKind.INVALID_FORMAT
