"""Error kinds raised by the hex codec."""

import enum
from typing import Optional


class HexErrorKind(enum.Enum):
    """Why a hex operation failed. The value is the user-facing message."""
    ODD = "Buffer has an odd `len`"
    NOT_NIBBLE = "One or more bytes is not an ASCII nibble"
    SMALL = "Destination buffer isn't big enough"


class HexError(ValueError):
    """Raised by every fallible codec operation.

    ``position`` is the offset of the rejected pair in the hex text for
    NOT_NIBBLE failures coming from the slice decoders, otherwise None.
    """

    def __init__(self, kind: HexErrorKind, position: Optional[int] = None):
        self.kind = kind
        self.position = position
        message = kind.value
        if position is not None:
            message += f" (at offset {position})"
        super().__init__(message)
