"""Hex digit tables and single-byte encoding/decoding."""

import enum
from typing import Sequence

from .errors import HexError, HexErrorKind

# Returned by from_nibble for anything that is not a letter or a digit
INVALID_NIBBLE = 0xFF


class Case(enum.Enum):
    """Alphabet used for the digits 10-15 when encoding."""
    LOWER = 'lower'
    UPPER = 'upper'


def _gen_lut(case: Case) -> bytes:
    alpha = ord('a') if case is Case.LOWER else ord('A')
    table = bytearray(0x10)
    for i in range(0x10):
        table[i] = i + (ord('0') if i < 10 else alpha - 10)
    return bytes(table)


LUT_LOW = _gen_lut(Case.LOWER)
LUT_UP = _gen_lut(Case.UPPER)

_ORD_0 = ord('0')
_ORD_9 = ord('9')
_ORD_LOWER_A = ord('a')
_ORD_LOWER_Z = ord('z')
_ORD_UPPER_A = ord('A')
_ORD_UPPER_Z = ord('Z')


def lut(case: Case) -> bytes:
    """Return the 16-entry digit table for ``case``."""
    return LUT_LOW if case is Case.LOWER else LUT_UP


def from_byte(b: int, case: Case) -> bytes:
    """Encode one byte as two ASCII hex digits, high nibble first."""
    table = lut(case)
    return bytes((table[b >> 4], table[b & 0xF]))


def from_nibble(h: int) -> int:
    """Map an ASCII character to its digit value.

    Letters are offset from 10 regardless of case, so ``'g'`` and beyond map
    past 0xF. Everything else maps to INVALID_NIBBLE.
    """
    if _ORD_UPPER_A <= h <= _ORD_UPPER_Z:
        return h - _ORD_UPPER_A + 10
    if _ORD_LOWER_A <= h <= _ORD_LOWER_Z:
        return h - _ORD_LOWER_A + 10
    if _ORD_0 <= h <= _ORD_9:
        return h - _ORD_0
    return INVALID_NIBBLE


def from_hex(pair: Sequence[int]) -> int:
    """Decode two ASCII hex digits into one byte.

    Each digit may independently be upper or lower case.

    Raises:
        HexError: NOT_NIBBLE if either character is not a hex digit.
    """
    high = from_nibble(pair[0])
    low = from_nibble(pair[1])
    # one check covers both the sentinel and letters past 'f'
    if high > 0xF or low > 0xF:
        raise HexError(HexErrorKind.NOT_NIBBLE)
    return (high << 4) | low
