"""
Slice-level hex encoding and decoding.

All four operations work on caller-owned buffers and never create an output
buffer of their own. Destinations must support item assignment
(``bytearray`` or a writable ``memoryview``); sources only need ``len()``
and integer indexing.

In-place variants share one buffer between source and destination:

- encoding expands ``buf[:len // 2]`` into ``buf[len % 2:]``, walking from the
  last source byte to the first, since every output pair sits at or after
  the offset of the byte it came from;
- decoding packs ``buf`` into ``buf[:len // 2]`` from the first pair to the
  last, since every write lands at or before the pair it was read from.
"""

from .errors import HexError, HexErrorKind
from .hex_encoding import Case, from_hex, lut


def encode_slice(src, dest, case: Case) -> None:
    """Expand the bytes of ``src`` into ``dest[0:2 * len(src)]``.

    Any bytes of ``dest`` past ``2 * len(src)`` are left as they were.
    See encode_slice_in_place() when a second buffer is not wanted.

    Raises:
        HexError: SMALL if ``len(src) > len(dest) // 2``. Nothing is written.
    """
    if len(src) > len(dest) // 2:
        raise HexError(HexErrorKind.SMALL)
    table = lut(case)
    for i in range(len(src)):
        b = src[i]
        i2 = i + i
        dest[i2] = table[b >> 4]
        dest[i2 + 1] = table[b & 0xF]


def encode_slice_in_place(buf, case: Case) -> None:
    """Expand ``buf[:len(buf) // 2]`` into ``buf[len(buf) % 2:]``.

    If ``len(buf)`` is odd, ``buf[0]`` is not written.
    """
    table = lut(case)
    offset = len(buf) % 2
    for i in range(len(buf) // 2 - 1, -1, -1):
        b = buf[i]
        i2 = offset + i + i
        buf[i2] = table[b >> 4]
        buf[i2 + 1] = table[b & 0xF]


def decode_slice(src, dest) -> None:
    """Pack the hex digits of ``src`` into ``dest[0:len(src) // 2]``.

    Raises:
        HexError: ODD or SMALL before anything is written; NOT_NIBBLE at
            the first bad pair, with every byte decoded before it kept.
    """
    if len(src) % 2:
        raise HexError(HexErrorKind.ODD)
    count = len(src) // 2
    if count > len(dest):
        raise HexError(HexErrorKind.SMALL)
    for i in range(count):
        i2 = i + i
        dest[i] = _decode_pair(src, i2)


def decode_slice_in_place(buf) -> None:
    """Pack the hex digits of ``buf`` into ``buf[:len(buf) // 2]``.

    ``buf[len(buf) // 2:]`` is never written.

    Raises:
        HexError: ODD before anything is written; NOT_NIBBLE at the first
            bad pair, with every byte decoded before it kept.
    """
    if len(buf) % 2:
        raise HexError(HexErrorKind.ODD)
    for i in range(len(buf) // 2):
        i2 = i + i
        buf[i] = _decode_pair(buf, i2)


def _decode_pair(src, i2: int) -> int:
    try:
        return from_hex((src[i2], src[i2 + 1]))
    except HexError as e:
        raise HexError(e.kind, position=i2) from None
