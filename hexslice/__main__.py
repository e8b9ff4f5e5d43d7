"""
hexslice - CLI entry point.

Usage:
    python -m hexslice encode [-u] [-i <FILE>] [-o <FILE>] [--in-place] [-d]
    python -m hexslice decode [-i <FILE>] [-o <FILE>] [--in-place] [-d]

Arguments:
    -u, --upper     Emit upper-case hex digits (encode only)
    -i, --input     Read from FILE instead of stdin
    -o, --output    Write to FILE instead of stdout
    --in-place      Reuse the input buffer instead of a separate output buffer
    -d, --debug     Log buffer sizes
    -h, --help      Show this help message
"""

import argparse
import logging
import sys
from typing import Optional

from .errors import HexError
from .hex_encoding import Case
from .slices import decode_slice, decode_slice_in_place, encode_slice, encode_slice_in_place

logging.basicConfig(
    level=logging.INFO,
    format='%(message)s',
)
logger = logging.getLogger(__name__)


def encode_buffer(data: bytes, case: Case, in_place: bool = False) -> bytearray:
    """Encode ``data`` into a fresh buffer of twice its size."""
    if in_place:
        buf = bytearray(len(data) * 2)
        buf[:len(data)] = data
        encode_slice_in_place(buf, case)
        return buf
    out = bytearray(len(data) * 2)
    encode_slice(data, out, case)
    return out


def decode_buffer(text: bytes, in_place: bool = False) -> bytearray:
    """Decode hex ``text``, ignoring one trailing line break."""
    if text.endswith(b'\r\n'):
        text = text[:-2]
    elif text.endswith(b'\n'):
        text = text[:-1]
    if in_place:
        buf = bytearray(text)
        decode_slice_in_place(buf)
        del buf[len(buf) // 2:]
        return buf
    out = bytearray(len(text) // 2)
    decode_slice(text, out)
    return out


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def _write_output(path: Optional[str], data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, 'wb') as f:
        f.write(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hexslice',
        description='Convert between raw bytes and hexadecimal text',
    )
    parser.add_argument('-d', '--debug', action='store_true', help='Log buffer sizes')
    commands = parser.add_subparsers(dest='command', required=True)

    encode = commands.add_parser('encode', help='Raw bytes to hex text')
    encode.add_argument('-u', '--upper', action='store_true', help='Emit A-F instead of a-f')

    decode = commands.add_parser('decode', help='Hex text to raw bytes')

    for sub in (encode, decode):
        sub.add_argument('-i', '--input', default=None, help='Input file (default: stdin)')
        sub.add_argument('-o', '--output', default=None, help='Output file (default: stdout)')
        sub.add_argument(
            '--in-place', action='store_true',
            help='Transform a single buffer instead of copying into a second one',
        )
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)

    try:
        data = _read_input(args.input)
        logger.debug(f"Read {len(data)} bytes")
        if args.command == 'encode':
            case = Case.UPPER if args.upper else Case.LOWER
            result = encode_buffer(data, case, in_place=args.in_place)
        else:
            result = decode_buffer(data, in_place=args.in_place)
        logger.debug(f"Writing {len(result)} bytes")
        _write_output(args.output, bytes(result))
    except HexError as e:
        logger.error(f"Cannot {args.command} input: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
