import pytest
from hypothesis import given, strategies as st

from hexslice.errors import HexError, HexErrorKind
from hexslice.hex_encoding import (
    INVALID_NIBBLE,
    LUT_LOW,
    LUT_UP,
    Case,
    from_byte,
    from_hex,
    from_nibble,
    lut,
)


def test_tables_match_alphabets():
    assert LUT_LOW == b"0123456789abcdef"
    assert LUT_UP == b"0123456789ABCDEF"
    assert lut(Case.LOWER) is LUT_LOW
    assert lut(Case.UPPER) is LUT_UP


@pytest.mark.parametrize("b, case, expected", [
    (0x00, Case.LOWER, b"00"),
    (0x0F, Case.LOWER, b"0f"),
    (0xAB, Case.LOWER, b"ab"),
    (0xAB, Case.UPPER, b"AB"),
    (0xFF, Case.UPPER, b"FF"),
    (0x68, Case.UPPER, b"68"),
])
def test_from_byte(b, case, expected):
    assert from_byte(b, case) == expected


@pytest.mark.parametrize("ch, expected", [
    ("0", 0),
    ("9", 9),
    ("a", 10),
    ("f", 15),
    ("A", 10),
    ("F", 15),
    # letters past f are offset, not rejected, and fail the range check later
    ("g", 16),
    ("Z", 35),
    (" ", INVALID_NIBBLE),
    ("/", INVALID_NIBBLE),
    (":", INVALID_NIBBLE),
    ("@", INVALID_NIBBLE),
    ("`", INVALID_NIBBLE),
])
def test_from_nibble(ch, expected):
    assert from_nibble(ord(ch)) == expected


def test_from_nibble_rejects_non_ascii():
    assert from_nibble(0x80) == INVALID_NIBBLE
    assert from_nibble(0xFF) == INVALID_NIBBLE


def test_from_hex_mixed_case():
    assert from_hex(b"aB") == 0xAB
    assert from_hex(b"Ab") == 0xAB
    assert from_hex(b"ab") == from_hex(b"AB")
    assert from_hex([ord("7"), ord("f")]) == 0x7F


@pytest.mark.parametrize("pair", [b"zz", b"0g", b"g0", b" 1", b"1\x00"])
def test_from_hex_rejects_non_hex(pair):
    with pytest.raises(HexError) as exc:
        from_hex(pair)
    assert exc.value.kind is HexErrorKind.NOT_NIBBLE
    assert exc.value.position is None


def test_hex_error_is_value_error():
    err = HexError(HexErrorKind.ODD)
    assert isinstance(err, ValueError)
    assert str(err) == "Buffer has an odd `len`"
    assert str(HexError(HexErrorKind.NOT_NIBBLE, position=4)) == (
        "One or more bytes is not an ASCII nibble (at offset 4)"
    )


@given(st.integers(min_value=0, max_value=0xFF), st.sampled_from(list(Case)))
def test_byte_round_trip(b, case):
    pair = from_byte(b, case)
    assert len(pair) == 2
    assert from_hex(pair) == b
    expected = f"{b:02X}" if case is Case.UPPER else f"{b:02x}"
    assert pair == expected.encode()
