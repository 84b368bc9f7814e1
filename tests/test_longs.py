import io

import pytest

from hessiankit.longs import (
    HessianDecodeError,
    decode_long,
    encode_long,
    encode_null,
    read_long,
)


@pytest.mark.parametrize("value", [0x1, 0xF6, 0x2016, 101910, 0x20161024114530])
def test_round_trip_source_values(value):
    encoded = encode_long(value)
    assert len(encoded) > 0
    assert decode_long(encoded) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b"\xe0"),
        (1, b"\xe1"),
        (15, b"\xef"),
        (0x10, b"\xf8\x10"),
        (-8, b"\xd8"),
        (-9, b"\xf7\xf7"),
        (0x7FF, b"\xff\xff"),
        (-0x800, b"\xf0\x00"),
        (0x800, b"\x3c\x08\x00"),
        (-0x801, b"\x3b\xf7\xff"),
        (0x3FFFF, b"\x3f\xff\xff"),
        (-0x40000, b"\x38\x00\x00"),
        (0x40000, b"\x59\x00\x04\x00\x00"),
        (-0x40001, b"\x59\xff\xfb\xff\xff"),
        (0x7FFFFFFF, b"\x59\x7f\xff\xff\xff"),
        (-0x80000000, b"\x59\x80\x00\x00\x00"),
        (-0x80000001, b"\x4c\xff\xff\xff\xff\x7f\xff\xff\xff"),
    ],
)
def test_encoding_matches_format(value, expected):
    assert encode_long(value) == expected
    assert decode_long(expected) == value


@pytest.mark.parametrize(
    "value",
    [
        -(2**63),
        2**63 - 1,
        -0x80000001,
        0x80000000,
        -0x40001,
        0x40000,
        -0x801,
        0x800,
        -9,
        16,
        0,
    ],
)
def test_round_trip_boundaries(value):
    assert decode_long(encode_long(value)) == value


def test_encode_out_of_range():
    with pytest.raises(ValueError):
        encode_long(2**63)
    with pytest.raises(ValueError):
        encode_long(-(2**63) - 1)


def test_encode_null():
    assert encode_null() == b"N"


def test_null_decodes_to_zero():
    assert decode_long(encode_null()) == 0


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"F", 0),
        (b"T", 1),
        (b"\x90", 0),
        (b"\x80", -16),
        (b"\xbf", 47),
        (b"\xc8\x30", 0x30),
        (b"\xc0\x00", -0x800),
        (b"\xd4\x01\x02", 0x102),
        (b"\xd0\x00\x00", -0x40000),
        (b"I\x00\x00\x01\x00", 256),
        (b"I\xff\xff\xff\xff", -1),
        (b"\x5b", 0),
        (b"\x5c", 1),
        (b"\x5d\x7f", 127),
        (b"\x5d\xff", -1),
        (b"\x5e\x01\x00", 256),
        (b"\x5f\x00\x00\x13\x88", 5),
    ],
)
def test_decode_other_forms(data, expected):
    assert decode_long(data) == expected


def test_read_long_with_given_tag():
    stream = io.BytesIO(b"\x00\x04\x00\x00")
    assert read_long(stream, 0x59) == 0x40000


def test_read_long_consumes_only_its_value():
    stream = io.BytesIO(encode_long(0x800) + encode_long(-9))
    assert read_long(stream) == 0x800
    assert read_long(stream) == -9
    assert stream.read() == b""


def test_wrong_tag():
    with pytest.raises(HessianDecodeError):
        decode_long(b"S")


def test_empty_input():
    with pytest.raises(HessianDecodeError):
        decode_long(b"")


@pytest.mark.parametrize("data", [b"L\x00\x00", b"\x59\x00", b"\xf8", b"\x3c\x00"])
def test_truncated_input(data):
    with pytest.raises(HessianDecodeError):
        decode_long(data)