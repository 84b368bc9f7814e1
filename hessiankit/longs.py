"""Hessian 2 encoding of 64-bit longs and of null."""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, Optional

BC_NULL = 0x4E  # 'N'
BC_FALSE = 0x46  # 'F'
BC_TRUE = 0x54  # 'T'

BC_INT = 0x49  # 'I'
BC_INT_ZERO = 0x90
BC_INT_BYTE_ZERO = 0xC8
BC_INT_SHORT_ZERO = 0xD4

BC_LONG = 0x4C  # 'L'
BC_LONG_INT = 0x59
BC_LONG_ZERO = 0xE0
BC_LONG_BYTE_ZERO = 0xF8
BC_LONG_SHORT_ZERO = 0x3C

BC_DOUBLE_ZERO = 0x5B
BC_DOUBLE_ONE = 0x5C
BC_DOUBLE_BYTE = 0x5D
BC_DOUBLE_SHORT = 0x5E
BC_DOUBLE_MILL = 0x5F

LONG_DIRECT_MIN, LONG_DIRECT_MAX = -0x08, 0x0F
LONG_BYTE_MIN, LONG_BYTE_MAX = -0x800, 0x7FF
LONG_SHORT_MIN, LONG_SHORT_MAX = -0x40000, 0x3FFFF
INT32_MIN, INT32_MAX = -0x80000000, 0x7FFFFFFF
INT64_MIN, INT64_MAX = -0x8000000000000000, 0x7FFFFFFFFFFFFFFF


class HessianDecodeError(ValueError):
    """Raised when Hessian data cannot be decoded."""


def encode_long(value: int) -> bytes:
    """Encode a signed 64-bit integer in the shortest Hessian long form."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"value {value} does not fit in a 64-bit long")
    if LONG_DIRECT_MIN <= value <= LONG_DIRECT_MAX:
        return bytes([value + BC_LONG_ZERO])
    if LONG_BYTE_MIN <= value <= LONG_BYTE_MAX:
        return bytes([BC_LONG_BYTE_ZERO + (value >> 8), value & 0xFF])
    if LONG_SHORT_MIN <= value <= LONG_SHORT_MAX:
        return bytes(
            [BC_LONG_SHORT_ZERO + (value >> 16), (value >> 8) & 0xFF, value & 0xFF]
        )
    if INT32_MIN <= value <= INT32_MAX:
        return bytes([BC_LONG_INT]) + struct.pack(">i", value)
    return bytes([BC_LONG]) + struct.pack(">q", value)


def encode_null() -> bytes:
    """Encode a null value."""
    return bytes([BC_NULL])


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) < size:
        raise HessianDecodeError(
            f"unexpected end of data: wanted {size} bytes, got {len(data or b'')}"
        )
    return data


def read_long(stream: BinaryIO, tag: Optional[int] = None) -> int:
    """Read a long from ``stream``.

    When ``tag`` is given it is the value's already-consumed leading byte;
    otherwise the tag is read from the stream first. Null and boolean tags as
    well as the compact int and double forms are accepted and converted.
    """
    if tag is None:
        tag = _read_exact(stream, 1)[0]

    if tag in (BC_NULL, BC_FALSE, BC_DOUBLE_ZERO):
        return 0
    if tag in (BC_TRUE, BC_DOUBLE_ONE):
        return 1
    if 0x80 <= tag <= 0xBF:
        return tag - BC_INT_ZERO
    if 0xC0 <= tag <= 0xCF:
        return ((tag - BC_INT_BYTE_ZERO) << 8) + _read_exact(stream, 1)[0]
    if 0xD0 <= tag <= 0xD7:
        low = int.from_bytes(_read_exact(stream, 2), "big")
        return ((tag - BC_INT_SHORT_ZERO) << 16) + low
    if 0xD8 <= tag <= 0xEF:
        return tag - BC_LONG_ZERO
    if 0xF0 <= tag <= 0xFF:
        return ((tag - BC_LONG_BYTE_ZERO) << 8) + _read_exact(stream, 1)[0]
    if 0x38 <= tag <= 0x3F:
        low = int.from_bytes(_read_exact(stream, 2), "big")
        return ((tag - BC_LONG_SHORT_ZERO) << 16) + low
    if tag == BC_DOUBLE_BYTE:
        return struct.unpack(">b", _read_exact(stream, 1))[0]
    if tag == BC_DOUBLE_SHORT:
        return struct.unpack(">h", _read_exact(stream, 2))[0]
    if tag in (BC_INT, BC_LONG_INT):
        return struct.unpack(">i", _read_exact(stream, 4))[0]
    if tag == BC_DOUBLE_MILL:
        mills = struct.unpack(">i", _read_exact(stream, 4))[0]
        return int(mills / 1000)
    if tag == BC_LONG:
        return struct.unpack(">q", _read_exact(stream, 8))[0]
    raise HessianDecodeError(f"decode long: wrong tag {tag:#x}")


def decode_long(data: bytes) -> int:
    """Decode the long at the start of ``data``."""
    return read_long(io.BytesIO(data))