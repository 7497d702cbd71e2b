"""Encoding and decoding of netlink attributes (type-length-value records)."""

import struct
from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidArgError

_HEADER = struct.Struct("=HH")
_HEADER_LEN = _HEADER.size
_ALIGN_TO = 4
_TYPE_MASK = 0x3FFF  # clears the nested and network-byte-order flags


def _align(length: int) -> int:
    return (length + _ALIGN_TO - 1) & ~(_ALIGN_TO - 1)


@dataclass(frozen=True)
class Attribute:
    """One netlink attribute: a type and its raw payload."""

    type: int
    data: bytes = b""


def encode_attributes(attrs: Iterable[Attribute]) -> bytes:
    """Encode attributes into a padded netlink attribute stream."""
    out = bytearray()
    for attr in attrs:
        length = _HEADER_LEN + len(attr.data)
        if length > 0xFFFF:
            raise InvalidArgError(f"attribute {attr.type} too large ({length} bytes)")
        if not 0 <= attr.type <= 0xFFFF:
            raise InvalidArgError(f"attribute type {attr.type} out of range")
        out += _HEADER.pack(length, attr.type)
        out += attr.data
        out += bytes(_align(length) - length)
    return bytes(out)


def decode_attributes(data: bytes) -> list[Attribute]:
    """Decode a netlink attribute stream into a list of attributes."""
    data = bytes(data)
    attrs = []
    offset = 0
    while offset < len(data):
        remaining = len(data) - offset
        if remaining < _HEADER_LEN:
            raise InvalidArgError("invalid attribute; length too short")
        length, attr_type = _HEADER.unpack_from(data, offset)
        if length < _HEADER_LEN or length > remaining:
            raise InvalidArgError("invalid attribute; length too short or too large")
        attrs.append(Attribute(attr_type & _TYPE_MASK, data[offset + _HEADER_LEN : offset + length]))
        offset += _align(length)
    return attrs


def _encode(fmt: str, value: int) -> bytes:
    try:
        return struct.pack("=" + fmt, value)
    except struct.error as exc:
        raise InvalidArgError(f"cannot encode {value!r} as {fmt}") from exc


def _decode(fmt: str, data: bytes) -> int:
    size = struct.calcsize("=" + fmt)
    if len(data) != size:
        raise InvalidArgError(f"expected {size} bytes, got {len(data)}")
    return struct.unpack("=" + fmt, data)[0]


def encode_uint8(value: int) -> bytes:
    """Encode an unsigned 8-bit attribute payload."""
    return _encode("B", value)


def encode_uint16(value: int) -> bytes:
    """Encode an unsigned 16-bit attribute payload in native byte order."""
    return _encode("H", value)


def encode_uint32(value: int) -> bytes:
    """Encode an unsigned 32-bit attribute payload in native byte order."""
    return _encode("I", value)


def encode_uint64(value: int) -> bytes:
    """Encode an unsigned 64-bit attribute payload in native byte order."""
    return _encode("Q", value)


def encode_int32(value: int) -> bytes:
    """Encode a signed 32-bit attribute payload in native byte order."""
    return _encode("i", value)


def encode_int64(value: int) -> bytes:
    """Encode a signed 64-bit attribute payload in native byte order."""
    return _encode("q", value)


def decode_uint8(data: bytes) -> int:
    """Decode an unsigned 8-bit attribute payload."""
    return _decode("B", data)


def decode_uint16(data: bytes) -> int:
    """Decode an unsigned 16-bit attribute payload."""
    return _decode("H", data)


def decode_uint32(data: bytes) -> int:
    """Decode an unsigned 32-bit attribute payload."""
    return _decode("I", data)


def decode_uint64(data: bytes) -> int:
    """Decode an unsigned 64-bit attribute payload."""
    return _decode("Q", data)


def decode_int32(data: bytes) -> int:
    """Decode a signed 32-bit attribute payload."""
    return _decode("i", data)


def decode_int64(data: bytes) -> int:
    """Decode a signed 64-bit attribute payload."""
    return _decode("q", data)