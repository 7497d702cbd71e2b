"""Size tables (stab) attached to queueing disciplines."""

from dataclasses import dataclass
from typing import ClassVar

from .attributes import Attribute, decode_attributes, encode_attributes
from .errors import InvalidArgError, NoArgError
from .structs import marshal_struct, unmarshal_struct

_STAB_BASE = 1
_STAB_DATA = 2


@dataclass
class SizeSpec:
    """tc_sizespec from pkt_sched.h."""

    cell_log: int = 0
    size_log: int = 0
    cell_align: int = 0
    overhead: int = 0
    link_layer: int = 0
    mpu: int = 0
    mtu: int = 0
    tsize: int = 0
    _layout: ClassVar[tuple] = ("B", "B", "h", "i", "I", "I", "I", "I")


@dataclass
class Stab:
    """A size table: its base parameters and raw table data."""

    base: SizeSpec | None = None
    data: bytes | None = None


def marshal_stab(info: Stab | None) -> bytes:
    """Encode a size table as netlink attributes."""
    if info is None:
        raise NoArgError("Stab")
    attrs = []
    if info.base is not None:
        attrs.append(Attribute(_STAB_BASE, marshal_struct(info.base)))
    if info.data is not None:
        attrs.append(Attribute(_STAB_DATA, bytes(info.data)))
    return encode_attributes(attrs)


def unmarshal_stab(data: bytes) -> Stab:
    """Decode a size table from netlink attributes."""
    stab = Stab()
    for attr in decode_attributes(data):
        if attr.type == _STAB_BASE:
            stab.base = unmarshal_struct(attr.data, SizeSpec)
        elif attr.type == _STAB_DATA:
            stab.data = attr.data
        else:
            raise InvalidArgError(f"unmarshalStab(): unknown attribute {attr.type}")
    return stab