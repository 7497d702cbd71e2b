"""The random early detection (red) queueing discipline."""

from dataclasses import dataclass
from typing import ClassVar

from .attributes import Attribute, decode_attributes, decode_uint32, encode_attributes, encode_uint32
from .errors import InvalidArgError, NoArgError
from .structs import marshal_struct, unmarshal_struct

_RED_PARMS = 1
_RED_STAB = 2
_RED_MAX_P = 3


@dataclass
class RedQOpt:
    """tc_red_qopt from pkt_sched.h."""

    limit: int = 0
    qth_min: int = 0
    qth_max: int = 0
    wlog: int = 0
    plog: int = 0
    scell_log: int = 0
    flags: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "B", "B", "B", "B")


@dataclass
class Red:
    """Attributes of the red discipline."""

    parms: RedQOpt | None = None
    max_p: int | None = None


def marshal_red(info: Red | None) -> bytes:
    """Encode red options as netlink attributes."""
    if info is None:
        raise NoArgError("Red")
    attrs = []
    if info.parms is not None:
        attrs.append(Attribute(_RED_PARMS, marshal_struct(info.parms)))
    if info.max_p is not None:
        attrs.append(Attribute(_RED_MAX_P, encode_uint32(info.max_p)))
    return encode_attributes(attrs)


def unmarshal_red(data: bytes) -> Red:
    """Decode red options from netlink attributes."""
    info = Red()
    for attr in decode_attributes(data):
        if attr.type == _RED_PARMS:
            info.parms = unmarshal_struct(attr.data, RedQOpt)
        elif attr.type == _RED_MAX_P:
            info.max_p = decode_uint32(attr.data)
        else:
            raise InvalidArgError(f"unmarshalRed(): unknown attribute {attr.type}")
    return info