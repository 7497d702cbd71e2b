"""The hierarchy token bucket (htb) queueing discipline."""

from dataclasses import dataclass, field
from typing import ClassVar

from .attributes import (
    Attribute,
    decode_attributes,
    decode_uint32,
    decode_uint64,
    encode_attributes,
    encode_uint32,
    encode_uint64,
)
from .errors import InvalidArgError, NoArgError
from .structs import RateSpec, marshal_struct, unmarshal_struct

_HTB_PARMS = 1
_HTB_INIT = 2
_HTB_CTAB = 3
_HTB_RTAB = 4
_HTB_DIRECT_QLEN = 5
_HTB_RATE64 = 6
_HTB_CEIL64 = 7
_HTB_PAD = 8
_HTB_OFFLOAD = 9


@dataclass
class HtbGlob:
    """tc_htb_glob from pkt_sched.h."""

    version: int = 0
    rate2quantum: int = 0
    defcls: int = 0
    debug: int = 0
    direct_pkts: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I", "I")


@dataclass
class HtbOpt:
    """tc_htb_opt from pkt_sched.h."""

    rate: RateSpec = field(default_factory=RateSpec)
    ceil: RateSpec = field(default_factory=RateSpec)
    buffer: int = 0
    cbuffer: int = 0
    quantum: int = 0
    level: int = 0
    prio: int = 0
    _layout: ClassVar[tuple] = (RateSpec, RateSpec, "I", "I", "I", "I", "I")


@dataclass
class Htb:
    """Attributes of the htb discipline."""

    parms: HtbOpt | None = None
    init: HtbGlob | None = None
    ctab: bytes | None = None
    rtab: bytes | None = None
    direct_qlen: int | None = None
    rate64: int | None = None
    ceil64: int | None = None
    offload: bool | None = None


def marshal_htb(info: Htb | None) -> bytes:
    """Encode htb options as netlink attributes.

    The rate tables are kernel output and are not encoded.
    """
    if info is None:
        raise NoArgError("Htb")
    attrs = []
    if info.parms is not None:
        attrs.append(Attribute(_HTB_PARMS, marshal_struct(info.parms)))
    if info.init is not None:
        attrs.append(Attribute(_HTB_INIT, marshal_struct(info.init)))
    if info.direct_qlen is not None:
        attrs.append(Attribute(_HTB_DIRECT_QLEN, encode_uint32(info.direct_qlen)))
    if info.rate64 is not None:
        attrs.append(Attribute(_HTB_RATE64, encode_uint64(info.rate64)))
    if info.ceil64 is not None:
        attrs.append(Attribute(_HTB_CEIL64, encode_uint64(info.ceil64)))
    if info.offload:
        attrs.append(Attribute(_HTB_OFFLOAD))
    return encode_attributes(attrs)


def unmarshal_htb(data: bytes) -> Htb:
    """Decode htb options from netlink attributes."""
    info = Htb()
    for attr in decode_attributes(data):
        if attr.type == _HTB_PARMS:
            info.parms = unmarshal_struct(attr.data, HtbOpt)
        elif attr.type == _HTB_INIT:
            info.init = unmarshal_struct(attr.data, HtbGlob)
        elif attr.type == _HTB_CTAB:
            info.ctab = attr.data
        elif attr.type == _HTB_RTAB:
            info.rtab = attr.data
        elif attr.type == _HTB_DIRECT_QLEN:
            info.direct_qlen = decode_uint32(attr.data)
        elif attr.type == _HTB_RATE64:
            info.rate64 = decode_uint64(attr.data)
        elif attr.type == _HTB_CEIL64:
            info.ceil64 = decode_uint64(attr.data)
        elif attr.type == _HTB_PAD:
            continue
        elif attr.type == _HTB_OFFLOAD:
            if attr.data:
                raise InvalidArgError("flag attribute must not carry data")
            info.offload = True
        else:
            raise InvalidArgError(f"unmarshalHtb(): unknown attribute {attr.type}")
    return info