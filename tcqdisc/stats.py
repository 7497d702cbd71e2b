"""Generic statistics (gen_stats.h) carried as netlink attributes."""

from dataclasses import dataclass
from typing import ClassVar

from .attributes import Attribute, decode_attributes, encode_attributes
from .errors import InvalidArgError, NoArgError
from .structs import marshal_struct, unmarshal_struct

_STATS_BASIC = 1
_STATS_RATE_EST = 2
_STATS_QUEUE = 3
_STATS_RATE_EST64 = 5
_STATS_PAD = 6
_STATS_BASIC_HW = 7


@dataclass
class GenBasic:
    """gnet_stats_basic."""

    bytes: int = 0
    packets: int = 0
    _layout: ClassVar[tuple] = ("Q", "I")


@dataclass
class GenRateEst:
    """gnet_stats_rate_est."""

    byte_per_second: int = 0
    packet_per_second: int = 0
    _layout: ClassVar[tuple] = ("I", "I")


@dataclass
class GenRateEst64:
    """gnet_stats_rate_est64."""

    byte_per_second: int = 0
    packet_per_second: int = 0
    _layout: ClassVar[tuple] = ("Q", "Q")


@dataclass
class GenQueue:
    """gnet_stats_queue."""

    queue_len: int = 0
    backlog: int = 0
    drops: int = 0
    requeues: int = 0
    overlimits: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I", "I")


@dataclass
class GenStats:
    """The collection of generic statistics."""

    basic: GenBasic | None = None
    rate_est: GenRateEst | None = None
    queue: GenQueue | None = None
    rate_est64: GenRateEst64 | None = None
    basic_hw: GenBasic | None = None


_FIELDS = (
    ("basic", _STATS_BASIC, GenBasic),
    ("rate_est", _STATS_RATE_EST, GenRateEst),
    ("queue", _STATS_QUEUE, GenQueue),
    ("rate_est64", _STATS_RATE_EST64, GenRateEst64),
    ("basic_hw", _STATS_BASIC_HW, GenBasic),
)
_BY_TYPE = {attr_type: (name, cls) for name, attr_type, cls in _FIELDS}


def marshal_gen_stats(info: GenStats | None) -> bytes:
    """Encode generic statistics as netlink attributes."""
    if info is None:
        raise NoArgError("GenStats")
    return encode_attributes(
        Attribute(attr_type, marshal_struct(value))
        for name, attr_type, _ in _FIELDS
        if (value := getattr(info, name)) is not None
    )


def unmarshal_gen_stats(data: bytes) -> GenStats:
    """Decode generic statistics from netlink attributes."""
    info = GenStats()
    for attr in decode_attributes(data):
        if attr.type == _STATS_PAD:
            continue
        entry = _BY_TYPE.get(attr.type)
        if entry is None:
            raise InvalidArgError(f"unmarshalGenStats(): unknown attribute {attr.type}")
        name, cls = entry
        setattr(info, name, unmarshal_struct(attr.data, cls))
    return info