"""The network emulator (netem) queueing discipline."""

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from .attributes import (
    Attribute,
    decode_attributes,
    decode_int64,
    decode_uint32,
    decode_uint64,
    encode_attributes,
    encode_int64,
    encode_uint32,
    encode_uint64,
)
from .errors import InvalidArgError, NoArgError
from .structs import marshal_struct, unmarshal_struct

_NETEM_CORR = 1
_NETEM_DELAY_DIST = 2
_NETEM_REORDER = 3
_NETEM_CORRUPT = 4
_NETEM_LOSS = 5
_NETEM_RATE = 6
_NETEM_ECN = 7
_NETEM_RATE64 = 8
_NETEM_PAD = 9
_NETEM_LATENCY64 = 10
_NETEM_JITTER64 = 11
_NETEM_SLOT = 12
_NETEM_SLOT_DIST = 13
_NETEM_PRNG_SEED = 14

_QOPT_SIZE = 24


@dataclass
class NetemQopt:
    """tc_netem_qopt from pkt_sched.h."""

    latency: int = 0
    limit: int = 0
    loss: int = 0
    gap: int = 0
    duplicate: int = 0
    jitter: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I", "I", "I")


@dataclass
class NetemCorr:
    """tc_netem_corr from pkt_sched.h."""

    delay: int = 0
    loss: int = 0
    dup: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I")


@dataclass
class NetemReorder:
    """tc_netem_reorder from pkt_sched.h."""

    probability: int = 0
    correlation: int = 0
    _layout: ClassVar[tuple] = ("I", "I")


@dataclass
class NetemCorrupt:
    """tc_netem_corrupt from pkt_sched.h."""

    probability: int = 0
    correlation: int = 0
    _layout: ClassVar[tuple] = ("I", "I")


@dataclass
class NetemRate:
    """tc_netem_rate from pkt_sched.h."""

    rate: int = 0
    packet_overhead: int = 0
    cell_size: int = 0
    cell_overhead: int = 0
    _layout: ClassVar[tuple] = ("I", "i", "i", "i")


@dataclass
class NetemSlot:
    """tc_netem_slot from pkt_sched.h."""

    min_delay: int = 0
    max_delay: int = 0
    max_packets: int = 0
    max_bytes: int = 0
    dist_delay: int = 0
    dist_jitter: int = 0
    _layout: ClassVar[tuple] = ("q", "q", "i", "i", "q", "q")


@dataclass
class Netem:
    """Attributes of the netem discipline."""

    qopt: NetemQopt = field(default_factory=NetemQopt)
    corr: NetemCorr | None = None
    delay_dist: list[int] | None = None
    reorder: NetemReorder | None = None
    corrupt: NetemCorrupt | None = None
    rate: NetemRate | None = None
    ecn: int | None = None
    rate64: int | None = None
    latency64: int | None = None
    jitter64: int | None = None
    slot: NetemSlot | None = None
    prng_seed: int | None = None


def _encode_dist(dist: list[int]) -> bytes:
    try:
        return struct.pack(f"={len(dist)}h", *dist)
    except struct.error as exc:
        raise InvalidArgError(f"Netem delay distribution: {dist!r}") from exc


def _decode_dist(data: bytes) -> list[int]:
    count = len(data) // 2
    return list(struct.unpack(f"={count}h", data[: count * 2]))


def marshal_netem(info: Netem | None) -> bytes:
    """Encode netem options: the qopt structure followed by attributes."""
    if info is None:
        raise NoArgError("Netem")
    attrs = []
    if info.corr is not None:
        attrs.append(Attribute(_NETEM_CORR, marshal_struct(info.corr)))
    if info.delay_dist is not None:
        attrs.append(Attribute(_NETEM_DELAY_DIST, _encode_dist(info.delay_dist)))
    if info.reorder is not None:
        attrs.append(Attribute(_NETEM_REORDER, marshal_struct(info.reorder)))
    if info.corrupt is not None:
        attrs.append(Attribute(_NETEM_CORRUPT, marshal_struct(info.corrupt)))
    if info.rate is not None:
        attrs.append(Attribute(_NETEM_RATE, marshal_struct(info.rate)))
    if info.ecn is not None:
        attrs.append(Attribute(_NETEM_ECN, encode_uint32(info.ecn)))
    if info.rate64 is not None:
        attrs.append(Attribute(_NETEM_RATE64, encode_uint64(info.rate64)))
    if info.latency64 is not None:
        attrs.append(Attribute(_NETEM_LATENCY64, encode_int64(info.latency64)))
    if info.jitter64 is not None:
        attrs.append(Attribute(_NETEM_JITTER64, encode_int64(info.jitter64)))
    if info.slot is not None:
        attrs.append(Attribute(_NETEM_SLOT, marshal_struct(info.slot)))
    if info.prng_seed is not None:
        attrs.append(Attribute(_NETEM_PRNG_SEED, encode_uint64(info.prng_seed)))
    return marshal_struct(info.qopt) + encode_attributes(attrs)


def unmarshal_netem(data: bytes) -> Netem:
    """Decode netem options.

    Raises EOFError if data is too short to hold the qopt structure.
    """
    info = Netem(qopt=unmarshal_struct(data, NetemQopt))
    for attr in decode_attributes(data[_QOPT_SIZE:]):
        if attr.type == _NETEM_CORR:
            info.corr = unmarshal_struct(attr.data, NetemCorr)
        elif attr.type == _NETEM_DELAY_DIST:
            info.delay_dist = _decode_dist(attr.data)
        elif attr.type == _NETEM_REORDER:
            info.reorder = unmarshal_struct(attr.data, NetemReorder)
        elif attr.type == _NETEM_CORRUPT:
            info.corrupt = unmarshal_struct(attr.data, NetemCorrupt)
        elif attr.type == _NETEM_RATE:
            info.rate = unmarshal_struct(attr.data, NetemRate)
        elif attr.type == _NETEM_ECN:
            info.ecn = decode_uint32(attr.data)
        elif attr.type == _NETEM_RATE64:
            info.rate64 = decode_uint64(attr.data)
        elif attr.type == _NETEM_LATENCY64:
            info.latency64 = decode_int64(attr.data)
        elif attr.type == _NETEM_JITTER64:
            info.jitter64 = decode_int64(attr.data)
        elif attr.type == _NETEM_SLOT:
            info.slot = unmarshal_struct(attr.data, NetemSlot)
        elif attr.type == _NETEM_PAD:
            continue
        elif attr.type == _NETEM_PRNG_SEED:
            info.prng_seed = decode_uint64(attr.data)
        else:
            raise InvalidArgError(f"unmarshalNetem(): unknown attribute {attr.type}")
    return info