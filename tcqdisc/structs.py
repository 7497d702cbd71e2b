"""Fixed-layout kernel structures and their native-endian binary encoding.

Each structure is a dataclass with a ``_layout`` class attribute that lists,
in field order, the struct format code of every field ("I", "16B", ...), or a
nested structure class. Codes ending in "x" are padding and consume no field.
"""

from __future__ import annotations

import dataclasses
import functools
import struct
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Type, TypeVar

from .errors import InvalidArgError, NoArgError

T = TypeVar("T")

RTA_ALIGN_TO = 4

FQ_CODEL_XSTATS_QDISC = 0
FQ_CODEL_XSTATS_CLASS = 1


def _is_padding(code: Any) -> bool:
    return isinstance(code, str) and code.endswith("x")


def _is_array(code: Any) -> bool:
    return isinstance(code, str) and not _is_padding(code) and code[0].isdigit()


def _layout(cls: type) -> tuple:
    layout = getattr(cls, "_layout", None)
    if layout is None or not dataclasses.is_dataclass(cls):
        raise InvalidArgError(f"{cls.__name__} has no binary layout")
    return layout


@functools.lru_cache(maxsize=None)
def _size(cls: type) -> int:
    total = 0
    for code in _layout(cls):
        if isinstance(code, type):
            total += _size(code)
        else:
            total += struct.calcsize("=" + code)
    return total


def _pack_into(obj: Any, out: bytearray) -> None:
    layout = _layout(type(obj))
    names = iter([f.name for f in dataclasses.fields(obj)])
    for code in layout:
        if _is_padding(code):
            out += bytes(struct.calcsize("=" + code))
            continue
        name = next(names)
        value = getattr(obj, name)
        if isinstance(code, type):
            if not isinstance(value, code):
                raise InvalidArgError(f"{name}: expected {code.__name__}")
            _pack_into(value, out)
            continue
        try:
            if _is_array(code):
                out += struct.pack("=" + code, *value)
            else:
                out += struct.pack("=" + code, value)
        except (struct.error, TypeError) as exc:
            raise InvalidArgError(f"{type(obj).__name__}.{name}: {value!r}") from exc


def _unpack_from(cls: Type[T], data: bytes, offset: int) -> tuple:
    names = iter([f.name for f in dataclasses.fields(cls)])
    values = {}
    for code in _layout(cls):
        if _is_padding(code):
            offset += struct.calcsize("=" + code)
            continue
        name = next(names)
        if isinstance(code, type):
            values[name], offset = _unpack_from(code, data, offset)
            continue
        fmt = struct.Struct("=" + code)
        items = fmt.unpack_from(data, offset)
        offset += fmt.size
        values[name] = list(items) if _is_array(code) else items[0]
    return cls(**values), offset


def marshal_struct(obj: Any) -> bytes:
    """Return the packed native-endian encoding of a structure."""
    if obj is None:
        raise InvalidArgError("cannot marshal nothing")
    out = bytearray()
    _pack_into(obj, out)
    return bytes(out)


def unmarshal_struct(data: bytes, cls: Type[T]) -> T:
    """Decode a structure of type cls from the start of data.

    Raises EOFError if data is shorter than the structure.
    """
    size = _size(cls)
    if len(data) < size:
        raise EOFError(f"{cls.__name__} needs {size} bytes, got {len(data)}")
    obj, _ = _unpack_from(cls, bytes(data), 0)
    return obj


def marshal_and_align_struct(obj: Any) -> bytes:
    """Encode a structure and pad it with zeros to a 4-byte boundary."""
    data = marshal_struct(obj)
    return data + bytes(-len(data) % RTA_ALIGN_TO)


@dataclass
class Stats:
    """tc_stats from pkt_sched.h."""

    bytes: int = 0
    packets: int = 0
    drops: int = 0
    overlimits: int = 0
    bps: int = 0
    pps: int = 0
    qlen: int = 0
    backlog: int = 0
    _layout: ClassVar[tuple] = ("Q", "I", "I", "I", "I", "I", "I", "I")


@dataclass
class Stats2:
    """Basic and queue statistics combined."""

    bytes: int = 0
    packets: int = 0
    qlen: int = 0
    backlog: int = 0
    drops: int = 0
    requeues: int = 0
    overlimits: int = 0
    _layout: ClassVar[tuple] = ("Q", "I", "I", "I", "I", "I", "I")


@dataclass
class Tcft:
    """tcf_t timestamps."""

    install: int = 0
    last_use: int = 0
    expires: int = 0
    first_use: int = 0
    _layout: ClassVar[tuple] = ("Q", "Q", "Q", "Q")


@dataclass
class RateSpec:
    """tc_ratespec from pkt_sched.h."""

    cell_log: int = 0
    linklayer: int = 0
    overhead: int = 0
    cell_align: int = 0
    mpu: int = 0
    rate: int = 0
    _layout: ClassVar[tuple] = ("B", "B", "H", "H", "H", "I")


@dataclass
class Policy:
    """tc_police from pkt_sched.h."""

    index: int = 0
    action: int = 0
    limit: int = 0
    burst: int = 0
    mtu: int = 0
    rate: RateSpec = field(default_factory=RateSpec)
    peak_rate: RateSpec = field(default_factory=RateSpec)
    ref_cnt: int = 0
    bind_cnt: int = 0
    capab: int = 0
    _layout: ClassVar[tuple] = ("I", "i", "I", "I", "I", RateSpec, RateSpec, "I", "I", "I")


@dataclass
class FifoOpt:
    """tc_fifo_qopt from pkt_sched.h."""

    limit: int = 0
    _layout: ClassVar[tuple] = ("I",)


@dataclass
class SfqXStats:
    """tc_sfq_xstats from pkt_sched.h."""

    allot: int = 0
    _layout: ClassVar[tuple] = ("i",)


@dataclass
class RedXStats:
    """tc_red_xstats from pkt_sched.h."""

    early: int = 0
    pdrop: int = 0
    other: int = 0
    marked: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I")


@dataclass
class ChokeXStats:
    """tc_choke_xstats from pkt_sched.h."""

    early: int = 0
    pdrop: int = 0
    other: int = 0
    marked: int = 0
    matched: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I", "I")


@dataclass
class HtbXStats:
    """tc_htb_xstats from pkt_sched.h."""

    lends: int = 0
    borrows: int = 0
    giants: int = 0
    tokens: int = 0
    ctokens: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I", "I")


@dataclass
class CbqXStats:
    """tc_cbq_xstats from pkt_sched.h."""

    borrows: int = 0
    overactions: int = 0
    avg_idle: int = 0
    undertime: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "i", "i")


@dataclass
class SfbXStats:
    """tc_sfb_xstats from pkt_sched.h."""

    early_drop: int = 0
    penalty_drop: int = 0
    bucket_drop: int = 0
    queue_drop: int = 0
    child_drop: int = 0
    marked: int = 0
    max_qlen: int = 0
    max_prob: int = 0
    avg_prob: int = 0
    _layout: ClassVar[tuple] = ("I",) * 9


@dataclass
class CodelXStats:
    """tc_codel_xstats from pkt_sched.h."""

    max_packet: int = 0
    count: int = 0
    last_count: int = 0
    ldelay: int = 0
    drop_next: int = 0
    drop_overlimit: int = 0
    ecn_mark: int = 0
    dropping: int = 0
    ce_mark: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I", "i", "I", "I", "I", "I")


@dataclass
class HhfXStats:
    """tc_hhf_xstats from pkt_sched.h."""

    drop_overlimit: int = 0
    hh_overlimit: int = 0
    hh_tot_count: int = 0
    hh_cur_count: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "I", "I")


@dataclass
class PieXStats:
    """tc_pie_xstats from pkt_sched.h."""

    prob: int = 0
    delay: int = 0
    avg_dq_rate: int = 0
    packets_in: int = 0
    dropped: int = 0
    overlimit: int = 0
    maxq: int = 0
    ecn_mark: int = 0
    _layout: ClassVar[tuple] = ("Q", "I", "I", "I", "I", "I", "I", "I")


@dataclass
class HfscXStats:
    """tc_hfsc_stats from pkt_sched.h."""

    work: int = 0
    rt_work: int = 0
    period: int = 0
    level: int = 0
    _layout: ClassVar[tuple] = ("Q", "Q", "I", "I")


@dataclass
class FqCodelQdStats:
    """tc_fq_codel_qd_stats from pkt_sched.h."""

    max_packet: int = 0
    drop_overlimit: int = 0
    ecn_mark: int = 0
    new_flow_count: int = 0
    new_flows_len: int = 0
    old_flows_len: int = 0
    ce_mark: int = 0
    memory_usage: int = 0
    drop_overmemory: int = 0
    _layout: ClassVar[tuple] = ("I",) * 9


@dataclass
class FqCodelClStats:
    """tc_fq_codel_cl_stats from pkt_sched.h."""

    deficit: int = 0
    ldelay: int = 0
    count: int = 0
    last_count: int = 0
    dropping: int = 0
    drop_next: int = 0
    _layout: ClassVar[tuple] = ("i", "I", "I", "I", "I", "i")


@dataclass
class FqCodelXStats:
    """tc_fq_codel_xstats: a type tag followed by qdisc or class statistics."""

    type: int = 0
    qd: Optional[FqCodelQdStats] = None
    cl: Optional[FqCodelClStats] = None


def _three_zeros() -> list:
    return [0, 0, 0]


@dataclass
class FqQdStats:
    """tc_fq_qd_stats from pkt_sched.h."""

    gc_flows: int = 0
    high_prio_packets: int = 0
    tcp_retrans: int = 0
    throttled: int = 0
    flows_plimit: int = 0
    pkts_too_long: int = 0
    allocation_errors: int = 0
    time_next_delayed_flow: int = 0
    flows: int = 0
    inactive_flows: int = 0
    throttled_flows: int = 0
    unthrottle_latency_ns: int = 0
    ce_mark: int = 0
    horizon_drops: int = 0
    horizon_caps: int = 0
    fastpath_packets: int = 0
    band_drops: list = field(default_factory=_three_zeros)
    band_pkt_count: list = field(default_factory=_three_zeros)
    _layout: ClassVar[tuple] = (
        "Q", "Q", "Q", "Q", "Q", "Q", "Q", "q",
        "I", "I", "I", "I",
        "Q", "Q", "Q", "Q",
        "3Q", "3I", "4x",
    )


def marshal_fq_codel_xstats(info: Optional[FqCodelXStats]) -> bytes:
    """Encode fq_codel extended statistics."""
    if info is None:
        raise NoArgError("FqCodelXStats")
    try:
        header = struct.pack("=I", info.type)
    except struct.error as exc:
        raise InvalidArgError(f"FqCodelXStats type {info.type!r}") from exc
    if info.type == FQ_CODEL_XSTATS_QDISC:
        return header + marshal_struct(info.qd)
    if info.type == FQ_CODEL_XSTATS_CLASS:
        return header + marshal_struct(info.cl)
    raise InvalidArgError(f"marshalFqCodelXStats(): unknown FqCodelXStat type: {info.type}")


def unmarshal_fq_codel_xstats(data: bytes) -> FqCodelXStats:
    """Decode fq_codel extended statistics."""
    if len(data) < 4:
        raise EOFError("FqCodelXStats needs a 4 byte type")
    (kind,) = struct.unpack_from("=I", data)
    if kind == FQ_CODEL_XSTATS_QDISC:
        return FqCodelXStats(type=kind, qd=unmarshal_struct(data[4:], FqCodelQdStats))
    if kind == FQ_CODEL_XSTATS_CLASS:
        return FqCodelXStats(type=kind, cl=unmarshal_struct(data[4:], FqCodelClStats))
    raise InvalidArgError(f"extractFqCodelXStats(): unsupported type: {kind}")