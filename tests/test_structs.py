import sys
from dataclasses import dataclass
from typing import ClassVar

import pytest

from tcqdisc.errors import InvalidArgError, NoArgError
from tcqdisc.structs import (
    RTA_ALIGN_TO,
    FqCodelClStats,
    FqCodelQdStats,
    FqCodelXStats,
    FqQdStats,
    Policy,
    RateSpec,
    Stats,
    Stats2,
    Tcft,
    marshal_and_align_struct,
    marshal_fq_codel_xstats,
    marshal_struct,
    unmarshal_fq_codel_xstats,
    unmarshal_struct,
)


@dataclass
class _Unaligned:
    index: int = 0
    capab: int = 0
    action: int = 0
    ref_cnt: int = 0
    bind_cnt: int = 0
    zone: int = 0
    _layout: ClassVar[tuple] = ("I", "I", "i", "I", "I", "H")


@pytest.mark.parametrize(
    "val",
    [
        FqCodelXStats(type=0, qd=FqCodelQdStats(max_packet=123)),
        FqCodelXStats(type=1, cl=FqCodelClStats(deficit=-1)),
    ],
)
def test_fq_codel_xstats_round_trip(val):
    data = marshal_fq_codel_xstats(val)
    assert unmarshal_fq_codel_xstats(data) == val


def test_fq_codel_xstats_unknown_type_marshal():
    with pytest.raises(InvalidArgError):
        marshal_fq_codel_xstats(FqCodelXStats(type=2))


def test_fq_codel_xstats_nil():
    with pytest.raises(NoArgError):
        marshal_fq_codel_xstats(None)


def test_fq_codel_xstats_unknown_type_unmarshal():
    with pytest.raises(InvalidArgError):
        unmarshal_fq_codel_xstats((2).to_bytes(4, sys.byteorder))


def test_fq_codel_xstats_missing_substats():
    with pytest.raises(InvalidArgError):
        marshal_fq_codel_xstats(FqCodelXStats(type=0))


def test_marshal_and_align_struct():
    unaligned = _Unaligned(index=1, capab=2, action=3, ref_cnt=4, bind_cnt=5, zone=6)
    data = marshal_and_align_struct(unaligned)
    assert len(data) % RTA_ALIGN_TO == 0
    assert len(data) > len(marshal_struct(unaligned))
    assert unmarshal_struct(data, _Unaligned) == unaligned


def test_align_keeps_aligned_struct():
    spec = RateSpec(rate=125, linklayer=1)
    assert marshal_and_align_struct(spec) == marshal_struct(spec)


def test_tcft_round_trip():
    tcft = Tcft(install=12, last_use=34, expires=56, first_use=78)
    data = marshal_struct(tcft)
    assert len(data) == 32
    assert data[:8] == (12).to_bytes(8, sys.byteorder)
    assert unmarshal_struct(data, Tcft) == tcft


def test_nested_policy_round_trip():
    pol = Policy(action=-1, mtu=9216, rate=RateSpec(rate=125, linklayer=1), peak_rate=RateSpec(mpu=64))
    assert unmarshal_struct(marshal_struct(pol), Policy) == pol


def test_padding_and_arrays():
    stats = FqQdStats(gc_flows=73, time_next_delayed_flow=-5, band_drops=[1, 2, 3], band_pkt_count=[4, 5, 6])
    data = marshal_struct(stats)
    assert data[-4:] == b"\x00\x00\x00\x00"
    assert unmarshal_struct(data, FqQdStats) == stats


def test_wrong_array_length():
    with pytest.raises(InvalidArgError):
        marshal_struct(FqQdStats(band_drops=[1, 2]))


def test_trailing_data_ignored():
    stats = Stats2(bytes=42, packets=1, qlen=1, overlimits=42)
    assert unmarshal_struct(marshal_struct(stats) + b"\xff" * 8, Stats2) == stats


@pytest.mark.parametrize("data", [b"", b"\x01\x02\x03"])
def test_short_data(data):
    with pytest.raises(EOFError):
        unmarshal_struct(data, Stats)


def test_marshal_nothing():
    with pytest.raises(InvalidArgError):
        marshal_struct(None)


def test_value_out_of_range():
    with pytest.raises(InvalidArgError):
        marshal_struct(RateSpec(cell_log=256))