import pytest

from tcqdisc.attributes import Attribute, decode_attributes, encode_attributes
from tcqdisc.errors import InvalidArgError, NoArgError
from tcqdisc.stats import (
    GenBasic,
    GenQueue,
    GenRateEst,
    GenRateEst64,
    GenStats,
    marshal_gen_stats,
    unmarshal_gen_stats,
)

TCA_STATS_PAD = 6
TCA_STATS_APP = 4


def inject_attribute(orig, new, attr_type):
    attrs = decode_attributes(orig)
    attrs.append(Attribute(attr_type, new))
    return encode_attributes(attrs)


@pytest.mark.parametrize(
    "val",
    [
        GenStats(basic=GenBasic(bytes=123)),
        GenStats(
            basic=GenBasic(bytes=1, packets=2),
            rate_est=GenRateEst(byte_per_second=3, packet_per_second=4),
            queue=GenQueue(queue_len=5, backlog=6, drops=7, requeues=8, overlimits=9),
            rate_est64=GenRateEst64(byte_per_second=10, packet_per_second=11),
            basic_hw=GenBasic(bytes=12, packets=13),
        ),
    ],
)
def test_round_trip_with_pad(val):
    data = marshal_gen_stats(val)
    new_data = inject_attribute(data, b"", TCA_STATS_PAD)
    assert unmarshal_gen_stats(new_data) == val


def test_nil():
    with pytest.raises(NoArgError):
        marshal_gen_stats(None)


def test_empty():
    assert marshal_gen_stats(GenStats()) == b""
    assert unmarshal_gen_stats(b"") == GenStats()


def test_unknown_attribute():
    data = encode_attributes([Attribute(TCA_STATS_APP, b"\x00\x00\x00\x00")])
    with pytest.raises(InvalidArgError):
        unmarshal_gen_stats(data)


def test_short_struct():
    data = encode_attributes([Attribute(1, b"\x01\x02")])
    with pytest.raises(EOFError):
        unmarshal_gen_stats(data)