import struct

import pytest

from tcqdisc.errors import InvalidArgError, NoArgError
from tcqdisc.pie import Pie, marshal_pie, unmarshal_pie


def test_round_trip_simple():
    val = Pie(
        target=1,
        limit=2,
        tupdate=3,
        alpha=4,
        beta=5,
        ecn=6,
        bytemode=7,
        dq_rate_estimator=8,
    )
    assert unmarshal_pie(marshal_pie(val)) == val


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_pie(None)


def test_unmarshal_garbage():
    with pytest.raises(InvalidArgError):
        unmarshal_pie(b"\x00")


def test_limit_encoding():
    assert marshal_pie(Pie(limit=100)) == struct.pack("=HHI", 8, 2, 100)


def test_wrong_payload_size():
    with pytest.raises(InvalidArgError):
        unmarshal_pie(struct.pack("=HHH", 6, 1, 5) + b"\x00\x00")