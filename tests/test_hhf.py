import struct

import pytest

from tcqdisc.attributes import Attribute, encode_attributes
from tcqdisc.errors import InvalidArgError, NoArgError
from tcqdisc.hhf import Hhf, marshal_hhf, unmarshal_hhf


def test_round_trip_simple():
    val = Hhf(
        backlog_limit=1,
        quantum=2,
        hh_flows_limit=3,
        reset_timeout=4,
        admit_bytes=5,
        evict_timeout=6,
        non_hh_weight=7,
    )
    assert unmarshal_hhf(marshal_hhf(val)) == val


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_hhf(None)


def test_single_attribute_encoding():
    assert marshal_hhf(Hhf(quantum=9)) == struct.pack("=HHI", 8, 2, 9)


def test_empty_options():
    assert marshal_hhf(Hhf()) == b""
    assert unmarshal_hhf(b"") == Hhf()


def test_unknown_attribute():
    data = encode_attributes([Attribute(42, b"\x00\x00\x00\x00")])
    with pytest.raises(InvalidArgError):
        unmarshal_hhf(data)