import struct

import pytest

from tcqdisc.attributes import Attribute, encode_attributes
from tcqdisc.errors import InvalidArgError, NoArgError
from tcqdisc.qfq import Qfq, marshal_qfq, unmarshal_qfq


def test_round_trip_simple():
    val = Qfq(weight=2, lmax=4)
    assert unmarshal_qfq(marshal_qfq(val)) == val


def test_encoding():
    assert marshal_qfq(Qfq(weight=2, lmax=4)) == struct.pack("=HHIHHI", 8, 1, 2, 8, 2, 4)


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_qfq(None)


def test_unknown_attribute():
    with pytest.raises(InvalidArgError):
        unmarshal_qfq(encode_attributes([Attribute(3, b"\x00\x00\x00\x00")]))


def test_out_of_range_value():
    with pytest.raises(InvalidArgError):
        marshal_qfq(Qfq(weight=-1))