import pytest

from tcqdisc.errors import NoArgError
from tcqdisc.sfq import Sfq, SfqQopt, marshal_sfq, unmarshal_sfq


def test_round_trip_simple():
    value = Sfq(v0=SfqQopt(perturb_period=64, limit=3000, flows=512))
    assert unmarshal_sfq(marshal_sfq(value)) == value


def test_encoded_length():
    assert len(marshal_sfq(Sfq())) == 48


def test_negative_perturb_period_round_trip():
    value = Sfq(v0=SfqQopt(perturb_period=-1), wlog=3, max_p=7)
    decoded = unmarshal_sfq(marshal_sfq(value))
    assert decoded.v0.perturb_period == -1
    assert decoded.max_p == 7


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_sfq(None)


def test_unmarshal_short():
    with pytest.raises(EOFError):
        unmarshal_sfq(bytes(20))