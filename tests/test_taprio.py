import pytest

from tcqdisc.attributes import Attribute, decode_attributes, encode_attributes
from tcqdisc.errors import InvalidArgError, NoArgError
from tcqdisc.mqprio import MqPrioQopt
from tcqdisc.taprio import TaPrio, marshal_ta_prio, unmarshal_ta_prio


def _inject(data: bytes, attr_type: int, payload: bytes = b"") -> bytes:
    attrs = decode_attributes(data)
    attrs.append(Attribute(attr_type, payload))
    return encode_attributes(attrs)


SIMPLE = TaPrio(
    prio_map=MqPrioQopt(num_tc=3),
    sched_base_time=5,
    sched_clock_id=7,
    sched_cycle_time=11,
    sched_cycle_time_extension=13,
    flags=17,
    tx_time_delay=19,
)


def test_round_trip_with_pad():
    data = _inject(marshal_ta_prio(SIMPLE), 6)
    assert unmarshal_ta_prio(data) == SIMPLE


def test_attribute_order():
    types = [a.type for a in decode_attributes(marshal_ta_prio(SIMPLE))]
    assert types == [1, 3, 5, 8, 9, 10, 11]


def test_negative_values_round_trip():
    value = TaPrio(sched_base_time=-5, sched_clock_id=-1)
    assert unmarshal_ta_prio(marshal_ta_prio(value)) == value


def test_marshal_none():
    with pytest.raises(NoArgError):
        marshal_ta_prio(None)


def test_unknown_attribute():
    with pytest.raises(InvalidArgError):
        unmarshal_ta_prio(encode_attributes([Attribute(2, b"")]))


def test_clock_id_out_of_range():
    with pytest.raises(InvalidArgError):
        marshal_ta_prio(TaPrio(sched_clock_id=1 << 40))