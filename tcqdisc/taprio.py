"""The time-aware priority shaper (taprio) queueing discipline."""

from dataclasses import dataclass

from .attributes import (
    Attribute,
    decode_attributes,
    decode_int32,
    decode_int64,
    decode_uint32,
    encode_attributes,
    encode_int32,
    encode_int64,
    encode_uint32,
)
from .errors import InvalidArgError, NoArgError
from .mqprio import MqPrioQopt
from .structs import marshal_struct, unmarshal_struct

_TAPRIO_PRIOMAP = 1
_TAPRIO_SCHED_BASE_TIME = 3
_TAPRIO_SCHED_CLOCKID = 5
_TAPRIO_PAD = 6
_TAPRIO_SCHED_CYCLE_TIME = 8
_TAPRIO_SCHED_CYCLE_TIME_EXTENSION = 9
_TAPRIO_FLAGS = 10
_TAPRIO_TXTIME_DELAY = 11


@dataclass
class TaPrio:
    """Attributes of the taprio discipline."""

    prio_map: MqPrioQopt | None = None
    sched_base_time: int | None = None
    sched_clock_id: int | None = None
    sched_cycle_time: int | None = None
    sched_cycle_time_extension: int | None = None
    flags: int | None = None
    tx_time_delay: int | None = None


_SCALARS = (
    ("sched_base_time", _TAPRIO_SCHED_BASE_TIME, encode_int64, decode_int64),
    ("sched_clock_id", _TAPRIO_SCHED_CLOCKID, encode_int32, decode_int32),
    ("sched_cycle_time", _TAPRIO_SCHED_CYCLE_TIME, encode_int64, decode_int64),
    (
        "sched_cycle_time_extension",
        _TAPRIO_SCHED_CYCLE_TIME_EXTENSION,
        encode_int64,
        decode_int64,
    ),
    ("flags", _TAPRIO_FLAGS, encode_uint32, decode_uint32),
    ("tx_time_delay", _TAPRIO_TXTIME_DELAY, encode_uint32, decode_uint32),
)
_BY_TYPE = {attr_type: (name, decode) for name, attr_type, _, decode in _SCALARS}


def marshal_ta_prio(info: TaPrio | None) -> bytes:
    """Encode taprio options as netlink attributes."""
    if info is None:
        raise NoArgError("TaPrio")
    attrs = []
    if info.prio_map is not None:
        attrs.append(Attribute(_TAPRIO_PRIOMAP, marshal_struct(info.prio_map)))
    for name, attr_type, encode, _ in _SCALARS:
        value = getattr(info, name)
        if value is not None:
            attrs.append(Attribute(attr_type, encode(value)))
    return encode_attributes(attrs)


def unmarshal_ta_prio(data: bytes) -> TaPrio:
    """Decode taprio options from netlink attributes."""
    info = TaPrio()
    for attr in decode_attributes(data):
        if attr.type == _TAPRIO_PRIOMAP:
            info.prio_map = unmarshal_struct(attr.data, MqPrioQopt)
        elif attr.type == _TAPRIO_PAD:
            continue
        elif attr.type in _BY_TYPE:
            name, decode = _BY_TYPE[attr.type]
            setattr(info, name, decode(attr.data))
        else:
            raise InvalidArgError(f"unmarshalTaPrio(): unknown attribute {attr.type}")
    return info