"""The multiqueue priority (mqprio) queueing discipline."""

from dataclasses import dataclass, field
from typing import ClassVar

from .attributes import (
    Attribute,
    decode_attributes,
    decode_uint16,
    decode_uint64,
    encode_attributes,
    encode_uint16,
    encode_uint64,
)
from .errors import InvalidArgError, NoArgError
from .structs import marshal_and_align_struct, unmarshal_struct

_MQPRIO_MODE = 1
_MQPRIO_SHAPER = 2
_MQPRIO_MIN_RATE64 = 3
_MQPRIO_MAX_RATE64 = 4

# tc_mqprio_qopt is 82 bytes; the attributes start at the next 4-byte boundary.
_QOPT_ALIGNED_SIZE = 84


@dataclass
class MqPrioQopt:
    """tc_mqprio_qopt from pkt_sched.h."""

    num_tc: int = 0
    prio_tc_map: list[int] = field(default_factory=lambda: [0] * 16)
    hw: int = 0
    count: list[int] = field(default_factory=lambda: [0] * 16)
    offset: list[int] = field(default_factory=lambda: [0] * 16)
    _layout: ClassVar[tuple] = ("B", "16B", "B", "16H", "16H")


@dataclass
class MqPrio:
    """Attributes of the mqprio discipline."""

    opt: MqPrioQopt | None = None
    mode: int | None = None
    shaper: int | None = None
    min_rate64: int | None = None
    max_rate64: int | None = None


def marshal_mq_prio(info: MqPrio | None) -> bytes:
    """Encode mqprio options: the aligned qopt structure followed by attributes."""
    if info is None or info.opt is None:
        raise NoArgError("MqPrio")
    attrs = []
    if info.mode is not None:
        attrs.append(Attribute(_MQPRIO_MODE, encode_uint16(info.mode)))
    if info.shaper is not None:
        attrs.append(Attribute(_MQPRIO_SHAPER, encode_uint16(info.shaper)))
    if info.min_rate64 is not None:
        attrs.append(Attribute(_MQPRIO_MIN_RATE64, encode_uint64(info.min_rate64)))
    if info.max_rate64 is not None:
        attrs.append(Attribute(_MQPRIO_MAX_RATE64, encode_uint64(info.max_rate64)))
    return marshal_and_align_struct(info.opt) + encode_attributes(attrs)


def unmarshal_mq_prio(data: bytes) -> MqPrio:
    """Decode mqprio options."""
    info = MqPrio(opt=unmarshal_struct(data, MqPrioQopt))
    for attr in decode_attributes(data[_QOPT_ALIGNED_SIZE:]):
        if attr.type == _MQPRIO_MODE:
            info.mode = decode_uint16(attr.data)
        elif attr.type == _MQPRIO_SHAPER:
            info.shaper = decode_uint16(attr.data)
        elif attr.type == _MQPRIO_MIN_RATE64:
            info.min_rate64 = decode_uint64(attr.data)
        elif attr.type == _MQPRIO_MAX_RATE64:
            info.max_rate64 = decode_uint64(attr.data)
        else:
            raise InvalidArgError(f"unmarshalMqPrio(): unknown attribute {attr.type}")
    return info