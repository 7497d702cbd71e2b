"""The stochastic fair blue (sfb) queueing discipline."""

from dataclasses import dataclass
from typing import ClassVar

from .attributes import Attribute, decode_attributes, encode_attributes
from .errors import InvalidArgError, NoArgError
from .structs import marshal_struct, unmarshal_struct

_SFB_PARMS = 1


@dataclass
class SfbQopt:
    """tc_sfb_qopt from pkt_sched.h; intervals are in milliseconds."""

    rehash_interval: int = 0
    warmup_time: int = 0
    max: int = 0
    bin_size: int = 0
    increment: int = 0
    decrement: int = 0
    limit: int = 0
    penalty_rate: int = 0
    penalty_burst: int = 0
    _layout: ClassVar[tuple] = ("I",) * 9


@dataclass
class Sfb:
    """Attributes of the sfb discipline."""

    parms: SfbQopt | None = None


def marshal_sfb(info: Sfb | None) -> bytes:
    """Encode sfb options as netlink attributes."""
    if info is None:
        raise NoArgError("Sfb")
    attrs = []
    if info.parms is not None:
        attrs.append(Attribute(_SFB_PARMS, marshal_struct(info.parms)))
    return encode_attributes(attrs)


def unmarshal_sfb(data: bytes) -> Sfb:
    """Decode sfb options from netlink attributes."""
    info = Sfb()
    for attr in decode_attributes(data):
        if attr.type == _SFB_PARMS:
            info.parms = unmarshal_struct(attr.data, SfbQopt)
        else:
            raise InvalidArgError(f"extractSfbOptions(): unknown attribute {attr.type}")
    return info