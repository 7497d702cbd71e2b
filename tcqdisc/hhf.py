"""The heavy-hitter filter (hhf) queueing discipline."""

from dataclasses import dataclass

from .attributes import Attribute, decode_attributes, decode_uint32, encode_attributes, encode_uint32
from .errors import InvalidArgError, NoArgError

_HHF_BACKLOG_LIMIT = 1
_HHF_QUANTUM = 2
_HHF_HH_FLOWS_LIMIT = 3
_HHF_RESET_TIMEOUT = 4
_HHF_ADMIT_BYTES = 5
_HHF_EVICT_TIMEOUT = 6
_HHF_NON_HH_WEIGHT = 7


@dataclass
class Hhf:
    """Attributes of the hhf discipline."""

    backlog_limit: int | None = None
    quantum: int | None = None
    hh_flows_limit: int | None = None
    reset_timeout: int | None = None
    admit_bytes: int | None = None
    evict_timeout: int | None = None
    non_hh_weight: int | None = None


_FIELDS = (
    ("backlog_limit", _HHF_BACKLOG_LIMIT),
    ("quantum", _HHF_QUANTUM),
    ("hh_flows_limit", _HHF_HH_FLOWS_LIMIT),
    ("reset_timeout", _HHF_RESET_TIMEOUT),
    ("admit_bytes", _HHF_ADMIT_BYTES),
    ("evict_timeout", _HHF_EVICT_TIMEOUT),
    ("non_hh_weight", _HHF_NON_HH_WEIGHT),
)
_BY_TYPE = {attr_type: name for name, attr_type in _FIELDS}


def marshal_hhf(info: Hhf | None) -> bytes:
    """Encode hhf options as netlink attributes."""
    if info is None:
        raise NoArgError("Hhf")
    return encode_attributes(
        Attribute(attr_type, encode_uint32(value))
        for name, attr_type in _FIELDS
        if (value := getattr(info, name)) is not None
    )


def unmarshal_hhf(data: bytes) -> Hhf:
    """Decode hhf options from netlink attributes."""
    info = Hhf()
    for attr in decode_attributes(data):
        name = _BY_TYPE.get(attr.type)
        if name is None:
            raise InvalidArgError(f"unmarshalHhf(): unknown attribute {attr.type}")
        setattr(info, name, decode_uint32(attr.data))
    return info