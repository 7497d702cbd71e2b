"""The proportional integral controller enhanced (pie) queueing discipline."""

from dataclasses import dataclass

from .attributes import Attribute, decode_attributes, decode_uint32, encode_attributes, encode_uint32
from .errors import InvalidArgError, NoArgError

_PIE_TARGET = 1
_PIE_LIMIT = 2
_PIE_TUPDATE = 3
_PIE_ALPHA = 4
_PIE_BETA = 5
_PIE_ECN = 6
_PIE_BYTEMODE = 7
_PIE_DQ_RATE_ESTIMATOR = 8


@dataclass
class Pie:
    """Attributes of the pie discipline."""

    target: int | None = None
    limit: int | None = None
    tupdate: int | None = None
    alpha: int | None = None
    beta: int | None = None
    ecn: int | None = None
    bytemode: int | None = None
    dq_rate_estimator: int | None = None


_FIELDS = (
    ("target", _PIE_TARGET),
    ("limit", _PIE_LIMIT),
    ("tupdate", _PIE_TUPDATE),
    ("alpha", _PIE_ALPHA),
    ("beta", _PIE_BETA),
    ("ecn", _PIE_ECN),
    ("bytemode", _PIE_BYTEMODE),
    ("dq_rate_estimator", _PIE_DQ_RATE_ESTIMATOR),
)
_BY_TYPE = {attr_type: name for name, attr_type in _FIELDS}


def marshal_pie(info: Pie | None) -> bytes:
    """Encode pie options as netlink attributes."""
    if info is None:
        raise NoArgError("Pie")
    return encode_attributes(
        Attribute(attr_type, encode_uint32(value))
        for name, attr_type in _FIELDS
        if (value := getattr(info, name)) is not None
    )


def unmarshal_pie(data: bytes) -> Pie:
    """Decode pie options from netlink attributes."""
    info = Pie()
    for attr in decode_attributes(data):
        name = _BY_TYPE.get(attr.type)
        if name is None:
            raise InvalidArgError(f"extractPieOptions(): unknown attribute {attr.type}")
        setattr(info, name, decode_uint32(attr.data))
    return info