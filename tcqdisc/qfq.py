"""The quick fair queueing (qfq) discipline."""

from dataclasses import dataclass

from .attributes import Attribute, decode_attributes, decode_uint32, encode_attributes, encode_uint32
from .errors import InvalidArgError, NoArgError

_QFQ_WEIGHT = 1
_QFQ_LMAX = 2


@dataclass
class Qfq:
    """Attributes of the qfq discipline."""

    weight: int | None = None
    lmax: int | None = None


def marshal_qfq(info: Qfq | None) -> bytes:
    """Encode qfq options as netlink attributes."""
    if info is None:
        raise NoArgError("Qfq")
    attrs = []
    if info.weight is not None:
        attrs.append(Attribute(_QFQ_WEIGHT, encode_uint32(info.weight)))
    if info.lmax is not None:
        attrs.append(Attribute(_QFQ_LMAX, encode_uint32(info.lmax)))
    return encode_attributes(attrs)


def unmarshal_qfq(data: bytes) -> Qfq:
    """Decode qfq options from netlink attributes."""
    info = Qfq()
    for attr in decode_attributes(data):
        if attr.type == _QFQ_WEIGHT:
            info.weight = decode_uint32(attr.data)
        elif attr.type == _QFQ_LMAX:
            info.lmax = decode_uint32(attr.data)
        else:
            raise InvalidArgError(f"UnmarshalQfq(): unknown attribute {attr.type}")
    return info