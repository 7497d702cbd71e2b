"""The prio queueing discipline."""

from dataclasses import dataclass, field
from typing import ClassVar

from .errors import NoArgError
from .structs import marshal_struct, unmarshal_struct


@dataclass
class Prio:
    """tc_prio_qopt: number of bands and the priority map."""

    bands: int = 0
    prio_map: list[int] = field(default_factory=lambda: [0] * 16)
    _layout: ClassVar[tuple] = ("I", "16B")


def marshal_prio(info: Prio | None) -> bytes:
    """Encode prio options."""
    if info is None:
        raise NoArgError("Prio")
    return marshal_struct(info)


def unmarshal_prio(data: bytes) -> Prio:
    """Decode prio options."""
    return unmarshal_struct(data, Prio)