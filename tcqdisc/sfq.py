"""The stochastic fairness queueing (sfq) discipline."""

from dataclasses import dataclass, field
from typing import ClassVar

from .errors import NoArgError
from .structs import marshal_struct, unmarshal_struct


@dataclass
class SfqQopt:
    """tc_sfq_qopt: quantum, perturbation period, limit, divisor and flows."""

    quantum: int = 0
    perturb_period: int = 0
    limit: int = 0
    divisor: int = 0
    flows: int = 0
    _layout: ClassVar[tuple] = ("I", "i", "I", "I", "I")


@dataclass
class Sfq:
    """tc_sfq_qopt_v1: sfq options including the SFQRED parameters."""

    v0: SfqQopt = field(default_factory=SfqQopt)
    depth: int = 0
    headdrop: int = 0
    limit: int = 0
    qth_min: int = 0
    qth_max: int = 0
    wlog: int = 0
    plog: int = 0
    scell_log: int = 0
    flags: int = 0
    max_p: int = 0
    _layout: ClassVar[tuple] = (SfqQopt, "I", "I", "I", "I", "I", "B", "B", "B", "B", "I")


def marshal_sfq(info: Sfq | None) -> bytes:
    """Encode sfq options."""
    if info is None:
        raise NoArgError("Sfq")
    return marshal_struct(info)


def unmarshal_sfq(data: bytes) -> Sfq:
    """Decode sfq options."""
    return unmarshal_struct(data, Sfq)