"""The plug queueing discipline."""

import enum
from dataclasses import dataclass
from typing import ClassVar

from .errors import NoArgError, NotImplementedTcError
from .structs import marshal_struct


class PlugAction(enum.IntEnum):
    """Actions of the plug discipline."""

    BUFFER = 0
    RELEASE_ONE = 1
    RELEASE_INDEFINITE = 2
    LIMIT = 3


@dataclass
class Plug:
    """Attributes of the plug discipline."""

    action: PlugAction = PlugAction.BUFFER
    limit: int = 0
    _layout: ClassVar[tuple] = ("i", "I")


def marshal_plug(info: Plug | None) -> bytes:
    """Encode plug options."""
    if info is None:
        raise NoArgError("Plug")
    return marshal_struct(info)


def unmarshal_plug(data: bytes) -> Plug:
    """The kernel does not report plug options, so decoding is not supported."""
    raise NotImplementedTcError("Plug")