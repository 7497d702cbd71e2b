"""Error types, connection options and well-known handle values for traffic control."""

from dataclasses import dataclass


class TcError(Exception):
    """Base class for all traffic control errors."""

    message = "traffic control error"

    def __init__(self, context: str | None = None) -> None:
        self.context = context
        text = f"{context}: {self.message}" if context else self.message
        super().__init__(text)


class NoArgError(TcError, ValueError):
    """A required argument is missing."""

    message = "missing argument"


class NoArgAlterError(TcError, ValueError):
    """The argument cannot be altered."""

    message = "argument cannot be altered"


class InvalidDevError(TcError, ValueError):
    """The device (interface index) is invalid."""

    message = "invalid device ID"


class NotImplementedTcError(TcError, NotImplementedError):
    """The requested functionality is not implemented."""

    message = "functionality not yet implemented"


class InvalidArgError(TcError, ValueError):
    """An argument has an invalid value."""

    message = "invalid argument"


class UnknownKindError(TcError, ValueError):
    """The qdisc, filter or class kind is unknown."""

    message = "unknown kind"


@dataclass
class Config:
    """Options for the RTNETLINK connection."""

    net_ns: int = 0


HANDLE_ROOT = 0xFFFFFFFF
HANDLE_INGRESS = 0xFFFFFFF1
HANDLE_MIN_PRIORITY = 0xFFE0
HANDLE_MIN_INGRESS = 0xFFF2
HANDLE_MIN_EGRESS = 0xFFF3

# Set Msg.ifindex to this value to alter filters in shared blocks.
MAGIC_BLOCK = 0xFFFFFFFF

SKIP_HW = 1 << 0
SKIP_SW = 1 << 1
IN_HW = 1 << 2
NOT_IN_HW = 1 << 3
VERBOSE = 1 << 4