"""Netlink encoding and decoding of Linux traffic control queueing discipline options."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "errors",
    "hhf",
    "htb",
    "mqprio",
    "netem",
    "pie",
    "plug",
    "prio",
    "qfq",
    "red",
    "sfb",
    "sfq",
    "stab",
    "stats",
    "structs",
    "taprio",
]