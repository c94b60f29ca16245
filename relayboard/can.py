"""Data types of the CAN bus interface and MCP2515 filter encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

STANDARD_ID_MAX = 0x7FF
"""Largest 11-bit standard identifier."""

EXTENDED_ID_MAX = 0x1FFFFFFF
"""Largest 29-bit extended identifier."""

MAX_DATA_LENGTH = 8
"""Maximum number of data bytes in one CAN frame."""

ALL_FILTERS = 0xFF
"""Filter number that addresses every filter at once."""

FILTER_ANY = 0
"""Filter flag value: accept frames regardless of the flag."""

FILTER_ONLY_CLEAR = 2
"""Filter flag value: accept only frames with the flag cleared (e.g. non-RTR)."""

FILTER_ONLY_SET = 3
"""Filter flag value: accept only frames with the flag set (e.g. RTR)."""

_VALID_FILTER_FLAGS = (FILTER_ANY, FILTER_ONLY_CLEAR, FILTER_ONLY_SET)
_BYTE = 0xFF
_WORD32 = 0xFFFFFFFF


class Bitrate(IntEnum):
    """Bit rates of the CAN bus."""

    KBPS_10 = 0
    KBPS_20 = 1
    KBPS_50 = 2
    KBPS_100 = 3
    KBPS_125 = 4
    KBPS_250 = 5
    KBPS_500 = 6
    MBPS_1 = 7

    @property
    def bits_per_second(self) -> int:
        """The bit rate in bits per second."""
        return _BITS_PER_SECOND[self]


_BITS_PER_SECOND = {
    Bitrate.KBPS_10: 10_000,
    Bitrate.KBPS_20: 20_000,
    Bitrate.KBPS_50: 50_000,
    Bitrate.KBPS_100: 100_000,
    Bitrate.KBPS_125: 125_000,
    Bitrate.KBPS_250: 250_000,
    Bitrate.KBPS_500: 500_000,
    Bitrate.MBPS_1: 1_000_000,
}


class CanMode(IntEnum):
    """Operating mode of the CAN controller."""

    LISTEN_ONLY = 0
    LOOPBACK = 1
    NORMAL = 2
    SLEEP = 3


def _id_limit(extended: bool) -> int:
    return EXTENDED_ID_MAX if extended else STANDARD_ID_MAX


@dataclass(frozen=True)
class CanMessage:
    """A CAN frame: identifier, flags and up to eight data bytes."""

    can_id: int
    data: bytes = b""
    rtr: bool = False
    extended: bool = False

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) > MAX_DATA_LENGTH:
            raise ValueError(
                f"a CAN frame holds at most {MAX_DATA_LENGTH} data bytes, got {len(data)}"
            )
        limit = _id_limit(self.extended)
        if not 0 <= self.can_id <= limit:
            raise ValueError(f"identifier must be in 0..{limit:#x}, got {self.can_id:#x}")
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "rtr", bool(self.rtr))
        object.__setattr__(self, "extended", bool(self.extended))

    @property
    def length(self) -> int:
        """Number of data bytes."""
        return len(self.data)


@dataclass(frozen=True)
class CanFilter:
    """An acceptance filter: identifier, mask and flag selection.

    `rtr` and `extended` take one of FILTER_ANY, FILTER_ONLY_CLEAR or
    FILTER_ONLY_SET; the value 1 is invalid.
    """

    can_id: int
    mask: int
    rtr: int = FILTER_ANY
    extended: int = FILTER_ANY

    def __post_init__(self) -> None:
        for name, value in (("identifier", self.can_id), ("mask", self.mask)):
            if not 0 <= value <= EXTENDED_ID_MAX:
                raise ValueError(f"{name} must be in 0..{EXTENDED_ID_MAX:#x}, got {value:#x}")
        for name, value in (("rtr", self.rtr), ("extended", self.extended)):
            if value not in _VALID_FILTER_FLAGS:
                raise ValueError(f"{name} flag selection must be one of 0, 2, 3, got {value}")


@dataclass(frozen=True)
class ErrorRegister:
    """Receive and transmit error counters of the controller."""

    rx: int = 0
    tx: int = 0

    def __post_init__(self) -> None:
        for name, value in (("rx", self.rx), ("tx", self.tx)):
            if not 0 <= value <= _BYTE:
                raise ValueError(f"{name} error counter must be in 0..{_BYTE}, got {value}")


def _check_word32(can_id: int) -> None:
    if not 0 <= can_id <= _WORD32:
        raise ValueError(f"identifier must be a 32-bit value, got {can_id}")


def mcp2515_filter(can_id: int) -> bytes:
    """Return the four MCP2515 register bytes of a standard-identifier filter."""
    _check_word32(can_id)
    return bytes(((can_id >> 3) & _BYTE, (can_id << 5) & _BYTE, 0, 0))


def mcp2515_filter_extended(can_id: int) -> bytes:
    """Return the four MCP2515 register bytes of an extended-identifier filter."""
    _check_word32(can_id)
    return bytes(
        (
            (can_id >> 21) & _BYTE,
            ((can_id >> 13) & 0xE0) | (1 << 3) | ((can_id >> 16) & 0x03),
            (can_id >> 8) & _BYTE,
            can_id & _BYTE,
        )
    )