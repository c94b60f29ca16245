"""Small bit and byte helpers for 8-, 16- and 32-bit register values."""

from __future__ import annotations

_BYTE_MAX = 0xFF
_WORD32_MAX = 0xFFFFFFFF


def _check_bit(bit: int) -> None:
    if bit < 0:
        raise ValueError(f"bit index must not be negative, got {bit}")


def _check_range(value: int, maximum: int, what: str) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{what} must be in 0..{maximum:#x}, got {value}")


def is_bit_set(value: int, bit: int) -> bool:
    """Return True if `bit` is set in `value`."""
    _check_bit(bit)
    return bool(value & (1 << bit))


def set_bit(value: int, bit: int) -> int:
    """Return `value` with `bit` set."""
    _check_bit(bit)
    return value | (1 << bit)


def clear_bit(value: int, bit: int) -> int:
    """Return `value` with `bit` cleared."""
    _check_bit(bit)
    return value & ~(1 << bit)


def swap_nibbles(value: int) -> int:
    """Exchange the high and low nibble of a byte."""
    _check_range(value, _BYTE_MAX, "byte")
    return ((value << 4) | (value >> 4)) & _BYTE_MAX


def bit_count8(value: int) -> int:
    """Count the set bits of a byte."""
    _check_range(value, _BYTE_MAX, "byte")
    return value.bit_count()


def bit_count32(value: int) -> int:
    """Count the set bits of a 32-bit value."""
    _check_range(value, _WORD32_MAX, "32-bit value")
    return value.bit_count()


def low_byte(value: int) -> int:
    """Return the least significant byte of `value`."""
    return value & 0xFF


def high_byte(value: int) -> int:
    """Return bits 8..15 of `value` as a byte."""
    return (value >> 8) & 0xFF


def low_word(value: int) -> int:
    """Return the least significant 16 bits of `value`."""
    return value & 0xFFFF


def high_word(value: int) -> int:
    """Return bits 16..31 of `value` as a 16-bit word."""
    return (value >> 16) & 0xFFFF