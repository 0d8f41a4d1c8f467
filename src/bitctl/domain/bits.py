"""BitArray — an immutable 64-bit cell with per-bit access.

Positions are 0-based from the least significant bit. Every BitArray holds
exactly 64 bits; narrower widths are views produced by :meth:`BitArray.masked`.

INVARIANT: ``0 <= raw <= 2**64 - 1``.
"""

from __future__ import annotations

from dataclasses import dataclass

from bitctl.domain.errors import BitPositionError, UnsupportedWidthError
from bitctl.domain.types import BitWidth

STORAGE_BITS = 64
WIDTHS: tuple[int, ...] = tuple(int(w) for w in BitWidth)


def mask_for(width: int) -> int:
    """All-ones mask covering the low *width* bits.

    Examples:
        >>> hex(mask_for(8))
        '0xff'
        >>> mask_for(64) == 2**64 - 1
        True
    """
    validate_width(width)
    return (1 << width) - 1


def validate_width(width: int) -> int:
    """Return *width* unchanged if it is a supported width, else raise."""
    if width not in WIDTHS:
        msg = f"Unsupported width {width}; expected one of {', '.join(map(str, WIDTHS))}"
        raise UnsupportedWidthError(msg)
    return width


def check_position(pos: int, width: int = STORAGE_BITS) -> int:
    """Ensure *pos* addresses a bit inside the low *width* bits."""
    if not 0 <= pos < width:
        msg = f"Bit position {pos} is outside the active width (0-{width - 1})"
        raise BitPositionError(msg)
    return pos


@dataclass(frozen=True, slots=True)
class BitArray:
    """A 64-bit value with bit-level accessors."""

    raw: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", self.raw & mask_for(STORAGE_BITS))

    def __str__(self) -> str:
        """Bits MSB first, with a space at every byte boundary."""
        bits = format(self.raw, f"0{STORAGE_BITS}b")
        return " ".join(bits[i : i + 8] for i in range(0, STORAGE_BITS, 8))

    def __int__(self) -> int:
        return self.raw

    def get_bit(self, pos: int) -> bool:
        check_position(pos)
        return (self.raw >> pos) & 1 == 1

    def set_bit(self, pos: int) -> BitArray:
        check_position(pos)
        return BitArray(self.raw | (1 << pos))

    def clear_bit(self, pos: int) -> BitArray:
        check_position(pos)
        return BitArray(self.raw & ~(1 << pos))

    def toggle_bit(self, pos: int) -> BitArray:
        check_position(pos)
        return BitArray(self.raw ^ (1 << pos))

    def all_bits(self) -> list[bool]:
        """Every bit as a bool, index 0 being the least significant."""
        return [(self.raw >> i) & 1 == 1 for i in range(STORAGE_BITS)]

    def masked(self, width: int) -> BitArray:
        return BitArray(self.raw & mask_for(width))

    def popcount(self) -> int:
        return bin(self.raw).count("1")
