"""Widths, bases, and operation names.

The state cell is always 64 bits wide; the active width selects how many
low-order bits participate in display, editing, and operations.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class BitWidth(IntEnum):
    """Selectable active widths."""

    BYTE = 8
    HALF = 16
    SINGLE = 32
    DOUBLE = 64


class Base(StrEnum):
    """Numeric and character views of the value."""

    DEC = "dec"
    BIN = "bin"
    HEX = "hex"
    HEX_BE = "hex_be"
    HEX_LE = "hex_le"
    OCT = "oct"
    ASCII = "ascii"
    UTF8 = "utf8"


EDITABLE_BASES: frozenset[Base] = frozenset(
    {Base.DEC, Base.BIN, Base.HEX, Base.HEX_BE, Base.HEX_LE, Base.OCT}
)


class Operation(StrEnum):
    """Bitwise operations offered on the value."""

    LSH = "lsh"
    RSH = "rsh"
    LSHR = "lshr"
    RSHR = "rshr"
    NOT = "not"
    CLR = "clr"
    SET = "set"
    REV = "rev"


class FloatKind(StrEnum):
    """IEEE-754 classification of a bit pattern."""

    POS_INF = "+Inf"
    NEG_INF = "-Inf"
    NAN = "NaN"
    ZERO = "Zero"
    DENORMALIZED = "Denormalized"
    NORMALIZED = "Normalized"
