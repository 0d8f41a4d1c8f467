"""Bitwise operations on a value restricted to an active width.

Every operation takes the raw value and the active width and returns a new
raw value masked to that width. Shifts are logical; rotations wrap within
the active width rather than the 64-bit storage.
"""

from __future__ import annotations

from collections.abc import Callable

from bitctl.domain.bits import mask_for
from bitctl.domain.errors import InvalidAmountError, UnknownOperationError
from bitctl.domain.types import Operation


def shift_left(value: int, width: int, amount: int = 1) -> int:
    mask = mask_for(width)
    if amount >= width:
        return 0
    return (value << amount) & mask


def shift_right(value: int, width: int, amount: int = 1) -> int:
    mask = mask_for(width)
    if amount >= width:
        return 0
    return (value & mask) >> amount


def rotate_left(value: int, width: int, amount: int = 1) -> int:
    mask = mask_for(width)
    value &= mask
    amount %= width
    if amount == 0:
        return value
    return ((value << amount) | (value >> (width - amount))) & mask


def rotate_right(value: int, width: int, amount: int = 1) -> int:
    mask = mask_for(width)
    value &= mask
    amount %= width
    if amount == 0:
        return value
    return ((value >> amount) | (value << (width - amount))) & mask


def invert(value: int, width: int, amount: int = 1) -> int:
    """Bitwise NOT; an even *amount* is the identity."""
    mask = mask_for(width)
    return (~value if amount % 2 else value) & mask


def clear(value: int, width: int, amount: int = 1) -> int:
    return 0


def fill(value: int, width: int, amount: int = 1) -> int:
    return mask_for(width)


def reverse(value: int, width: int, amount: int = 1) -> int:
    """Reverse bit order within the active width; an even *amount* is the identity."""
    value &= mask_for(width)
    if amount % 2 == 0:
        return value
    return int(format(value, f"0{width}b")[::-1], 2)


OpFunc = Callable[[int, int, int], int]

OPERATIONS: dict[Operation, OpFunc] = {
    Operation.LSH: shift_left,
    Operation.RSH: shift_right,
    Operation.LSHR: rotate_left,
    Operation.RSHR: rotate_right,
    Operation.NOT: invert,
    Operation.CLR: clear,
    Operation.SET: fill,
    Operation.REV: reverse,
}

OPERATION_LABELS: dict[Operation, str] = {
    Operation.LSH: "Lsh",
    Operation.RSH: "Rsh",
    Operation.LSHR: "Lshr",
    Operation.RSHR: "Rshr",
    Operation.NOT: "Not",
    Operation.CLR: "Clr",
    Operation.SET: "Set",
    Operation.REV: "Rev",
}


def resolve_operation(name: str) -> Operation:
    """Look up an operation by name, case-insensitively."""
    try:
        return Operation(name.strip().lower())
    except ValueError:
        valid = ", ".join(op.value for op in Operation)
        msg = f"Unknown operation '{name}'; expected one of {valid}"
        raise UnknownOperationError(msg) from None


def apply_operation(op: Operation | str, value: int, width: int, amount: int = 1) -> int:
    """Apply *op* to *value* at *width*, repeated or shifted by *amount*."""
    if amount < 0:
        msg = f"Operation amount must be non-negative, got {amount}"
        raise InvalidAmountError(msg)
    operation = op if isinstance(op, Operation) else resolve_operation(op)
    return OPERATIONS[operation](value, width, amount)
