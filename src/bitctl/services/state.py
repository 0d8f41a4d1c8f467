"""BitState — the single mutable value cell and its active width.

Created when a session starts, mutated in place by bit toggles, operations,
and field edits, and discarded when the session ends. There is no
persistence.

INVARIANT: ``value`` never has bits set above ``width``. Every mutation
masks, and changing the width masks the current value.

INVARIANT: A failed mutation leaves ``value`` and ``width`` untouched, so the
cell always holds the last valid value.
"""

from __future__ import annotations

import structlog

from bitctl.domain.bits import BitArray, check_position, mask_for, validate_width
from bitctl.domain.codec import parse_value
from bitctl.domain.ops import apply_operation
from bitctl.domain.special import special_value
from bitctl.domain.types import Base, BitWidth, Operation

log = structlog.get_logger(__name__)


class BitState:
    """The value being inspected, restricted to an active width."""

    def __init__(self, value: int = 0, width: int = BitWidth.DOUBLE) -> None:
        self._width = int(validate_width(width))
        self._value = value & mask_for(self._width)

    def __repr__(self) -> str:
        return f"BitState(value={self._value:#x}, width={self._width})"

    @property
    def value(self) -> int:
        return self._value

    @property
    def width(self) -> int:
        return self._width

    @property
    def bits(self) -> BitArray:
        return BitArray(self._value)

    def _commit(self, value: int, action: str) -> int:
        old = self._value
        self._value = value & mask_for(self._width)
        log.debug(
            "state.change",
            action=action,
            old=f"{old:#x}",
            new=f"{self._value:#x}",
            width=self._width,
        )
        return self._value

    def toggle(self, pos: int) -> int:
        """Flip one bit; only positions below the active width are clickable."""
        check_position(pos, self._width)
        return self._commit(self._value ^ (1 << pos), f"toggle:{pos}")

    def set_bit(self, pos: int, on: bool = True) -> int:
        check_position(pos, self._width)
        bit = 1 << pos
        new = self._value | bit if on else self._value & ~bit
        return self._commit(new, f"{'set' if on else 'clear'}:{pos}")

    def apply(self, op: Operation | str, amount: int = 1) -> int:
        new = apply_operation(op, self._value, self._width, amount)
        return self._commit(new, f"op:{op}")

    def edit(self, base: Base | str, text: str) -> int:
        """Replace the value with *text* parsed in *base*.

        Raises ``ParseError`` without touching the value when *text* is invalid.
        """
        new = parse_value(text, base, self._width)
        return self._commit(new, f"edit:{base}")

    def assign(self, value: int) -> int:
        return self._commit(value, "assign")

    def load_special(self, name: str) -> int:
        return self._commit(special_value(name, self._width), f"special:{name}")

    def set_width(self, width: int) -> int:
        """Change the active width, dropping bits above it."""
        self._width = int(validate_width(width))
        return self._commit(self._value, f"width:{width}")
