"""BitService — every user action on the value cell.

Mutating methods return a snapshot of the state after the change. On
failure the state keeps its last valid value and the result carries the
retained value in ``error.detail``.
"""

from __future__ import annotations

from bitctl.domain.bits import check_position
from bitctl.domain.codec import format_value, parse_value, representations, resolve_base
from bitctl.domain.errors import BitctlError
from bitctl.domain.ieee754 import decode_float, plot_position
from bitctl.domain.ops import OPERATION_LABELS, resolve_operation
from bitctl.domain.special import resolve_special, special_label
from bitctl.services.base import BaseService
from bitctl.services.result import ServiceResult


class BitService(BaseService):
    """Inspect, toggle, operate on, edit, and decode the value cell."""

    def inspect(self) -> ServiceResult:
        return self._snapshot("inspect")

    # ── Bit grid ──────────────────────────────────────────────────────

    def toggle(self, position: int) -> ServiceResult:
        try:
            self._state.toggle(position)
        except BitctlError as exc:
            return self._fail("toggle", exc, position=position)
        return self._snapshot("toggle", position=position)

    def set_bit(self, position: int, *, on: bool = True) -> ServiceResult:
        op = "set_bit" if on else "clear_bit"
        try:
            self._state.set_bit(position, on)
        except BitctlError as exc:
            return self._fail(op, exc, position=position)
        return self._snapshot(op, position=position)

    def get_bit(self, position: int) -> ServiceResult:
        width = self._state.width
        try:
            check_position(position, width)
        except BitctlError as exc:
            return self._fail("get_bit", exc, position=position)
        bit = (self._state.value >> position) & 1
        return ServiceResult(
            ok=True,
            op="get_bit",
            data={"position": position, "bit": bit, "value": self._state.value, "width": width},
        )

    # ── Operations ────────────────────────────────────────────────────

    def operate(self, name: str, amount: int = 1) -> ServiceResult:
        try:
            op = resolve_operation(name)
            self._state.apply(op, amount)
        except BitctlError as exc:
            return self._fail("operate", exc, operation=name, amount=amount)
        return self._snapshot(
            "operate", operation=str(op), label=OPERATION_LABELS[op], amount=amount
        )

    # ── Field edits ───────────────────────────────────────────────────

    def edit(self, base: str, text: str) -> ServiceResult:
        """Replace the value from a base field; invalid text keeps the last valid value."""
        try:
            resolved = resolve_base(base)
            self._state.edit(resolved, text)
        except BitctlError as exc:
            return self._fail(
                "edit",
                exc,
                base=base,
                input=text,
                retained=format_value(
                    self._state.value,
                    "hex",
                    self._state.width,
                    uppercase_hex=self._uppercase_hex,
                ),
            )
        return self._snapshot("edit", base=str(resolved), input=text)

    def assign(self, value: int) -> ServiceResult:
        self._state.assign(value)
        return self._snapshot("assign")

    def resize(self, width: int) -> ServiceResult:
        try:
            self._state.set_width(width)
        except BitctlError as exc:
            return self._fail("resize", exc, requested_width=width)
        return self._snapshot("resize")

    def convert(self, text: str, from_base: str, to_base: str | None = None) -> ServiceResult:
        """Parse *text* in *from_base* and render it without touching the state."""
        width = self._state.width
        try:
            source = resolve_base(from_base)
            target = resolve_base(to_base) if to_base else None
            value = parse_value(text, source, width)
        except BitctlError as exc:
            return ServiceResult.failure("convert", exc, input=text, base=from_base)

        data: dict[str, object] = {
            "input": text,
            "from": str(source),
            "value": value,
            "width": width,
        }
        if target is None:
            data["representations"] = representations(
                value, width, uppercase_hex=self._uppercase_hex
            )
        else:
            data["to"] = str(target)
            data["output"] = format_value(value, target, width, uppercase_hex=self._uppercase_hex)
        return ServiceResult(ok=True, op="convert", data=data)

    # ── Float view ────────────────────────────────────────────────────

    def decode_float(self) -> ServiceResult:
        try:
            decoded = decode_float(self._state.value, self._state.width)
        except BitctlError as exc:
            return self._fail("decode_float", exc)
        return ServiceResult(
            ok=True,
            op="decode_float",
            data={
                "value": self._state.value,
                "width": self._state.width,
                "format": str(decoded.format),
                "sign": decoded.sign,
                "exponent": decoded.exponent_text(),
                "exponent_bits": decoded.exponent_bits,
                "exponent_unbiased": decoded.exponent,
                "mantissa": decoded.mantissa_text(),
                "kind": str(decoded.kind),
                "float": decoded.value_text(),
                "position": round(plot_position(decoded), 2),
            },
        )

    def special(self, name: str) -> ServiceResult:
        try:
            key = resolve_special(name)
            self._state.load_special(key)
        except BitctlError as exc:
            return self._fail("special", exc, name=name)
        return self._snapshot("special", name=key, label=special_label(key))
