"""Tests for IEEE-754 decoding and the distribution axis."""

from __future__ import annotations

import math
import struct

import pytest

from bitctl.domain.errors import UnsupportedWidthError
from bitctl.domain.ieee754 import FloatFormat, decode_float, layout_for, plot_position
from bitctl.domain.types import FloatKind


def _double(value: float) -> int:
    return int.from_bytes(struct.pack(">d", value), "big")


class TestLayouts:
    @pytest.mark.parametrize(
        ("width", "fmt", "bias"),
        [(16, FloatFormat.HALF, 15), (32, FloatFormat.SINGLE, 127), (64, FloatFormat.DOUBLE, 1023)],
    )
    def test_layout(self, width: int, fmt: FloatFormat, bias: int) -> None:
        layout = layout_for(width)
        assert layout.format is fmt
        assert layout.bias == bias
        assert layout.exponent_bits + layout.mantissa_bits + 1 == width

    def test_no_8_bit_format(self) -> None:
        with pytest.raises(UnsupportedWidthError):
            layout_for(8)


class TestDecodeHalf:
    def test_one(self) -> None:
        d = decode_float(0x3C00, 16)
        assert d.format is FloatFormat.HALF
        assert d.sign == 0
        assert d.exponent_bits == 15
        assert d.exponent == 0
        assert d.mantissa == 0
        assert d.value == 1.0
        assert d.kind is FloatKind.NORMALIZED
        assert d.exponent_text() == "0b01111 (0)"
        assert d.mantissa_text() == "0x000"

    def test_smallest_subnormal(self) -> None:
        d = decode_float(0x0001, 16)
        assert d.kind is FloatKind.DENORMALIZED
        assert d.value == 2.0**-24
        assert d.exponent == -15

    def test_negative_two(self) -> None:
        d = decode_float(0xC000, 16)
        assert d.sign == 1
        assert d.value == -2.0

    @pytest.mark.parametrize(
        ("bits", "kind"),
        [
            (0x7C00, FloatKind.POS_INF),
            (0xFC00, FloatKind.NEG_INF),
            (0x7E00, FloatKind.NAN),
            (0x7C01, FloatKind.NAN),
            (0x0000, FloatKind.ZERO),
            (0x8000, FloatKind.ZERO),
            (0x7BFF, FloatKind.NORMALIZED),
        ],
    )
    def test_kinds(self, bits: int, kind: FloatKind) -> None:
        assert decode_float(bits, 16).kind is kind

    def test_max_half(self) -> None:
        assert decode_float(0x7BFF, 16).value == 65504.0


class TestDecodeSingleAndDouble:
    def test_single_pi(self) -> None:
        d = decode_float(0x40490FDB, 32)
        assert d.format is FloatFormat.SINGLE
        assert d.value == pytest.approx(math.pi, rel=1e-7)
        assert d.mantissa_text() == "0x490fdb"

    def test_double_one(self) -> None:
        d = decode_float(0x3FF0000000000000, 64)
        assert d.value == 1.0
        assert d.exponent_text() == "0b01111111111 (0)"
        assert d.mantissa_text() == "0x0000000000000"

    def test_only_low_width_bits_are_decoded(self) -> None:
        assert decode_float(0xFFFF_0000_3F80_0000, 32).value == 1.0

    def test_double_negative_zero(self) -> None:
        d = decode_float(0x8000000000000000, 64)
        assert d.kind is FloatKind.ZERO
        assert d.sign == 1
        assert math.copysign(1.0, d.value) == -1.0

    def test_no_8_bit_decoding(self) -> None:
        with pytest.raises(UnsupportedWidthError):
            decode_float(0x3C, 8)


class TestValueText:
    def test_scientific(self) -> None:
        assert decode_float(0x3C00, 16).value_text() == "1.000000e+00"

    def test_specials(self) -> None:
        assert decode_float(0x7C00, 16).value_text() == "inf"
        assert decode_float(0xFC00, 16).value_text() == "-inf"
        assert decode_float(0x7E00, 16).value_text() == "NaN"


class TestPlotPosition:
    def test_fixed_points(self) -> None:
        assert plot_position(decode_float(0x7C00, 16)) == 100.0
        assert plot_position(decode_float(0xFC00, 16)) == 0.0
        assert plot_position(decode_float(0x7E00, 16)) == 50.0
        assert plot_position(decode_float(0x0000, 16)) == 50.0
        assert plot_position(decode_float(0x8000, 16)) == 50.0

    def test_one_is_mirrored(self) -> None:
        pos = plot_position(decode_float(_double(1.0), 64))
        neg = plot_position(decode_float(_double(-1.0), 64))
        assert pos == pytest.approx(72.49, abs=0.01)
        assert neg == pytest.approx(100.0 - pos)

    def test_normal_band(self) -> None:
        min_normal = plot_position(decode_float(_double(2.0**-1022), 64))
        max_normal = plot_position(decode_float(0x7FEFFFFFFFFFFFFF, 64))
        assert min_normal == pytest.approx(55.0)
        assert max_normal == pytest.approx(90.0)

    def test_subnormals_sit_next_to_zero(self) -> None:
        pos = plot_position(decode_float(0x0001, 16))
        assert 50.0 < pos < 55.0

    def test_monotonic(self) -> None:
        values = [-math.inf, -1e300, -1.0, -1e-310, 0.0, 1e-310, 1e-300, 1.0, 1e300, math.inf]
        positions = [plot_position(decode_float(_double(v), 64)) for v in values]
        assert positions == sorted(positions)
        assert all(0.0 <= p <= 100.0 for p in positions)
