"""IEEE-754 decoding of the low bits as half, single, or double precision.

The active width selects the format: 16 -> half, 32 -> single, 64 -> double.
There is no 8-bit IEEE binary format, so width 8 has no float view.
"""

from __future__ import annotations

import math
import struct
from enum import StrEnum

from pydantic import BaseModel

from bitctl.domain.bits import mask_for
from bitctl.domain.errors import UnsupportedWidthError
from bitctl.domain.types import FloatKind


class FloatFormat(StrEnum):
    HALF = "Half"
    SINGLE = "Single"
    DOUBLE = "Double"


class FormatLayout(BaseModel):
    """Field widths and bias of one binary interchange format."""

    model_config = {"frozen": True}

    format: FloatFormat
    width: int
    exponent_bits: int
    mantissa_bits: int
    struct_code: str

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def min_exponent(self) -> int:
        return 1 - self.bias

    @property
    def max_exponent(self) -> int:
        return self.bias


LAYOUTS: dict[int, FormatLayout] = {
    16: FormatLayout(
        format=FloatFormat.HALF, width=16, exponent_bits=5, mantissa_bits=10, struct_code=">e"
    ),
    32: FormatLayout(
        format=FloatFormat.SINGLE, width=32, exponent_bits=8, mantissa_bits=23, struct_code=">f"
    ),
    64: FormatLayout(
        format=FloatFormat.DOUBLE, width=64, exponent_bits=11, mantissa_bits=52, struct_code=">d"
    ),
}


def layout_for(width: int) -> FormatLayout:
    layout = LAYOUTS.get(width)
    if layout is None:
        msg = f"No IEEE-754 format is {width} bits wide; use 16, 32, or 64"
        raise UnsupportedWidthError(msg)
    return layout


class FloatDecoding(BaseModel):
    """The sign/exponent/mantissa split of a bit pattern and its value."""

    model_config = {"frozen": True}

    format: FloatFormat
    sign: int
    exponent_bits: int
    exponent: int
    mantissa: int
    value: float
    kind: FloatKind

    @property
    def layout(self) -> FormatLayout:
        return next(lay for lay in LAYOUTS.values() if lay.format == self.format)

    def exponent_text(self) -> str:
        """Raw exponent field in binary with the unbiased exponent, e.g. ``0b01111 (0)``."""
        return f"0b{self.exponent_bits:0{self.layout.exponent_bits}b} ({self.exponent})"

    def mantissa_text(self) -> str:
        digits = (self.layout.mantissa_bits + 3) // 4
        return f"0x{self.mantissa:0{digits}x}"

    def value_text(self) -> str:
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "inf" if self.value > 0 else "-inf"
        return f"{self.value:e}"


def decode_float(bits: int, width: int) -> FloatDecoding:
    """Split the low *width* bits into IEEE-754 fields and decode the value."""
    layout = layout_for(width)
    bits &= mask_for(width)

    mantissa_mask = (1 << layout.mantissa_bits) - 1
    exponent_mask = (1 << layout.exponent_bits) - 1
    sign = (bits >> (width - 1)) & 1
    exponent_bits = (bits >> layout.mantissa_bits) & exponent_mask
    mantissa = bits & mantissa_mask

    (value,) = struct.unpack(layout.struct_code, bits.to_bytes(width // 8, "big"))

    if exponent_bits == exponent_mask:
        if mantissa == 0:
            kind = FloatKind.NEG_INF if sign else FloatKind.POS_INF
        else:
            kind = FloatKind.NAN
    elif exponent_bits == 0:
        kind = FloatKind.DENORMALIZED if mantissa else FloatKind.ZERO
    else:
        kind = FloatKind.NORMALIZED

    return FloatDecoding(
        format=layout.format,
        sign=sign,
        exponent_bits=exponent_bits,
        exponent=exponent_bits - layout.bias,
        mantissa=mantissa,
        value=value,
        kind=kind,
    )


def plot_position(decoding: FloatDecoding) -> float:
    """Position of the value on a 0-100 axis running from -Inf to +Inf.

    Zero sits at 50. Subnormals occupy the 5 points either side of zero in
    proportion to the smallest normal; normals are placed on a log2 scale
    between 55 and 90 (mirrored for negatives). NaN has no place on the
    axis and is reported at the centre.
    """
    kind = decoding.kind
    if kind in (FloatKind.NAN, FloatKind.ZERO):
        return 50.0
    if kind is FloatKind.POS_INF:
        return 100.0
    if kind is FloatKind.NEG_INF:
        return 0.0

    layout = decoding.layout
    magnitude = abs(decoding.value)

    if kind is FloatKind.DENORMALIZED:
        offset = 5.0 * magnitude / math.ldexp(1.0, layout.min_exponent)
    else:
        lo, hi = layout.min_exponent, layout.max_exponent
        log_val = min(max(math.log2(magnitude), lo), hi)
        offset = 5.0 + 35.0 * (log_val - lo) / (hi - lo)

    position = 50.0 - offset if decoding.sign else 50.0 + offset
    return min(max(position, 0.0), 100.0)
