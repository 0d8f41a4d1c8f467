"""Named IEEE-754 special bit patterns for each float width."""

from __future__ import annotations

from bitctl.domain.errors import UnknownSpecialValueError, UnsupportedWidthError

# name -> (label, {width: pattern})
SPECIAL_VALUES: dict[str, tuple[str, dict[int, int]]] = {
    "nan": ("NaN (Quiet)", {16: 0x7E00, 32: 0x7FC00000, 64: 0x7FF8000000000000}),
    "snan": ("NaN (Signaling)", {16: 0x7C01, 32: 0x7F800001, 64: 0x7FF0000000000001}),
    "+inf": ("+Inf", {16: 0x7C00, 32: 0x7F800000, 64: 0x7FF0000000000000}),
    "-inf": ("-Inf", {16: 0xFC00, 32: 0xFF800000, 64: 0xFFF0000000000000}),
    "+0": ("+0", {16: 0x0000, 32: 0x00000000, 64: 0x0000000000000000}),
    "-0": ("-0", {16: 0x8000, 32: 0x80000000, 64: 0x8000000000000000}),
    "min-pos": ("Min Pos", {16: 0x0001, 32: 0x00000001, 64: 0x0000000000000001}),
    "max-pos": ("Max Pos", {16: 0x7BFF, 32: 0x7F7FFFFF, 64: 0x7FEFFFFFFFFFFFFF}),
}

_ALIASES: dict[str, str] = {
    "qnan": "nan",
    "inf": "+inf",
    "zero": "+0",
    "0": "+0",
    "-zero": "-0",
    "neg-inf": "-inf",
    "neg-0": "-0",
    "neg-zero": "-0",
    "min": "min-pos",
    "max": "max-pos",
}


def special_names() -> list[str]:
    return list(SPECIAL_VALUES)


def resolve_special(name: str) -> str:
    key = name.strip().lower().replace("_", "-")
    key = _ALIASES.get(key, key)
    if key not in SPECIAL_VALUES:
        msg = f"Unknown special value '{name}'; expected one of {', '.join(SPECIAL_VALUES)}"
        raise UnknownSpecialValueError(msg)
    return key


def special_value(name: str, width: int) -> int:
    """Bit pattern of the special value *name* at *width*."""
    key = resolve_special(name)
    patterns = SPECIAL_VALUES[key][1]
    if width not in patterns:
        msg = f"Special float values need width 16, 32, or 64 (active width is {width})"
        raise UnsupportedWidthError(msg)
    return patterns[width]


def special_label(name: str) -> str:
    return SPECIAL_VALUES[resolve_special(name)][0]
