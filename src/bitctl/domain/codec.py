"""Parse and format a value in the fixed bases.

Formatting contract (value already masked to the active width):

- ``dec``    plain decimal
- ``bin``    ``0b`` + digits zero-padded to the width
- ``hex``    ``0x`` + uppercase digits, unpadded
- ``hex_be`` ``0x`` + lowercase hex of the big-endian bytes
- ``hex_le`` ``0x`` + lowercase hex of the little-endian bytes
- ``oct``    ``0o`` + octal digits
- ``ascii``  little-endian bytes, printable ASCII kept, others as spaces
- ``utf8``   big-endian bytes decoded as UTF-8 with replacement characters

Parsing never partially applies: it returns a full value or raises
:class:`ParseError`, leaving the caller's state untouched.
"""

from __future__ import annotations

import re

from bitctl.domain.bits import STORAGE_BITS, mask_for, validate_width
from bitctl.domain.errors import ParseError
from bitctl.domain.types import EDITABLE_BASES, Base

RADIX: dict[Base, int] = {
    Base.DEC: 10,
    Base.BIN: 2,
    Base.HEX: 16,
    Base.HEX_BE: 16,
    Base.HEX_LE: 16,
    Base.OCT: 8,
}

PREFIXES: dict[Base, str] = {
    Base.BIN: "0b",
    Base.HEX: "0x",
    Base.HEX_BE: "0x",
    Base.HEX_LE: "0x",
    Base.OCT: "0o",
}

DIGITS: dict[Base, re.Pattern[str]] = {
    Base.DEC: re.compile(r"^[0-9]+$"),
    Base.BIN: re.compile(r"^[01]+$"),
    Base.HEX: re.compile(r"^[0-9a-fA-F]+$"),
    Base.HEX_BE: re.compile(r"^[0-9a-fA-F]+$"),
    Base.HEX_LE: re.compile(r"^[0-9a-fA-F]+$"),
    Base.OCT: re.compile(r"^[0-7]+$"),
}

_STORAGE_MAX = mask_for(STORAGE_BITS)


def resolve_base(name: str) -> Base:
    """Look up a base by name; accepts ``-`` in place of ``_`` and any case."""
    key = name.strip().lower().replace("-", "_")
    try:
        return Base(key)
    except ValueError:
        valid = ", ".join(b.value for b in Base)
        msg = f"Unknown base '{name}'; expected one of {valid}"
        raise ParseError(msg) from None


def byte_count(width: int) -> int:
    return validate_width(width) // 8


# ── Formatting ────────────────────────────────────────────────────────


def _be_bytes(value: int, width: int) -> bytes:
    return (value & mask_for(width)).to_bytes(byte_count(width), "big")


def _le_bytes(value: int, width: int) -> bytes:
    return (value & mask_for(width)).to_bytes(byte_count(width), "little")


def ascii_view(value: int, width: int) -> str:
    return "".join(chr(b) if 32 <= b <= 126 else " " for b in _le_bytes(value, width))


def utf8_view(value: int, width: int) -> str:
    text = _be_bytes(value, width).decode("utf-8", errors="replace")
    return text or " "


def format_value(value: int, base: Base | str, width: int, *, uppercase_hex: bool = True) -> str:
    """Render *value* in *base* at *width*."""
    base = base if isinstance(base, Base) else resolve_base(base)
    value &= mask_for(width)
    if base is Base.DEC:
        return str(value)
    if base is Base.BIN:
        return f"0b{value:0{width}b}"
    if base is Base.HEX:
        return f"0x{value:X}" if uppercase_hex else f"0x{value:x}"
    if base is Base.HEX_BE:
        return f"0x{_be_bytes(value, width).hex()}"
    if base is Base.HEX_LE:
        return f"0x{_le_bytes(value, width).hex()}"
    if base is Base.OCT:
        return f"0o{value:o}"
    if base is Base.ASCII:
        return ascii_view(value, width)
    return utf8_view(value, width)


def representations(value: int, width: int, *, uppercase_hex: bool = True) -> dict[str, str]:
    """Every view of *value*, keyed by base name, in display order."""
    return {
        str(base): format_value(value, base, width, uppercase_hex=uppercase_hex) for base in Base
    }


# ── Parsing ───────────────────────────────────────────────────────────


def _clean(text: str, base: Base) -> str:
    """Strip whitespace, digit separators, and the base prefix."""
    cleaned = re.sub(r"[\s_]", "", text)
    prefix = PREFIXES.get(base)
    if prefix and cleaned.lower().startswith(prefix):
        cleaned = cleaned[len(prefix) :]
    return cleaned


def _to_int(digits: str, base: Base) -> int:
    """Convert validated *digits* to an int no wider than the 64-bit storage.

    A 64-bit value never needs more than 64 significant digits in any base, so
    longer input is rejected before ``int()`` sees it.
    """
    significant = digits.lstrip("0")
    if len(significant) > STORAGE_BITS:
        msg = f"{base} input does not fit in {STORAGE_BITS} bits ({len(significant)} digits)"
        raise ParseError(msg)
    value = int(significant or "0", RADIX[base])
    if value > _STORAGE_MAX:
        msg = f"{base} input does not fit in {STORAGE_BITS} bits: {digits!r}"
        raise ParseError(msg)
    return value


def parse_value(text: str, base: Base | str, width: int) -> int:
    """Parse *text* as a number in *base*, masked to *width*.

    An over-long ``hex`` field keeps its leading ``width/4`` digits, but the
    whole input must be valid hex first: ``FFZ`` at width 8 is rejected rather
    than read as ``0xFF``.

    Raises:
        ParseError: empty or malformed text, a value beyond 64 bits, a
            byte-ordered hex string of the wrong length, or a read-only base.
    """
    base = base if isinstance(base, Base) else resolve_base(base)
    validate_width(width)
    if base not in EDITABLE_BASES:
        msg = f"The {base} view is read-only"
        raise ParseError(msg)

    digits = _clean(text, base)
    if not digits:
        msg = f"Empty {base} input"
        raise ParseError(msg)
    if not DIGITS[base].match(digits):
        msg = f"Invalid {base} input: {text.strip()!r}"
        raise ParseError(msg)

    hex_digits = width // 4
    if base is Base.HEX and len(digits) > hex_digits:
        digits = digits[:hex_digits]
    if base in (Base.HEX_BE, Base.HEX_LE):
        if len(digits) != hex_digits:
            msg = (
                f"{base} input needs exactly {hex_digits} hex digits at width {width}, "
                f"got {len(digits)}"
            )
            raise ParseError(msg)
        raw = bytes.fromhex(digits)
        return int.from_bytes(raw, "big" if base is Base.HEX_BE else "little")

    return _to_int(digits, base) & mask_for(width)


def detect_base(text: str) -> Base:
    """Infer the base of a literal from its prefix (decimal when unprefixed)."""
    head = text.strip().lower()
    if head.startswith("0x"):
        return Base.HEX
    if head.startswith("0b"):
        return Base.BIN
    if head.startswith("0o"):
        return Base.OCT
    return Base.DEC


def parse_literal(text: str, width: int = STORAGE_BITS) -> int:
    """Parse a prefixed literal such as ``0xFF``, ``0b1010``, ``0o17``, or ``42``.

    Unlike the ``hex`` field, an over-long hex literal is rejected rather than
    truncated: command-line literals are never partial edits.
    """
    base = detect_base(text)
    if base is Base.HEX:
        digits = _clean(text, base)
        if not digits or not DIGITS[base].match(digits):
            msg = f"Invalid hex input: {text.strip()!r}"
            raise ParseError(msg)
        return _to_int(digits, base) & mask_for(width)
    return parse_value(text, base, width)
