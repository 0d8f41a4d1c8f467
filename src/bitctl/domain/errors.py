"""Domain exception hierarchy.

Services translate these into ``ServiceError`` codes; nothing below the
service layer knows about result envelopes.
"""

from __future__ import annotations


class BitctlError(Exception):
    """Base class for all bitctl domain errors."""

    code = "ERROR"


class ParseError(BitctlError, ValueError):
    """Text could not be parsed as a value in the requested base."""

    code = "INVALID_INPUT"


class BitPositionError(BitctlError, IndexError):
    """A bit position lies outside the active width."""

    code = "BIT_OUT_OF_RANGE"


class UnknownOperationError(BitctlError, ValueError):
    """No operation is registered under the given name."""

    code = "UNKNOWN_OPERATION"


class UnsupportedWidthError(BitctlError, ValueError):
    """The requested view or value does not exist at the active width."""

    code = "UNSUPPORTED_WIDTH"


class UnknownSpecialValueError(BitctlError, KeyError):
    """No special bit pattern is registered under the given name."""

    code = "UNKNOWN_SPECIAL"

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable
        return str(self.args[0]) if self.args else ""


class InvalidAmountError(BitctlError, ValueError):
    """An operation repeat/shift amount is negative."""

    code = "INVALID_INPUT"
