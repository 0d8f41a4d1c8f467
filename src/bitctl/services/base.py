"""BaseService — foundation for services that act on a BitState.

Every service receives the session's :class:`BitState` at construction time
and reports through :class:`ServiceResult`. Domain errors are converted to
failed results here so that commands never see raw exceptions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bitctl.domain.bits import BitArray
from bitctl.domain.codec import representations
from bitctl.services.result import ServiceResult

if TYPE_CHECKING:
    from bitctl.domain.errors import BitctlError
    from bitctl.services.state import BitState

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class BitService(BaseService):
            def operate(self, op: str) -> ServiceResult:
                try:
                    self._state.apply(op)
                except BitctlError as exc:
                    return self._fail("operate", exc)
                return self._snapshot("operate")
    """

    def __init__(self, state: BitState, *, uppercase_hex: bool = True) -> None:
        self._state = state
        self._uppercase_hex = uppercase_hex

    @property
    def state(self) -> BitState:
        return self._state

    def _state_data(self) -> dict[str, Any]:
        """Every view of the current state, as emitted in result payloads."""
        value, width = self._state.value, self._state.width
        bits = BitArray(value)
        return {
            "value": value,
            "width": width,
            "bits": str(bits),
            "set_bits": [i for i, on in enumerate(bits.all_bits()) if on],
            "popcount": bits.popcount(),
            "representations": representations(
                value, width, uppercase_hex=self._uppercase_hex
            ),
        }

    def _snapshot(self, op: str, **extra: Any) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data={**extra, **self._state_data()})

    def _fail(self, op: str, exc: BitctlError, **detail: Any) -> ServiceResult:
        """Failed result; the state is reported unchanged as the retained value."""
        logger.debug("%s rejected: %s", op, exc)
        detail.setdefault("retained_value", self._state.value)
        detail.setdefault("width", self._state.width)
        return ServiceResult.failure(op, exc, **detail)
