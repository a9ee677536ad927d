from __future__ import annotations

from typing import Any, Optional


class ErpDeskError(Exception):
    """Base class for errors raised by the erpdesk core."""


class DataUnavailable(ErpDeskError, RuntimeError):
    """A static dataset could not be located or read."""


class InvalidInput(ErpDeskError, ValueError):
    """A numeric input was negative, non-finite or not a number."""


class InvalidOrderItem(InvalidInput):
    """An order line carried a quantity or unit price the calculator rejects.

    Attributes:
        field: Name of the offending field ("quantity" or "unit_price").
        value: The rejected value as supplied by the caller.
        index: Position of the item in the order, when known.
    """

    def __init__(self, field: str, value: Any, reason: str, index: Optional[int] = None) -> None:
        self.field = field
        self.value = value
        self.index = index
        where = f"item {index}: " if index is not None else ""
        super().__init__(f"{where}{field}={value!r} {reason}")
