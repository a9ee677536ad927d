"""
Order pricing helpers.

Amounts are ``decimal.Decimal`` end to end. Float inputs go through ``str()``
so ``0.1`` means ``Decimal("0.1")``, not its binary expansion. Subtotals and
totals are exact; rounding happens only in ``round_money``/``format_currency``.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Tuple, Union

from ..config import get_config
from ..errors import InvalidOrderItem
from .models import OrderTotals

Amount = Union[Decimal, int, float, str]

_ZERO = Decimal("0")


def _to_amount(value: Any, field: str, index: Optional[int] = None) -> Decimal:
    if isinstance(value, bool):
        raise InvalidOrderItem(field, value, "is not a number", index)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidOrderItem(field, value, "is not a number", index) from None
    else:
        raise InvalidOrderItem(field, value, "is not a number", index)

    if not amount.is_finite():
        raise InvalidOrderItem(field, value, "is not finite", index)
    if amount < 0:
        raise InvalidOrderItem(field, value, "is negative", index)
    return amount


def _subtotal(quantity: Any, unit_price: Any, index: Optional[int] = None) -> Decimal:
    if quantity is None:
        raise InvalidOrderItem("quantity", quantity, "is missing", index)
    qty = _to_amount(quantity, "quantity", index)
    # A line without a price contributes nothing.
    price = _ZERO if unit_price is None else _to_amount(unit_price, "unit_price", index)
    return qty * price


def _item_fields(item: Any) -> Tuple[Any, Any]:
    """Pull (quantity, unit_price) out of an OrderItem, a mapping or any object with those attributes."""
    if isinstance(item, Mapping):
        unit_price = item.get("unit_price")
        if unit_price is None:
            unit_price = item.get("unitPrice")
        return item.get("quantity"), unit_price
    return getattr(item, "quantity", None), getattr(item, "unit_price", None)


def calculate_item_subtotal(quantity: Amount, unit_price: Optional[Amount] = None) -> Decimal:
    """Return ``quantity * unit_price`` for one order line.

    A missing ``unit_price`` counts as zero. Zero quantity or price is not an error.

    Raises:
        InvalidOrderItem: If either input is negative, non-finite or not a number.
    """
    return _subtotal(quantity, unit_price)


def calculate_order_total(items: Iterable[Any]) -> Decimal:
    """Sum the subtotals of ``items`` left to right. An empty order totals zero.

    Items may be ``OrderItem`` models or mappings with ``quantity`` and
    ``unit_price`` (or ``unitPrice``) keys. The input is only read.
    """
    total = _ZERO
    for index, item in enumerate(items):
        quantity, unit_price = _item_fields(item)
        total += _subtotal(quantity, unit_price, index)
    return total


def summarize_order(items: Iterable[Any]) -> OrderTotals:
    """Line count, unit count and grand total for an order, in a single pass."""
    lines = 0
    units = _ZERO
    total = _ZERO
    for index, item in enumerate(items):
        quantity, unit_price = _item_fields(item)
        total += _subtotal(quantity, unit_price, index)
        units += _to_amount(quantity, "quantity", index)
        lines += 1
    return OrderTotals(lines=lines, units=units, total=total)


def round_money(amount: Amount, places: Optional[int] = None) -> Decimal:
    """Round ``amount`` half-up to ``places`` decimals (default: config.money_places)."""
    if places is None:
        places = get_config().money_places
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_currency(
    amount: Optional[Amount],
    symbol: Optional[str] = None,
    places: Optional[int] = None,
) -> str:
    """Render ``amount`` for display, e.g. ``format_currency(1234.5) == "¥1,234.50"``.

    ``None``, NaN and infinities render as zero.
    """
    config = get_config()
    if symbol is None:
        symbol = config.currency_symbol
    if places is None:
        places = config.money_places

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        value = _ZERO
    if amount is None or not value.is_finite():
        value = _ZERO

    return f"{symbol}{round_money(value, places):,.{places}f}"
