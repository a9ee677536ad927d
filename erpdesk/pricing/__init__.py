from .models import OrderItem, OrderTotals
from .calculator import (
    calculate_item_subtotal,
    calculate_order_total,
    format_currency,
    round_money,
    summarize_order,
)

__all__ = [
    # Models
    "OrderItem",
    "OrderTotals",
    # Calculations
    "calculate_item_subtotal",
    "calculate_order_total",
    "summarize_order",
    # Display helpers
    "round_money",
    "format_currency",
]
