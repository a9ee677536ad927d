from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderItem(BaseModel):
    """One order line as edited on the order forms."""
    model_config = ConfigDict(populate_by_name=True)

    quantity: Decimal = Field(ge=0, description="Quantity ordered")
    unit_price: Optional[Decimal] = Field(
        default=None, ge=0, alias="unitPrice", description="Unit price; missing counts as zero"
    )

    @property
    def subtotal(self) -> Decimal:
        """quantity * unit_price, recomputed on every access."""
        from .calculator import calculate_item_subtotal

        return calculate_item_subtotal(self.quantity, self.unit_price)


class OrderTotals(BaseModel):
    """Aggregate figures shown alongside an order's line items."""
    lines: int = Field(description="Number of order lines")
    units: Decimal = Field(description="SUM(quantity)")
    total: Decimal = Field(description="SUM(quantity * unit_price)")
