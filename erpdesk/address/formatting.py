from __future__ import annotations

from typing import Optional

from .models import AddressData


def format_address(address: AddressData) -> str:
    """Join the non-empty parts of an address without separators, Chinese postal style."""
    parts = [address.province, address.city, address.district, address.detail]
    return "".join(part for part in parts if part)


def parse_address(text: Optional[str]) -> AddressData:
    """Wrap free text as an address. Everything lands in ``detail``; no region guessing is attempted."""
    if not text:
        return AddressData()
    return AddressData(detail=text)
