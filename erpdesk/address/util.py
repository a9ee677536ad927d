from __future__ import annotations

from typing import Literal, Optional

from .backends.csv_backend import CsvAddressCatalog
from .interface import AddressCatalog

_catalog: Optional[AddressCatalog] = None


def get_address_catalog(kind: Literal["csv"] = "csv") -> AddressCatalog:
    """Return the process-wide catalog, building it on first use."""
    global _catalog
    if kind != "csv":
        raise ValueError(f"Unknown address catalog kind: {kind}")
    if _catalog is None:
        _catalog = CsvAddressCatalog()
    return _catalog


def reset_address_catalog() -> None:
    """Drop the cached catalog so the next call reloads it from the configured directory."""
    global _catalog
    _catalog = None
