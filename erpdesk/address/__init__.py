from .models import AddressData, AddressNode, AddressSearchResult, AddressType
from .interface import AddressCatalog
from .backends.csv_backend import CsvAddressCatalog
from .formatting import format_address, parse_address
from .util import get_address_catalog, reset_address_catalog

__all__ = [
    # Models
    "AddressType",
    "AddressNode",
    "AddressData",
    "AddressSearchResult",
    # Catalog
    "AddressCatalog",
    "CsvAddressCatalog",
    "get_address_catalog",
    "reset_address_catalog",
    # Free-text helpers
    "format_address",
    "parse_address",
]
