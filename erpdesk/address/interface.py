from __future__ import annotations

from typing import List, Optional, Protocol

from .models import AddressData, AddressNode, AddressSearchResult


class AddressCatalog(Protocol):
    """
    Read-only contract over the administrative address hierarchy.

    - Lookups for unknown codes or names return empty results, never errors.
    - Every list method returns a new list in dataset declaration order.
    """

    # Hierarchy listing

    def list_provinces(self) -> List[AddressNode]:
        """List every province, projected to code, name and type."""
        ...

    def list_cities(self, province_code: str) -> List[AddressNode]:
        """List the cities of a province."""
        ...

    def list_districts(self, city_code: str) -> List[AddressNode]:
        """List the districts of a city."""
        ...

    # Point lookups

    def get_node(self, code: str) -> Optional[AddressNode]:
        """Get a node of any level by its code."""
        ...

    def get_province_code_by_name(self, name: str) -> Optional[str]:
        """Resolve a province name to its code."""
        ...

    def get_city_code_by_name(self, name: str, province_code: str) -> Optional[str]:
        """Resolve a city name within a province to its code."""
        ...

    def get_district_code_by_name(self, name: str, city_code: str) -> Optional[str]:
        """Resolve a district name within a city to its code."""
        ...

    # Free-text helpers

    def search(self, keyword: str, limit: Optional[int] = None) -> List[AddressSearchResult]:
        """Fuzzy search over names at every level."""
        ...

    def validate_address(self, address: AddressData) -> bool:
        """Check that province, city and district exist and nest correctly."""
        ...
