from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

AddressType = Literal["province", "city", "district"]


class AddressNode(BaseModel):
    """One entry of the province → city → district hierarchy."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(description="Administrative division code, unique across the dataset")
    name: str = Field(description="Display name")
    type: AddressType = Field(description="Hierarchy level")
    parent_code: Optional[str] = Field(
        default=None, alias="parentCode", description="Code of the owning node (None for provinces)"
    )


class AddressData(BaseModel):
    """A postal address as captured on customer and order forms."""
    province: str = Field(default="", description="Province name")
    city: str = Field(default="", description="City name")
    district: str = Field(default="", description="District name")
    detail: str = Field(default="", description="Street, building and room")


class AddressSearchResult(BaseModel):
    """A keyword hit together with the ancestors of the matched node."""
    model_config = ConfigDict(populate_by_name=True)

    province: AddressNode
    city: Optional[AddressNode] = None
    district: Optional[AddressNode] = None
    full_path: str = Field(alias="fullPath", description="Names from province down to the hit, space separated")
    score: int = Field(description="100 exact, 80 prefix, 60 substring")
