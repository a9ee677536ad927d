"""
Address lookup endpoints.

Thin layer over the address catalog: unknown codes yield an empty ``data``
list, a dataset that cannot be loaded yields a 500 failure envelope.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from erpdesk.address import AddressNode, AddressSearchResult, get_address_catalog
from erpdesk.errors import DataUnavailable
from erpdesk.logging import get_logger

from .messages import message
from .schemas import ApiResponse, ErrorResponse

router = APIRouter(prefix="/address", tags=["Address"])

logger = get_logger(__name__)

AddressNodeList = ApiResponse[List[AddressNode]]
SearchResultList = ApiResponse[List[AddressSearchResult]]

_ENVELOPE_OPTIONS = dict(
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)


def _respond(envelope: Type[ApiResponse], fetch: Callable[[], list], message_key: str):
    try:
        return envelope(data=fetch())
    except DataUnavailable:
        logger.exception("Address catalog unavailable")
        return JSONResponse(status_code=500, content=ErrorResponse(error=message(message_key)).model_dump())


@router.get("/provinces", response_model=AddressNodeList, **_ENVELOPE_OPTIONS)
async def list_provinces():
    """List every province in dataset order."""
    return _respond(AddressNodeList, lambda: get_address_catalog().list_provinces(), "provinces_failed")


@router.get("/provinces/{province_code}/cities", response_model=AddressNodeList, **_ENVELOPE_OPTIONS)
async def list_cities(province_code: str):
    """List the cities of a province; empty for an unknown code."""
    return _respond(AddressNodeList, lambda: get_address_catalog().list_cities(province_code), "cities_failed")


@router.get("/cities/{city_code}/districts", response_model=AddressNodeList, **_ENVELOPE_OPTIONS)
async def list_districts(city_code: str):
    """List the districts of a city; empty for an unknown code."""
    return _respond(AddressNodeList, lambda: get_address_catalog().list_districts(city_code), "districts_failed")


@router.get("/search", response_model=SearchResultList, **_ENVELOPE_OPTIONS)
async def search_addresses(
    keyword: str = Query(..., description="Name fragment to look for"),
    limit: Optional[int] = Query(default=None, ge=1, le=100, description="Maximum number of hits"),
):
    """Fuzzy search across provinces, cities and districts."""
    return _respond(SearchResultList, lambda: get_address_catalog().search(keyword, limit=limit), "search_failed")
