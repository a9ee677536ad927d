"""HTTP routers for the ERP dashboard core."""

from .address import router as address_router
from .health import router as health_router

__all__ = [
    "address_router",
    "health_router",
]
