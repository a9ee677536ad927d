from fastapi import APIRouter

from erpdesk.config import get_config

from .schemas import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service liveness and version."""
    return HealthResponse(status="ok", version=get_config().api_version)
