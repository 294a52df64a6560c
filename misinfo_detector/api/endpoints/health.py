"""Health check endpoints."""

from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...infrastructure.dependencies import ServiceContainer, get_service_container

router = APIRouter(tags=["health"])

VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    ai_providers: Dict[str, bool]
    search_provider: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_service_container),
) -> HealthResponse:
    """Report service status and provider activity."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        ai_providers=container.provider_status,
        search_provider=container.search_provider.provider_name,
    )
