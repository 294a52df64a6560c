"""Fake news detection endpoint."""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...domain.errors import AnalysisFailedError, ConfigurationError, InputValidationError
from ...domain.models.analysis import AnalysisResult
from ...domain.services.fact_checking_service import validate_text
from ...infrastructure.dependencies import ServiceContainer, get_service_container
from ..errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["detection"])


class DetectionRequest(BaseModel):
    """Request model for fake news detection."""

    text: str = Field(default="", description="Text to analyze")
    model: Optional[str] = Field(None, description="Model variant to use")


class DetectionResponse(BaseModel):
    """Response model for a successful detection."""

    success: bool = True
    analysis: AnalysisResult
    raw_analysis: str = Field(..., alias="rawAnalysis")
    timestamp: str

    class Config:
        """Pydantic model configuration."""
        populate_by_name = True


@router.post("/detect-fake-news", response_model=DetectionResponse)
async def detect_fake_news(
    request: DetectionRequest,
    container: ServiceContainer = Depends(get_service_container),
):
    """Assess a block of text for misinformation.

    Args:
        request: Text and optional model variant
        container: Service container providing the pipeline

    Returns:
        Structured analysis, the raw model output and a timestamp
    """
    try:
        validate_text(request.text)
        service = await container.get_fact_checking_service(request.model)
        analysis = await service.run(request.text)
    except InputValidationError as e:
        return error_response(400, str(e))
    except ConfigurationError as e:
        logger.error(f"❌ Configuration error: {e}")
        return error_response(500, str(e))
    except AnalysisFailedError as e:
        return error_response(500, str(e))

    return DetectionResponse(
        analysis=analysis,
        raw_analysis=analysis.raw_analysis,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
