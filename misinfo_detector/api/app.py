"""FastAPI application for the misinformation detector service."""

import contextlib
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from .env file
load_dotenv()

from ..infrastructure.config import configure_logging
from ..infrastructure.dependencies import get_service_container
from .endpoints import detect, health
from .errors import register_exception_handlers

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Shut providers down when the application stops."""
    yield  # Application runs here

    if get_service_container.cache_info().currsize:
        await get_service_container().shutdown()
        logger.info("👋 Providers shut down")


# Create FastAPI application
app = FastAPI(
    title="Misinformation Detector API",
    description="Claim extraction and multi-stage verification for free text",
    version=health.VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(detect.router)
