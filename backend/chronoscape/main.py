"""
Chronoscape - Main FastAPI Application

Serves historical background images chosen from a document's date and
place of publication.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chronoscape import __version__
from chronoscape.config import get_settings
from chronoscape.api.v1.router import api_router
from chronoscape.services import background_service

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await background_service.shutdown()


app = FastAPI(
    title=settings.project_name,
    description="""
    Chronoscape: temporal-spatial background resolution

    Given a free-text date and place, picks the most specific existing
    background image from the /locations asset library:

    - decade + location, decade generic
    - century + location, century generic
    - location generic
    - default
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint - system status."""
    return {
        "system": settings.project_name,
        "status": "operational",
        "version": __version__,
        "asset_source": settings.asset_source,
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
