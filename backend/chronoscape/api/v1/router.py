"""
API v1 Router - Aggregates all API endpoints.
"""
from fastapi import APIRouter

from chronoscape.api.v1 import backgrounds

api_router = APIRouter()

# Background image resolution
api_router.include_router(backgrounds.router, prefix="/backgrounds", tags=["Backgrounds"])
