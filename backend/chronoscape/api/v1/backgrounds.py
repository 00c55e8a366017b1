"""
Backgrounds API endpoints.

Resolves the historical background image for a document's date and
place of publication.
"""
from fastapi import APIRouter, Depends, Query

from chronoscape.core.candidates import asset_path, plan_candidates
from chronoscape.core.location import normalize, parent_region
from chronoscape.schemas.background import (
    BackgroundResolution,
    CandidateList,
    Era,
    NormalizedLocation,
)
from chronoscape.services.background_service import BackgroundService, get_background_service

router = APIRouter()


@router.get("/resolve", response_model=BackgroundResolution)
async def resolve_background(
    date: str = Query("", description="Free-text date, e.g. 'March 1947' or '800 BCE'"),
    location: str = Query("", description="Free-text place, e.g. 'Paris, France'"),
    service: BackgroundService = Depends(get_background_service),
):
    """
    Resolve the best existing background image.

    Always succeeds; `asset` is null when not even the default image
    exists, and the caller should render without a background.
    """
    resolution = await service.resolve_detailed(date, location)
    return BackgroundResolution(
        date=resolution.date,
        location=resolution.location,
        era=Era.from_bucket(resolution.era),
        decade=resolution.decade,
        location_code=resolution.location_code,
        candidates=resolution.candidates,
        probed=resolution.probed,
        identifier=resolution.identifier,
        asset=resolution.asset,
        cancelled=resolution.cancelled,
    )


@router.get("/candidates", response_model=CandidateList)
async def list_candidates(
    date: str = Query(""),
    location: str = Query(""),
    service: BackgroundService = Depends(get_background_service),
):
    """List candidate images in probe order, without probing."""
    settings = service.settings
    plan = plan_candidates(date, location, service.table, settings.include_parent_regions)
    return CandidateList(
        date=date,
        location=location,
        era=Era.from_bucket(plan.era),
        decade=plan.decade,
        location_code=plan.location_code,
        candidates=plan.candidates,
        paths=[
            asset_path(c, settings.asset_path_prefix, settings.asset_extension)
            for c in plan.candidates
        ],
    )


@router.get("/locations/normalize", response_model=NormalizedLocation)
async def normalize_location(
    location: str = Query(""),
    service: BackgroundService = Depends(get_background_service),
):
    """Show how a place name maps to a location code."""
    code = normalize(location, service.table)
    return NormalizedLocation(
        location=location,
        code=code,
        parent=parent_region(code, service.table),
    )
