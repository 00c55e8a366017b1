"""Pydantic schemas for API request/response validation."""
from chronoscape.schemas.background import (
    BackgroundResolution,
    CandidateList,
    Era,
    NormalizedLocation,
)

__all__ = [
    "BackgroundResolution",
    "CandidateList",
    "Era",
    "NormalizedLocation",
]
