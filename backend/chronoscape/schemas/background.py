"""Background resolution schemas."""
from typing import List, Optional

from pydantic import BaseModel, Field

from chronoscape.core.era import EraBucket, EraKind


class Era(BaseModel):
    kind: EraKind
    century: Optional[int] = None
    token: str

    @classmethod
    def from_bucket(cls, bucket: EraBucket) -> "Era":
        return cls(kind=bucket.kind, century=bucket.century, token=bucket.token)


class CandidateList(BaseModel):
    """Candidates for a date/location pair, most specific first."""
    date: str
    location: str
    era: Era
    decade: Optional[str] = None
    location_code: str
    candidates: List[str]
    paths: List[str]


class BackgroundResolution(BaseModel):
    """Result of resolving a background image."""
    date: str
    location: str
    era: Era
    decade: Optional[str] = None
    location_code: str
    candidates: List[str]
    probed: List[str] = Field(default_factory=list)
    identifier: Optional[str] = None
    asset: Optional[str] = Field(None, description="Asset path, null when nothing matched")
    cancelled: bool = False


class NormalizedLocation(BaseModel):
    location: str
    code: str
    parent: Optional[str] = None
