"""
Candidate asset identifiers for a date and place.

Identifiers are plain concatenations (no separators) and map onto the
asset library as /locations/<identifier>.jpg, e.g. "194france",
"19generic", "genericuk", "ancientgeneric", "default".
"""
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from chronoscape.core.era import EraBucket, EraKind, classify, extract_decade
from chronoscape.core.location import AliasTable, normalize, parent_region


GENERIC = "generic"
DEFAULT_IDENTIFIER = "default"
ANCIENT_IDENTIFIER = "ancientgeneric"
ANTIQUITY_IDENTIFIER = "antiquitygeneric"

DEFAULT_PATH_PREFIX = "/locations"
DEFAULT_EXTENSION = ".jpg"


@dataclass(frozen=True)
class CandidatePlan:
    """Everything derived from a date/location pair before probing."""
    era: EraBucket
    decade: Optional[str]
    location_code: str
    candidates: List[str]


def _append(candidates: List[str], identifier: str) -> None:
    if identifier not in candidates:
        candidates.append(identifier)


def order_candidates(
    era: EraBucket,
    decade: Optional[str],
    location_code: str,
    parent: Optional[str] = None,
) -> List[str]:
    """
    Order identifiers from most to least specific.

    Pre-classical eras have a single dedicated image each and are never
    combined with a location. `parent`, when given, adds the parent
    region right after each decade/century + location entry.
    """
    if era.kind is EraKind.ANCIENT:
        return [ANCIENT_IDENTIFIER, DEFAULT_IDENTIFIER]
    if era.kind is EraKind.ANTIQUITY:
        return [ANTIQUITY_IDENTIFIER, DEFAULT_IDENTIFIER]

    century = era.token
    candidates: List[str] = []

    if decade:
        if location_code:
            _append(candidates, f"{decade}{location_code}")
            if parent:
                _append(candidates, f"{decade}{parent}")
        _append(candidates, f"{decade}{GENERIC}")

    if location_code:
        _append(candidates, f"{century}{location_code}")
        if parent:
            _append(candidates, f"{century}{parent}")
    _append(candidates, f"{century}{GENERIC}")

    if location_code:
        _append(candidates, f"{GENERIC}{location_code}")

    _append(candidates, DEFAULT_IDENTIFIER)
    return candidates


def plan_candidates(
    date: str,
    location: str,
    table: Optional[AliasTable] = None,
    include_parent_regions: bool = False,
) -> CandidatePlan:
    era = classify(date)
    decade = extract_decade(date)
    code = normalize(location, table)
    parent = parent_region(code, table) if include_parent_regions else None
    return CandidatePlan(
        era=era,
        decade=decade,
        location_code=code,
        candidates=order_candidates(era, decade, code, parent),
    )


def build_candidates(
    date: str,
    location: str,
    table: Optional[AliasTable] = None,
    include_parent_regions: bool = False,
) -> List[str]:
    """Candidate identifiers for a date and location; always ends in "default"."""
    return plan_candidates(date, location, table, include_parent_regions).candidates


def asset_path(
    identifier: str,
    prefix: str = DEFAULT_PATH_PREFIX,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """
    Asset path for an identifier ("194france" -> "/locations/194france.jpg").

    The identifier is percent-encoded so a fallback location code holding
    "?" or "#" still names a single file.
    """
    return f"{prefix.rstrip('/')}/{quote(identifier, safe='')}{extension}"
