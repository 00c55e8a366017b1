"""
Context resolver - picks the background image for a date and a place.

Candidates are probed one at a time, most specific first, and the first
asset that exists wins. Probe failures are absorbed as absence; the only
outcome reported upward is "no asset" when even the default is missing.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from chronoscape.core.candidates import (
    DEFAULT_EXTENSION,
    DEFAULT_PATH_PREFIX,
    asset_path,
    plan_candidates,
)
from chronoscape.core.era import EraBucket
from chronoscape.core.location import AliasTable
from chronoscape.core.probe import AssetProbe

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Outcome of one resolution call."""
    date: str
    location: str
    era: EraBucket
    decade: Optional[str]
    location_code: str
    candidates: List[str]
    probed: List[str] = field(default_factory=list)
    identifier: Optional[str] = None
    asset: Optional[str] = None
    cancelled: bool = False

    @property
    def found(self) -> bool:
        return self.asset is not None


class ContextResolver:
    """
    Resolves (date, location) to an asset path or None.

    Holds no per-call state, so one instance can serve concurrent
    resolutions. Any caching lives in the probe.
    """

    def __init__(
        self,
        probe: AssetProbe,
        table: Optional[AliasTable] = None,
        include_parent_regions: bool = False,
        path_prefix: str = DEFAULT_PATH_PREFIX,
        extension: str = DEFAULT_EXTENSION,
    ):
        self.probe = probe
        self.table = table
        self.include_parent_regions = include_parent_regions
        self.path_prefix = path_prefix
        self.extension = extension

    async def resolve_detailed(
        self,
        date: str,
        location: str,
        cancel: Optional[asyncio.Event] = None,
    ) -> Resolution:
        date = date or ""
        location = location or ""
        plan = plan_candidates(date, location, self.table, self.include_parent_regions)
        result = Resolution(
            date=date,
            location=location,
            era=plan.era,
            decade=plan.decade,
            location_code=plan.location_code,
            candidates=plan.candidates,
        )
        logger.debug(
            "Resolving background: era=%s decade=%s location=%s candidates=%s",
            plan.era, plan.decade, plan.location_code, plan.candidates,
        )

        for identifier in plan.candidates:
            if cancel is not None and cancel.is_set():
                logger.debug("Resolution cancelled before probing %s", identifier)
                result.cancelled = True
                return result

            result.probed.append(identifier)
            try:
                exists = await self.probe.exists(identifier)
            except Exception as e:
                logger.warning("Probe for %s raised %s: %s", identifier, type(e).__name__, e)
                exists = False

            # The caller may have gone away while the probe was in flight
            if cancel is not None and cancel.is_set():
                result.cancelled = True
                return result

            if exists:
                result.identifier = identifier
                result.asset = asset_path(identifier, self.path_prefix, self.extension)
                logger.debug("Found background %s", result.asset)
                return result

        logger.info("No background image for date=%r location=%r", date, location)
        return result

    async def resolve(
        self,
        date: str,
        location: str,
        cancel: Optional[asyncio.Event] = None,
    ) -> Optional[str]:
        """Asset path of the best existing background, or None."""
        resolution = await self.resolve_detailed(date, location, cancel)
        return resolution.asset
