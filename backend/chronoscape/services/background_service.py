"""
Background service - wires the resolver to application settings.

Builds the asset probe (HTTP or directory manifest, optionally cached)
once per process and exposes `resolve`, the entry point used by every
caller that needs a background image.
"""
import asyncio
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import httpx

from chronoscape.config import Settings, get_settings
from chronoscape.core.location import load_alias_table
from chronoscape.core.probe import AssetProbe, CachingProbe, HttpAssetProbe, ManifestAssetProbe
from chronoscape.core.resolver import ContextResolver, Resolution

logger = logging.getLogger(__name__)


class BackgroundService:
    """Owns the probe, its HTTP client and the resolver."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._owns_client = False
        self.client = client
        self.table = load_alias_table(settings.alias_table_path)
        self.probe = self._build_probe()
        self.resolver = ContextResolver(
            self.probe,
            table=self.table,
            include_parent_regions=settings.include_parent_regions,
            path_prefix=settings.asset_path_prefix,
            extension=settings.asset_extension,
        )

    def _build_probe(self) -> AssetProbe:
        settings = self.settings
        if settings.asset_source == "directory":
            if not settings.asset_dir:
                raise ValueError("asset_dir is required when asset_source is 'directory'")
            # A manifest is already in memory; caching it would be redundant
            return ManifestAssetProbe.from_directory(
                Path(settings.asset_dir), settings.asset_extension
            )

        if self.client is None:
            self.client = httpx.AsyncClient(
                timeout=settings.probe_timeout, follow_redirects=True
            )
            self._owns_client = True

        probe: AssetProbe = HttpAssetProbe(
            self.client,
            base_url=settings.asset_base_url,
            path_prefix=settings.asset_path_prefix,
            extension=settings.asset_extension,
        )
        if settings.probe_cache:
            probe = CachingProbe(probe)
        return probe

    async def resolve_detailed(
        self, date: str, location: str, cancel: Optional[asyncio.Event] = None
    ) -> Resolution:
        return await self.resolver.resolve_detailed(date, location, cancel)

    async def resolve(
        self, date: str, location: str, cancel: Optional[asyncio.Event] = None
    ) -> Optional[str]:
        return await self.resolver.resolve(date, location, cancel)

    async def aclose(self) -> None:
        if self._owns_client and self.client is not None:
            await self.client.aclose()
            self.client = None


@lru_cache()
def get_background_service() -> BackgroundService:
    """Get singleton background service instance."""
    service = BackgroundService(get_settings())
    logger.info(
        "Background service ready (source=%s, cache=%s)",
        service.settings.asset_source, service.settings.probe_cache,
    )
    return service


async def shutdown() -> None:
    """Close the singleton service, if it was created."""
    if get_background_service.cache_info().currsize:
        await get_background_service().aclose()
        get_background_service.cache_clear()


async def resolve(
    date: str, location: str, cancel: Optional[asyncio.Event] = None
) -> Optional[str]:
    """Best background asset path for a date and place, or None."""
    return await get_background_service().resolve(date, location, cancel)
