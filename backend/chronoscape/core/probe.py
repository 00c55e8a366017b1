"""
Existence probes for background assets.

A probe answers "does /locations/<identifier>.jpg exist?". `check`
returns True/False for a definitive answer and None when the probe
could not tell (network error, server error); `exists` folds None into
False so a failed probe only moves resolution to the next candidate.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import httpx

from chronoscape.core.candidates import DEFAULT_EXTENSION, DEFAULT_PATH_PREFIX, asset_path

logger = logging.getLogger(__name__)


class AssetProbe(ABC):
    """Base class for asset existence probes."""

    @abstractmethod
    async def check(self, identifier: str) -> Optional[bool]:
        ...

    async def exists(self, identifier: str) -> bool:
        return await self.check(identifier) is True


class HttpAssetProbe(AssetProbe):
    """
    Probes assets with HEAD requests.

    2xx means present and 4xx means absent. Anything else (transport
    errors, timeouts, 5xx) is inconclusive and reported as None.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "",
        path_prefix: str = DEFAULT_PATH_PREFIX,
        extension: str = DEFAULT_EXTENSION,
    ):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.path_prefix = path_prefix
        self.extension = extension

    def url_for(self, identifier: str) -> str:
        return f"{self.base_url}{asset_path(identifier, self.path_prefix, self.extension)}"

    async def check(self, identifier: str) -> Optional[bool]:
        url = self.url_for(identifier)
        try:
            response = await self.client.head(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Probe failed for %s: %s", url, e)
            return None

        if response.is_success:
            return True
        if response.is_client_error:
            return False
        logger.warning("Probe for %s returned HTTP %d", url, response.status_code)
        return None


class ManifestAssetProbe(AssetProbe):
    """Answers from a fixed set of identifiers known to exist."""

    def __init__(self, identifiers: Iterable[str]):
        self.identifiers = frozenset(identifiers)

    @classmethod
    def from_directory(
        cls,
        directory: Union[str, Path],
        extension: str = DEFAULT_EXTENSION,
    ) -> "ManifestAssetProbe":
        """Build a manifest from the asset files in a directory."""
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Asset directory %s does not exist; manifest is empty", directory)
            return cls([])

        identifiers = [
            p.name[: -len(extension)] if extension else p.name
            for p in directory.iterdir()
            if p.is_file() and p.name.endswith(extension)
        ]
        logger.info("Loaded %d assets from %s", len(identifiers), directory)
        return cls(identifiers)

    async def check(self, identifier: str) -> Optional[bool]:
        return identifier in self.identifiers


class CachingProbe(AssetProbe):
    """
    Read-through cache over another probe.

    The asset library does not change at runtime, so there is no
    eviction. Inconclusive answers are not cached.
    """

    def __init__(self, inner: AssetProbe):
        self.inner = inner
        self.cache: Dict[str, bool] = {}

    async def check(self, identifier: str) -> Optional[bool]:
        if identifier in self.cache:
            return self.cache[identifier]
        result = await self.inner.check(identifier)
        if result is not None:
            self.cache[identifier] = result
        return result

    def clear(self) -> None:
        self.cache.clear()
