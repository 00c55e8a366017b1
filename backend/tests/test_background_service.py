"""Tests for the background service wiring."""
import httpx
import pytest

from chronoscape.config import Settings
from chronoscape.core.probe import CachingProbe, HttpAssetProbe, ManifestAssetProbe
from chronoscape.services import background_service
from chronoscape.services.background_service import BackgroundService


def test_directory_source(asset_dir):
    service = BackgroundService(
        Settings(asset_source="directory", asset_dir=str(asset_dir("default")))
    )
    assert isinstance(service.probe, ManifestAssetProbe)
    assert service.client is None


def test_directory_source_requires_dir():
    with pytest.raises(ValueError):
        BackgroundService(Settings(asset_source="directory"))


def test_http_source_is_cached_by_default():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(404)))
    service = BackgroundService(Settings(asset_source="http"), client=client)
    assert isinstance(service.probe, CachingProbe)
    assert isinstance(service.probe.inner, HttpAssetProbe)


def test_http_source_without_cache():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(404)))
    service = BackgroundService(Settings(asset_source="http", probe_cache=False), client=client)
    assert isinstance(service.probe, HttpAssetProbe)


@pytest.mark.asyncio
async def test_http_resolution_uses_cache():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request.url.path)
        if request.url.path == "/locations/19uk.jpg":
            return httpx.Response(200)
        return httpx.Response(404)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        service = BackgroundService(
            Settings(asset_source="http", asset_base_url="https://example.org"), client=client
        )
        assert await service.resolve("1850", "London") == "/locations/19uk.jpg"
        assert await service.resolve("1850", "London") == "/locations/19uk.jpg"

    assert requests == ["/locations/185uk.jpg", "/locations/185generic.jpg", "/locations/19uk.jpg"]


@pytest.mark.asyncio
async def test_settings_from_environment(monkeypatch, asset_dir, alias_file):
    monkeypatch.setenv("CHRONOSCAPE_ASSET_SOURCE", "directory")
    monkeypatch.setenv("CHRONOSCAPE_ASSET_DIR", str(asset_dir("19gondor")))
    monkeypatch.setenv("CHRONOSCAPE_ALIAS_TABLE_PATH", str(alias_file({"minas tirith": "gondor"})))

    try:
        assert await background_service.resolve("1850", "Minas Tirith") == "/locations/19gondor.jpg"
    finally:
        await background_service.shutdown()


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    service = BackgroundService(Settings(asset_source="http"))
    client = service.client
    assert client is not None
    await service.aclose()
    assert client.is_closed
    assert service.client is None


def test_settings_only_carry_used_fields():
    fields = set(Settings.model_fields)
    assert "environment" not in fields
    assert "debug" not in fields
    assert {"asset_source", "probe_timeout", "log_level"} <= fields
