"""Tests for building the content version and champion table."""

from __future__ import annotations

import httpx
import pytest

from application.services import VersionRegistry
from domain.errors import ConfigurationGap, RegistryInitError
from infrastructure.api import EndpointRateLimiter, RiotAPIClient
from infrastructure.api.rate_limiter import WindowConfig

from conftest import make_champion_catalog


def _client(handler) -> RiotAPIClient:
    return RiotAPIClient(
        "test-key",
        transport=httpx.MockTransport(handler),
        rate_limiter=EndpointRateLimiter(WindowConfig(1000, 1000)),
        ddragon_url="https://ddragon.test",
        ddragon_lang="en_US",
    )


def _ddragon(versions=("14.12.1", "14.11.1"), catalog=None, catalog_status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/api/versions.json":
            return httpx.Response(200, json=list(versions))
        if path == f"/cdn/{versions[0]}/data/en_US/champion.json":
            return httpx.Response(catalog_status, json=catalog or make_champion_catalog(versions[0]))
        return httpx.Response(404)

    return handler


async def test_initialize_builds_table_from_latest_version():
    async with _client(_ddragon()) as client:
        registry = VersionRegistry(client)
        table = await registry.initialize()

    assert table.version == "14.12.1"
    assert table.champion_name(266) == "Aatrox"
    assert table.require_champion(62) == "MonkeyKing"
    assert table.champion_image_url("Aatrox") == "https://ddragon.test/cdn/14.12.1/img/champion/Aatrox.png"
    assert registry.table is table


async def test_table_is_read_only():
    async with _client(_ddragon()) as client:
        table = await VersionRegistry(client).initialize()

    with pytest.raises(TypeError):
        table.champions[1] = "Annie"
    with pytest.raises(ConfigurationGap):
        table.require_champion(1)


async def test_initialize_runs_once():
    calls = []
    handler = _ddragon()

    def counting(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return handler(request)

    async with _client(counting) as client:
        registry = VersionRegistry(client)
        first = await registry.initialize()
        second = await registry.initialize()

    assert first is second
    assert len(calls) == 2


def test_table_before_initialize_fails_loudly():
    registry = VersionRegistry(RiotAPIClient("k"))
    with pytest.raises(RegistryInitError):
        registry.table


async def test_upstream_failure_is_registry_init_error():
    async with _client(_ddragon(catalog_status=503)) as client:
        with pytest.raises(RegistryInitError):
            await VersionRegistry(client).initialize()


async def test_invalid_catalog_is_registry_init_error():
    catalog = make_champion_catalog()
    catalog["data"]["Aatrox"]["key"] = 266
    async with _client(_ddragon(catalog=catalog)) as client:
        with pytest.raises(RegistryInitError):
            await VersionRegistry(client).initialize()


async def test_empty_version_list_is_registry_init_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    async with _client(handler) as client:
        with pytest.raises(RegistryInitError):
            await VersionRegistry(client).initialize()
