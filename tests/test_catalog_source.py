"""Tests for asynchronous catalog loading."""

import json

import httpx
import pytest

from shopfront.shared.domain.catalog import default_catalog
from shopfront.shared.infrastructure.catalog_source import (
    CatalogLoadError,
    CatalogLoadState,
    CatalogSource,
    LoadStatus,
    parse_catalog,
)

RECORDS = [
    {"id": "a", "title": "Alpha", "price": 30, "image": ""},
    {"id": "b", "title": "Bravo", "price": 60, "image": ""},
]


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_load_state_constructors():
    catalog = default_catalog()

    assert CatalogLoadState.loading().status is LoadStatus.LOADING
    assert not CatalogLoadState.loading().is_terminal
    loaded = CatalogLoadState.loaded(catalog)
    assert loaded.status is LoadStatus.LOADED and loaded.catalog is catalog and loaded.is_terminal
    failed = CatalogLoadState.failed("boom")
    assert failed.status is LoadStatus.FAILED and failed.error == "boom" and failed.catalog is None


def test_parse_catalog_accepts_array_and_wrapper():
    assert parse_catalog(RECORDS).ids == ("a", "b")
    assert parse_catalog({"products": RECORDS}).ids == ("a", "b")


@pytest.mark.parametrize(
    "data",
    [
        "not a list",
        {"items": RECORDS},
        [{"id": "a", "title": "A", "price": "30"}],
        RECORDS + [RECORDS[0]],
    ],
)
def test_parse_catalog_rejects_bad_data(data):
    with pytest.raises(CatalogLoadError):
        parse_catalog(data)


@pytest.mark.asyncio
async def test_builtin_source_when_nothing_configured():
    source = CatalogSource(None)

    state = await source.load()

    assert source.label == "builtin"
    assert state.status is LoadStatus.LOADED
    assert state.catalog == default_catalog()


@pytest.mark.asyncio
async def test_file_source(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")

    catalog = await CatalogSource(str(path)).fetch()

    assert catalog.ids == ("a", "b")


@pytest.mark.asyncio
async def test_missing_file_fails_without_raising(tmp_path):
    state = await CatalogSource(str(tmp_path / "nope.json")).load()

    assert state.status is LoadStatus.FAILED
    assert "not found" in state.error


@pytest.mark.asyncio
async def test_invalid_file_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("[oops", encoding="utf-8")

    with pytest.raises(CatalogLoadError):
        await CatalogSource(str(path)).fetch()


@pytest.mark.asyncio
async def test_undecodable_file_fails_without_raising(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_bytes(b'[{"id": "a", "title": "\xff", "price": 1}]')

    with pytest.raises(CatalogLoadError):
        await CatalogSource(str(path)).fetch()

    state = await CatalogSource(str(path)).load()
    assert state.status is LoadStatus.FAILED
    assert state.error


@pytest.mark.asyncio
async def test_url_source():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=RECORDS)

    async with _client(handler) as client:
        state = await CatalogSource("https://shop.example/catalog.json", client=client).load()

    assert requested == ["https://shop.example/catalog.json"]
    assert state.status is LoadStatus.LOADED
    assert [p.price for p in state.catalog] == [30, 60]


@pytest.mark.asyncio
async def test_url_http_error_becomes_failed_state():
    async with _client(lambda request: httpx.Response(503)) as client:
        state = await CatalogSource("https://shop.example/catalog.json", client=client).load()

    assert state.status is LoadStatus.FAILED
    assert "503" in state.error


@pytest.mark.asyncio
async def test_url_transport_error_raises_from_fetch():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(CatalogLoadError, match="request failed"):
            await CatalogSource("http://shop.example/catalog.json", client=client).fetch()


@pytest.mark.asyncio
async def test_url_non_json_body():
    async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(CatalogLoadError, match="not valid JSON"):
            await CatalogSource("https://shop.example/catalog.json", client=client).fetch()


@pytest.mark.asyncio
async def test_url_with_duplicate_ids_fails():
    async with _client(lambda request: httpx.Response(200, json=RECORDS + RECORDS)) as client:
        state = await CatalogSource("https://shop.example/catalog.json", client=client).load()

    assert state.status is LoadStatus.FAILED
    assert "duplicate" in state.error
