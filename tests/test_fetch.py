import asyncio

import httpx
import pytest

from interlinear.config import InterlinearSettings
from interlinear.exceptions import FetchError
from interlinear.fetch import FileFetcher, HttpFetcher, build_fetch_options
from interlinear.models import FetchOptions


def test_build_fetch_options_defaults_to_force_cache():
    options = build_fetch_options()
    assert options.cache == "force-cache"
    assert options.headers == {}
    assert options.extra == {}


def test_build_fetch_options_merges_headers_and_keeps_explicit_cache():
    options = build_fetch_options(
        {"headers": {"Accept": "text/plain", "X-Base": "1"}, "cache": "no-store", "credentials": "omit"},
        {"X-Base": "2", "Authorization": "Bearer t"},
    )
    assert options.headers == {"Accept": "text/plain", "X-Base": "2", "Authorization": "Bearer t"}
    assert options.cache == "no-store"
    assert options.extra == {"credentials": "omit"}


def test_build_fetch_options_does_not_mutate_base():
    base = {"headers": {"A": "1"}}
    build_fetch_options(base, {"B": "2"})
    assert base == {"headers": {"A": "1"}}


def _mock_fetcher(handler) -> HttpFetcher:
    return HttpFetcher(settings=InterlinearSettings(), transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_http_fetcher_returns_response():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="Hello.\n\nWorld.")

    async with _mock_fetcher(handler) as fetcher:
        response = await fetcher.fetch(
            "https://docs.example.com/guide_en.md",
            FetchOptions(headers={"X-Token": "abc"}, cache="no-store"),
        )

    assert response.ok
    assert response.status_code == 200
    assert response.text == "Hello.\n\nWorld."
    assert seen[0].headers["X-Token"] == "abc"
    assert seen[0].headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_http_fetcher_force_cache_sends_no_cache_control():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="ok")

    async with _mock_fetcher(handler) as fetcher:
        await fetcher.fetch("https://docs.example.com/a_en.md", FetchOptions(cache="force-cache"))

    assert "Cache-Control" not in seen[0].headers


@pytest.mark.asyncio
async def test_http_fetcher_reports_status_without_raising():
    async with _mock_fetcher(lambda request: httpx.Response(404)) as fetcher:
        response = await fetcher.fetch("https://docs.example.com/missing_en.md")

    assert not response.ok
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_http_fetcher_wraps_transport_errors():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _mock_fetcher(handler) as fetcher:
        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("https://docs.example.com/guide_en.md")

    assert exc_info.value.url == "https://docs.example.com/guide_en.md"
    assert not exc_info.value.is_not_found


@pytest.mark.asyncio
async def test_http_fetcher_leaves_external_client_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, text="x")))
    fetcher = HttpFetcher(settings=InterlinearSettings(), client=client)

    async with fetcher:
        await fetcher.fetch("https://docs.example.com/a_en.md")

    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_file_fetcher_reads_relative_and_file_urls(tmp_path):
    (tmp_path / "guide_en.md").write_text("Hello.", encoding="utf-8")
    fetcher = FileFetcher(tmp_path)

    relative = await fetcher.fetch("guide_en.md")
    rooted = await fetcher.fetch("/guide_en.md")
    file_url = await fetcher.fetch((tmp_path / "guide_en.md").as_uri())

    assert relative.ok and relative.text == "Hello."
    assert rooted.text == "Hello."
    assert file_url.text == "Hello."


@pytest.mark.asyncio
async def test_file_fetcher_missing_file_is_not_found(tmp_path):
    response = await FileFetcher(tmp_path).fetch("missing_en.md")
    assert response.status_code == 404
    assert not response.ok


@pytest.mark.asyncio
async def test_file_fetcher_rejects_remote_urls(tmp_path):
    with pytest.raises(FetchError):
        await FileFetcher(tmp_path).fetch("https://docs.example.com/guide_en.md")


@pytest.mark.asyncio
async def test_http_fetcher_forwards_request_options():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="ok")

    async with _mock_fetcher(handler) as fetcher:
        response = await fetcher.fetch(
            "https://docs.example.com/a_en.md",
            FetchOptions(extra={"params": {"v": "2"}, "credentials": "omit"}),
        )

    assert response.ok
    assert seen[0].url.params["v"] == "2"


def test_http_fetcher_keeps_one_client_per_event_loop():
    fetcher = _mock_fetcher(lambda request: httpx.Response(200, text="ok"))

    async def fetch_once():
        response = await fetcher.fetch("https://docs.example.com/a_en.md")
        return response, fetcher.client

    first_response, first_client = asyncio.run(fetch_once())
    second_response, second_client = asyncio.run(fetch_once())

    assert first_response.ok and second_response.ok
    assert first_client is not None
    assert first_client is not second_client


@pytest.mark.asyncio
async def test_http_fetcher_aclose_releases_loop_client():
    fetcher = _mock_fetcher(lambda request: httpx.Response(200, text="ok"))

    await fetcher.fetch("https://docs.example.com/a_en.md")
    client = fetcher.client
    await fetcher.aclose()

    assert client.is_closed
    assert fetcher.client is None


@pytest.mark.asyncio
async def test_file_fetcher_honours_encoding_option(tmp_path):
    (tmp_path / "guide_en.md").write_bytes("Caf\xe9.".encode("latin-1"))
    fetcher = FileFetcher(tmp_path)

    default = await fetcher.fetch("guide_en.md")
    latin = await fetcher.fetch("guide_en.md", FetchOptions(extra={"encoding": "latin-1"}))

    assert default.status_code == 500
    assert latin.ok
    assert latin.text == "Caf\xe9."
