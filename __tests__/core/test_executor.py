from typing import Any

import httpx
import pytest
import respx

from whoopkit.auth.tokens import TokenRecord, TokenStore
from whoopkit.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    RateLimitExceededError,
    SerializationError,
    ServerError,
    TransportError,
    UnknownApiError,
)
from whoopkit.core.executor import RequestExecutor
from whoopkit.models.common import QueryFilter
from whoopkit.models.cycle import Cycle

BASE_URL = "https://api.example.test/developer"


@pytest.fixture
def store(token_record: TokenRecord) -> TokenStore:
    return TokenStore(token_record)


def _executor(client: httpx.AsyncClient, store: TokenStore) -> RequestExecutor:
    return RequestExecutor(client, BASE_URL, lambda: store.access_token)


@pytest.mark.asyncio
async def test_build_attaches_bearer_and_joins_path(store: TokenStore) -> None:
    async with httpx.AsyncClient() as client:
        request = _executor(client, store).build("GET", "/v2/cycle/1")

    assert request.method == "GET"
    assert str(request.url) == f"{BASE_URL}/v2/cycle/1"
    assert request.headers["Authorization"] == "Bearer access-1"


@pytest.mark.asyncio
async def test_build_reads_token_once(store: TokenStore) -> None:
    async with httpx.AsyncClient() as client:
        request = _executor(client, store).build("GET", "/v2/cycle/1")
        store.replace(TokenRecord(access_token="access-2", token_type="bearer"))  # noqa: S106

    assert request.headers["Authorization"] == "Bearer access-1"


@pytest.mark.asyncio
async def test_build_without_filter_has_no_query(store: TokenStore) -> None:
    async with httpx.AsyncClient() as client:
        request = _executor(client, store).build("GET", "/v2/cycle")

    assert request.url.query == b""


@pytest.mark.asyncio
async def test_build_with_limit_only(store: TokenStore) -> None:
    async with httpx.AsyncClient() as client:
        request = _executor(client, store).build("GET", "/v2/cycle", QueryFilter(limit=5))

    assert dict(request.url.params) == {"limit": "5"}


@pytest.mark.asyncio
async def test_build_with_cursor_uses_api_name(store: TokenStore) -> None:
    async with httpx.AsyncClient() as client:
        request = _executor(client, store).build("GET", "/v2/cycle", QueryFilter(next_token="MTIzOjEyMzEyMw"))

    assert dict(request.url.params) == {"nextToken": "MTIzOjEyMzEyMw"}


@pytest.mark.asyncio
@respx.mock
async def test_execute_decodes_success(store: TokenStore, cycle_payload: dict[str, Any]) -> None:
    respx.get(f"{BASE_URL}/v2/cycle/93845").mock(return_value=httpx.Response(200, json=cycle_payload))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        cycle = await executor.execute(executor.build("GET", "/v2/cycle/93845"), Cycle)

    assert isinstance(cycle, Cycle)
    assert cycle.id == 93845


@pytest.mark.asyncio
@respx.mock
async def test_execute_malformed_body(store: TokenStore) -> None:
    respx.get(f"{BASE_URL}/v2/cycle/1").mock(return_value=httpx.Response(200, json={"id": "not-a-number"}))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        with pytest.raises(SerializationError, match="unexpected response body for Cycle"):
            await executor.execute(executor.build("GET", "/v2/cycle/1"), Cycle)


@pytest.mark.asyncio
@respx.mock
async def test_execute_undecodable_body(store: TokenStore, corrupt_gzip_response: httpx.Response) -> None:
    respx.get(f"{BASE_URL}/v2/cycle/1").mock(return_value=corrupt_gzip_response)

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        with pytest.raises(SerializationError, match="could not decode response body from /developer/v2/cycle/1"):
            await executor.execute(executor.build("GET", "/v2/cycle/1"), Cycle)


@pytest.mark.parametrize(
    ("status_code", "body", "error_type", "message"),
    [
        (401, "bad", AuthenticationError, "bad"),
        (404, "gone", NotFoundError, "resource not found"),
        (429, "", RateLimitExceededError, "rate limit exceeded"),
        (503, "down", ServerError, "down"),
        (418, "short and stout", UnknownApiError, "short and stout"),
    ],
)
@pytest.mark.asyncio
@respx.mock
async def test_execute_maps_error_status(
    store: TokenStore,
    status_code: int,
    body: str,
    error_type: type[Exception],
    message: str,
) -> None:
    respx.get(f"{BASE_URL}/v2/cycle/1").mock(return_value=httpx.Response(status_code, text=body))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        with pytest.raises(error_type) as exc_info:
            await executor.execute(executor.build("GET", "/v2/cycle/1"), Cycle)

    assert str(exc_info.value) == message


@pytest.mark.asyncio
@respx.mock
async def test_execute_transport_error(store: TokenStore) -> None:
    respx.get(f"{BASE_URL}/v2/cycle/1").mock(side_effect=httpx.ConnectError("refused"))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        with pytest.raises(TransportError, match="GET /developer/v2/cycle/1 failed"):
            await executor.execute(executor.build("GET", "/v2/cycle/1"), Cycle)


@pytest.mark.asyncio
@respx.mock
async def test_execute_no_content_success(store: TokenStore) -> None:
    route = respx.delete(f"{BASE_URL}/v2/user/access").mock(return_value=httpx.Response(204))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        result = await executor.execute_no_content(executor.build("DELETE", "/v2/user/access"))

    assert result is None
    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_execute_no_content_rejects_200(store: TokenStore) -> None:
    respx.delete(f"{BASE_URL}/v2/user/access").mock(return_value=httpx.Response(200, json={}))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        with pytest.raises(UnknownApiError) as exc_info:
            await executor.execute_no_content(executor.build("DELETE", "/v2/user/access"))

    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
@respx.mock
async def test_execute_no_content_maps_errors(store: TokenStore) -> None:
    respx.delete(f"{BASE_URL}/v2/user/access").mock(return_value=httpx.Response(401, text="expired"))

    async with httpx.AsyncClient() as client:
        executor = _executor(client, store)
        with pytest.raises(AuthenticationError, match="expired"):
            await executor.execute_no_content(executor.build("DELETE", "/v2/user/access"))
