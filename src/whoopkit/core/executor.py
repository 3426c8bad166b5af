import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from http import HTTPStatus

import httpx
from pydantic import BaseModel, ValidationError

from whoopkit.core.exceptions import SerializationError, TransportError, error_from_status
from whoopkit.models.common import QueryFilter
from whoopkit.utils.http import read_text
from whoopkit.utils.urls import join_url

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Builds bearer-authenticated requests and turns responses into models or errors.

    The access token is read once, when the request is built. A request that is
    sent again later still carries the token it was built with.

    Attributes:
        base_url: API root that request paths are appended to
        token_provider: Returns the access token to attach to the next built request
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        token_provider: Callable[[], str],
    ) -> None:
        self._http_client = http_client
        self.base_url = base_url
        self.token_provider = token_provider

    def build(self, method: str, path: str, params: QueryFilter | None = None) -> httpx.Request:
        return self._http_client.build_request(
            method,
            join_url(self.base_url, path),
            params=params.to_params() if params is not None else None,
            headers={"Authorization": f"Bearer {self.token_provider()}"},
        )

    async def execute[ModelT: BaseModel](self, request: httpx.Request, response_model: type[ModelT]) -> ModelT:
        """Send ``request`` and decode a 2xx body into ``response_model``.

        Raises:
            ApiError: the server answered with a non-2xx status (see ``error_from_status``)
            SerializationError: a 2xx body could not be decoded or did not match ``response_model``
            TransportError: no response could be obtained
        """
        async with self._send(request) as response:
            if response.is_success:
                content = await _read_body(response)
                try:
                    return response_model.model_validate_json(content)
                except ValidationError as e:
                    msg = f"unexpected response body for {response_model.__name__}"
                    raise SerializationError(msg) from e

            body = await read_text(response)

        raise error_from_status(response.status_code, body)

    async def execute_no_content(self, request: httpx.Request) -> None:
        """Send ``request`` and expect exactly ``204 No Content``.

        Any other status, other 2xx codes included, raises the mapped ``ApiError``.
        """
        async with self._send(request) as response:
            if response.status_code == HTTPStatus.NO_CONTENT:
                return
            body = await read_text(response)

        raise error_from_status(response.status_code, body)

    @asynccontextmanager
    async def _send(self, request: httpx.Request) -> AsyncIterator[httpx.Response]:
        try:
            response = await self._http_client.send(request, stream=True)
        except httpx.TransportError as e:
            msg = f"{request.method} {request.url.path} failed"
            raise TransportError(msg) from e

        logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
        try:
            yield response
        finally:
            await response.aclose()


async def _read_body(response: httpx.Response) -> bytes:
    try:
        return await response.aread()
    except httpx.DecodingError as e:
        msg = f"could not decode response body from {response.request.url.path}"
        raise SerializationError(msg) from e
    except httpx.TransportError as e:
        msg = f"reading response body from {response.request.url.path} failed"
        raise TransportError(msg) from e
