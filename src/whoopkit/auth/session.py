import logging
from collections.abc import Iterable

import httpx
from pydantic import ValidationError

from whoopkit.auth.scopes import ALL_SCOPES, Scope, ScopeSet, render_scopes
from whoopkit.auth.tokens import TokenRecord
from whoopkit.core.exceptions import AuthenticationError, SerializationError, TransportError
from whoopkit.core.settings import OAuthSettings
from whoopkit.utils.http import read_text
from whoopkit.utils.urls import with_query

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


class OAuthSession:
    """WHOOP OAuth2 authorization-code and refresh-token flows.

    Every network call is single-shot: no retries, no backoff. Callers decide
    what to do with a failed exchange.

    Example:
        >>> session = OAuthSession(OAuthSettings(), scopes={Scope.READ_PROFILE, Scope.OFFLINE})
        >>> url = session.build_authorization_url(state=generate_state_token())
        >>> # ... user authorizes, callback receives ?code=...
        >>> token = await session.exchange_code(code)
    """

    def __init__(
        self,
        settings: OAuthSettings,
        scopes: Iterable[Scope] = ALL_SCOPES,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.scopes: ScopeSet = frozenset(scopes)
        self._http_client = http_client

    def build_authorization_url(self, state: str | None = None) -> str:
        """Build the URL the user is sent to in order to grant access.

        Args:
            state: Optional CSRF token echoed back on the redirect. Omitted from
                the URL when not given.

        Returns:
            Authorization URL with percent-encoded client id, redirect URI and
            space-joined scopes.
        """
        params = {
            "response_type": "code",
            "client_id": self.settings.client_id,
            "redirect_uri": self.settings.redirect_uri,
            "scope": render_scopes(self.scopes),
        }
        if state is not None:
            params["state"] = state

        return with_query(self.settings.auth_url, params)

    async def exchange_code(self, code: str) -> TokenRecord:
        """Exchange an authorization code for an access / refresh token pair.

        Raises:
            AuthenticationError: the token endpoint answered with a non-2xx status
            SerializationError: the token endpoint answered 2xx with an unexpected body
            TransportError: the token endpoint could not be reached
        """
        logger.debug("exchanging authorization code at %s", self.settings.token_url)
        return await self._request_token(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.settings.redirect_uri,
                "client_id": self.settings.client_id,
                "client_secret": self.settings.client_secret.get_secret_value(),
            },
        )

    async def refresh(self, refresh_token: str) -> TokenRecord:
        """Mint a new token record from a refresh token.

        Same error contract as ``exchange_code``.
        """
        logger.debug("refreshing access token at %s", self.settings.token_url)
        return await self._request_token(
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
                "client_id": self.settings.client_id,
                "client_secret": self.settings.client_secret.get_secret_value(),
            },
        )

    async def _request_token(self, form: dict[str, str]) -> TokenRecord:
        if self._http_client is not None:
            return await self._post_form(self._http_client, form)

        async with httpx.AsyncClient() as client:
            return await self._post_form(client, form)

    async def _post_form(self, client: httpx.AsyncClient, form: dict[str, str]) -> TokenRecord:
        try:
            async with client.stream("POST", self.settings.token_url, data=form) as response:
                if response.is_success:
                    await response.aread()
                    return _decode_token(response.content)
                body = await read_text(response)
        except httpx.DecodingError as e:
            msg = "invalid token response"
            raise SerializationError(msg) from e
        except httpx.TransportError as e:
            msg = "oauth token request failed"
            raise TransportError(msg) from e

        logger.debug("oauth token request rejected with status %s", response.status_code)
        raise AuthenticationError(body or UNKNOWN_ERROR, response.status_code)


def _decode_token(content: bytes) -> TokenRecord:
    try:
        return TokenRecord.model_validate_json(content)
    except ValidationError as e:
        msg = "invalid token response"
        raise SerializationError(msg) from e
