from dataclasses import dataclass
from typing import assert_never

from whoopkit.auth.session import OAuthSession
from whoopkit.auth.tokens import TokenStore
from whoopkit.core.exceptions import AuthenticationError


@dataclass(frozen=True, slots=True)
class StaticToken:
    access_token: str


@dataclass(frozen=True, slots=True, kw_only=True)
class OAuthMode:
    session: OAuthSession
    store: TokenStore


type AuthMode = StaticToken | OAuthMode


def current_access_token(mode: AuthMode) -> str:
    match mode:
        case StaticToken(access_token=access_token):
            return access_token
        case OAuthMode(store=store):
            return store.access_token
        case _:
            assert_never(mode)


async def refresh(mode: AuthMode) -> None:
    """Replace the stored token record using its refresh token.

    A no-op for static tokens. On failure the previous record is left in place
    and the error propagates. Two concurrent calls are not serialized against
    each other: both hit the token endpoint and the later replace wins.

    Raises:
        AuthenticationError: no refresh token is stored, or the token endpoint rejected it
    """
    match mode:
        case StaticToken():
            return
        case OAuthMode(session=session, store=store):
            refresh_token = store.refresh_token
            if refresh_token is None:
                msg = "no refresh token available"
                raise AuthenticationError(msg)

            record = await session.refresh(refresh_token)
            store.replace(record)
        case _:
            assert_never(mode)
