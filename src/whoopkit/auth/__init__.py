"""OAuth flows and token handling."""

from whoopkit.auth.mode import AuthMode, OAuthMode, StaticToken, current_access_token, refresh
from whoopkit.auth.scopes import ALL_SCOPES, Scope, ScopeSet, parse_scopes, render_scopes, validate_scopes
from whoopkit.auth.session import OAuthSession
from whoopkit.auth.tokens import TokenRecord, TokenStore

__all__ = [  # noqa: RUF022
    # Session
    "OAuthSession",
    # Tokens
    "TokenRecord",
    "TokenStore",
    # Modes
    "AuthMode",
    "OAuthMode",
    "StaticToken",
    "current_access_token",
    "refresh",
    # Scopes
    "ALL_SCOPES",
    "Scope",
    "ScopeSet",
    "parse_scopes",
    "render_scopes",
    "validate_scopes",
]
