import threading

from pydantic import BaseModel, ConfigDict

from whoopkit.auth.scopes import ScopeSet, parse_scopes


class TokenRecord(BaseModel):
    """Token endpoint response.

    ``expires_in`` is kept as reported by the server and is never compared
    against the clock; a stale token is only discovered when an API call
    answers 401.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str
    token_type: str
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None

    @property
    def granted_scopes(self) -> ScopeSet:
        return parse_scopes(self.scope)


class TokenStore:
    """Holds the current ``TokenRecord`` for concurrent readers.

    The record is swapped as a whole under the lock, so a reader never sees
    an access token and a refresh token from different generations. The lock
    is only taken for the in-memory read or swap and never across I/O.
    """

    def __init__(self, record: TokenRecord) -> None:
        self._lock = threading.Lock()
        self._record = record

    def snapshot(self) -> TokenRecord:
        with self._lock:
            return self._record

    @property
    def access_token(self) -> str:
        with self._lock:
            return self._record.access_token

    @property
    def refresh_token(self) -> str | None:
        with self._lock:
            return self._record.refresh_token

    def replace(self, record: TokenRecord) -> None:
        with self._lock:
            self._record = record
