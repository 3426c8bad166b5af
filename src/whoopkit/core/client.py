from collections.abc import AsyncIterator
from types import TracebackType
from typing import Self
from uuid import UUID

import httpx

from whoopkit.auth.mode import AuthMode, OAuthMode, StaticToken, current_access_token, refresh
from whoopkit.auth.session import OAuthSession
from whoopkit.auth.tokens import TokenRecord, TokenStore
from whoopkit.core.exceptions import ConfigurationError
from whoopkit.core.executor import RequestExecutor
from whoopkit.core.pagination import paginate
from whoopkit.core.settings import DEFAULT_BASE_URL, ClientSettings
from whoopkit.models.common import CycleQuery, RecoveryQuery, SleepQuery, WorkoutQuery
from whoopkit.models.cycle import Cycle, CycleCollection
from whoopkit.models.recovery import Recovery, RecoveryCollection
from whoopkit.models.sleep import Sleep, SleepCollection
from whoopkit.models.user import UserBasicProfile, UserBodyMeasurement
from whoopkit.models.workout import Workout, WorkoutCollection


class WhoopClient:
    """Async client for the WHOOP developer API (v2).

    The authentication mode is fixed at construction: either a static bearer
    token, or an OAuth session with a refreshable token record. Calls never
    refresh on their own; when one raises ``AuthenticationError`` the caller
    decides whether to ``await client.refresh_token()`` and try again.

    Example:
        >>> async with WhoopClient("access-token") as client:
        ...     profile = await client.get_profile_basic()
        ...     page = await client.list_cycles(CycleQuery(limit=5))
    """

    def __init__(
        self,
        auth: AuthMode | str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._auth: AuthMode = StaticToken(auth) if isinstance(auth, str) else auth
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient()
        self._executor = RequestExecutor(self._http_client, base_url, self._current_token)

    @classmethod
    def with_oauth(
        cls,
        session: OAuthSession,
        token: TokenRecord,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        return cls(
            OAuthMode(session=session, store=TokenStore(token)),
            base_url=base_url,
            http_client=http_client,
        )

    @classmethod
    async def from_authorization_code(
        cls,
        session: OAuthSession,
        code: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        token = await session.exchange_code(code)
        return cls.with_oauth(session, token, base_url=base_url, http_client=http_client)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        settings = settings or ClientSettings()
        if settings.access_token is None:
            msg = "WHOOP_ACCESS_TOKEN is not set"
            raise ConfigurationError(msg)
        return cls(
            settings.access_token.get_secret_value(),
            base_url=settings.base_url,
            http_client=http_client,
        )

    @property
    def auth(self) -> AuthMode:
        return self._auth

    @property
    def access_token(self) -> str:
        return current_access_token(self._auth)

    async def refresh_token(self) -> None:
        await refresh(self._auth)

    def _current_token(self) -> str:
        return current_access_token(self._auth)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # Cycles

    async def get_cycle(self, cycle_id: int) -> Cycle:
        request = self._executor.build("GET", f"/v2/cycle/{cycle_id}")
        return await self._executor.execute(request, Cycle)

    async def list_cycles(self, query: CycleQuery | None = None) -> CycleCollection:
        request = self._executor.build("GET", "/v2/cycle", query)
        return await self._executor.execute(request, CycleCollection)

    def iter_cycles(self, query: CycleQuery | None = None) -> AsyncIterator[Cycle]:
        return paginate(self.list_cycles, query)

    async def get_sleep_for_cycle(self, cycle_id: int) -> Sleep:
        request = self._executor.build("GET", f"/v2/cycle/{cycle_id}/sleep")
        return await self._executor.execute(request, Sleep)

    async def get_recovery_for_cycle(self, cycle_id: int) -> Recovery:
        request = self._executor.build("GET", f"/v2/cycle/{cycle_id}/recovery")
        return await self._executor.execute(request, Recovery)

    # Recovery

    async def list_recoveries(self, query: RecoveryQuery | None = None) -> RecoveryCollection:
        request = self._executor.build("GET", "/v2/recovery", query)
        return await self._executor.execute(request, RecoveryCollection)

    def iter_recoveries(self, query: RecoveryQuery | None = None) -> AsyncIterator[Recovery]:
        return paginate(self.list_recoveries, query)

    # Sleep

    async def get_sleep(self, sleep_id: UUID) -> Sleep:
        request = self._executor.build("GET", f"/v2/activity/sleep/{sleep_id}")
        return await self._executor.execute(request, Sleep)

    async def list_sleeps(self, query: SleepQuery | None = None) -> SleepCollection:
        request = self._executor.build("GET", "/v2/activity/sleep", query)
        return await self._executor.execute(request, SleepCollection)

    def iter_sleeps(self, query: SleepQuery | None = None) -> AsyncIterator[Sleep]:
        return paginate(self.list_sleeps, query)

    # User

    async def get_profile_basic(self) -> UserBasicProfile:
        request = self._executor.build("GET", "/v2/user/profile/basic")
        return await self._executor.execute(request, UserBasicProfile)

    async def get_body_measurement(self) -> UserBodyMeasurement:
        request = self._executor.build("GET", "/v2/user/measurement/body")
        return await self._executor.execute(request, UserBodyMeasurement)

    async def revoke_access(self) -> None:
        request = self._executor.build("DELETE", "/v2/user/access")
        await self._executor.execute_no_content(request)

    # Workouts

    async def get_workout(self, workout_id: UUID) -> Workout:
        request = self._executor.build("GET", f"/v2/activity/workout/{workout_id}")
        return await self._executor.execute(request, Workout)

    async def list_workouts(self, query: WorkoutQuery | None = None) -> WorkoutCollection:
        request = self._executor.build("GET", "/v2/activity/workout", query)
        return await self._executor.execute(request, WorkoutCollection)

    def iter_workouts(self, query: WorkoutQuery | None = None) -> AsyncIterator[Workout]:
        return paginate(self.list_workouts, query)
