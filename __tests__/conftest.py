from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest

from whoopkit.auth.scopes import Scope
from whoopkit.auth.session import OAuthSession
from whoopkit.auth.tokens import TokenRecord
from whoopkit.core.settings import OAuthSettings


@pytest.fixture
def oauth_settings() -> OAuthSettings:
    return OAuthSettings(
        client_id="test-client-id",
        client_secret="test-client-secret",  # noqa: S106
        redirect_uri="http://localhost:8080/callback",
    )


@pytest.fixture
def oauth_session(oauth_settings: OAuthSettings) -> OAuthSession:
    return OAuthSession(oauth_settings, scopes={Scope.READ_PROFILE, Scope.READ_CYCLES, Scope.OFFLINE})


@pytest.fixture
def token_record() -> TokenRecord:
    return TokenRecord(
        access_token="access-1",  # noqa: S106
        token_type="bearer",  # noqa: S106
        expires_in=3600,
        refresh_token="refresh-1",  # noqa: S106
        scope="read:profile read:cycles offline",
    )


@pytest.fixture
def token_payload() -> dict[str, Any]:
    return {
        "access_token": "access-2",
        "token_type": "bearer",
        "expires_in": 3600,
        "refresh_token": "refresh-2",
        "scope": "read:profile read:cycles offline",
    }


@pytest.fixture
def cycle_payload() -> dict[str, Any]:
    return {
        "id": 93845,
        "user_id": 10129,
        "created_at": "2022-04-24T11:25:44.774Z",
        "updated_at": "2022-04-24T14:25:44.774Z",
        "start": "2022-04-24T02:25:44.774Z",
        "end": "2022-04-24T10:25:44.774Z",
        "timezone_offset": "-05:00",
        "score_state": "SCORED",
        "score": {
            "strain": 5.2951527,
            "kilojoule": 8288.297,
            "average_heart_rate": 68,
            "max_heart_rate": 141,
        },
    }


@pytest.fixture
def sleep_payload() -> dict[str, Any]:
    return {
        "id": "ecfc6a15-4661-442f-a9a4-f160dd7afae8",
        "cycle_id": 93845,
        "v1_id": 93845,
        "user_id": 10129,
        "created_at": "2022-04-24T11:25:44.774Z",
        "updated_at": "2022-04-24T14:25:44.774Z",
        "start": "2022-04-24T02:25:44.774Z",
        "end": "2022-04-24T10:25:44.774Z",
        "timezone_offset": "-05:00",
        "nap": False,
        "score_state": "SCORED",
        "score": {
            "stage_summary": {
                "total_in_bed_time_milli": 30272735,
                "total_awake_time_milli": 1403507,
                "total_no_data_time_milli": 0,
                "total_light_sleep_time_milli": 14905851,
                "total_slow_wave_sleep_time_milli": 6630370,
                "total_rem_sleep_time_milli": 5879573,
                "sleep_cycle_count": 3,
                "disturbance_count": 12,
            },
            "sleep_needed": {
                "baseline_milli": 27395716,
                "need_from_sleep_debt_milli": 352230,
                "need_from_recent_strain_milli": 208595,
                "need_from_recent_nap_milli": -12312,
            },
            "respiratory_rate": 16.11328125,
            "sleep_performance_percentage": 98,
            "sleep_consistency_percentage": 90,
            "sleep_efficiency_percentage": 91.69533848,
        },
    }


@pytest.fixture
def recovery_payload() -> dict[str, Any]:
    return {
        "cycle_id": 93845,
        "sleep_id": "123e4567-e89b-12d3-a456-426614174000",
        "user_id": 10129,
        "created_at": "2022-04-24T11:25:44.774Z",
        "updated_at": "2022-04-24T14:25:44.774Z",
        "score_state": "PENDING_SCORE",
    }


@pytest.fixture
def workout_payload() -> dict[str, Any]:
    return {
        "id": "ecfc6a15-4661-442f-a9a4-f160dd7afae8",
        "v1_id": 1043,
        "user_id": 9012,
        "created_at": "2022-04-24T11:25:44.774Z",
        "updated_at": "2022-04-24T14:25:44.774Z",
        "start": "2022-04-24T02:25:44.774Z",
        "end": "2022-04-24T10:25:44.774Z",
        "timezone_offset": "-05:00",
        "sport_name": "running",
        "score_state": "SCORED",
        "sport_id": 1,
        "score": {
            "strain": 8.2463,
            "average_heart_rate": 123,
            "max_heart_rate": 146,
            "kilojoule": 1569.34033203125,
            "percent_recorded": 100,
            "distance_meter": 1772.77035916,
            "altitude_gain_meter": 46.64384460449,
            "altitude_change_meter": -0.781372010707855,
            "zone_durations": {
                "zone_zero_milli": 300000,
                "zone_one_milli": 600000,
                "zone_two_milli": 900000,
                "zone_three_milli": 900000,
                "zone_four_milli": 600000,
                "zone_five_milli": 300000,
            },
        },
    }


class _RawStream(httpx.AsyncByteStream):
    def __init__(self, content: bytes) -> None:
        self._content = content

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield self._content


@pytest.fixture
def corrupt_gzip_response() -> httpx.Response:
    """A 2xx response whose body claims gzip encoding but is not gzip."""
    return httpx.Response(200, stream=_RawStream(b"not-gzip"), headers={"Content-Encoding": "gzip"})
