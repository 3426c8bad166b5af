"""whoopkit - Typed async client for the WHOOP developer API."""

from whoopkit.auth import (
    ALL_SCOPES,
    AuthMode,
    OAuthMode,
    OAuthSession,
    Scope,
    ScopeSet,
    StaticToken,
    TokenRecord,
    TokenStore,
    parse_scopes,
    render_scopes,
    validate_scopes,
)
from whoopkit.core.client import WhoopClient
from whoopkit.core.exceptions import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    NotFoundError,
    RateLimitExceededError,
    SerializationError,
    ServerError,
    TransportError,
    UnknownApiError,
    WhoopError,
    error_from_status,
)
from whoopkit.core.executor import RequestExecutor
from whoopkit.core.pagination import paginate
from whoopkit.core.settings import ClientSettings, OAuthSettings
from whoopkit.models import (
    Cycle,
    CycleCollection,
    CycleQuery,
    QueryFilter,
    Recovery,
    RecoveryCollection,
    RecoveryQuery,
    ScoreState,
    Sleep,
    SleepCollection,
    SleepQuery,
    UserBasicProfile,
    UserBodyMeasurement,
    Workout,
    WorkoutCollection,
    WorkoutQuery,
)
from whoopkit.utils.crypto import generate_state_token

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    "__version__",
    # Client
    "WhoopClient",
    "RequestExecutor",
    "paginate",
    # Auth
    "OAuthSession",
    "TokenRecord",
    "TokenStore",
    "AuthMode",
    "OAuthMode",
    "StaticToken",
    # Scopes
    "ALL_SCOPES",
    "Scope",
    "ScopeSet",
    "parse_scopes",
    "render_scopes",
    "validate_scopes",
    # Settings
    "ClientSettings",
    "OAuthSettings",
    # Exceptions
    "WhoopError",
    "ConfigurationError",
    "TransportError",
    "SerializationError",
    "ApiError",
    "AuthenticationError",
    "BadRequestError",
    "NotFoundError",
    "RateLimitExceededError",
    "ServerError",
    "UnknownApiError",
    "error_from_status",
    # Models
    "Cycle",
    "CycleCollection",
    "CycleQuery",
    "QueryFilter",
    "Recovery",
    "RecoveryCollection",
    "RecoveryQuery",
    "ScoreState",
    "Sleep",
    "SleepCollection",
    "SleepQuery",
    "UserBasicProfile",
    "UserBodyMeasurement",
    "Workout",
    "WorkoutCollection",
    "WorkoutQuery",
    # Utils
    "generate_state_token",
]
