from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTH_URL = "https://api.prod.whoop.com/oauth/oauth2/auth"
DEFAULT_TOKEN_URL = "https://api.prod.whoop.com/oauth/oauth2/token"  # noqa: S105
DEFAULT_BASE_URL = "https://api.prod.whoop.com/developer"


class OAuthSettings(BaseSettings):
    """OAuth client credentials loaded from the environment.

    Environment variables are prefixed with WHOOP_.
    Example: WHOOP_CLIENT_ID=abc WHOOP_CLIENT_SECRET=xyz WHOOP_REDIRECT_URI=http://localhost:8080/callback
    """

    model_config = SettingsConfigDict(
        env_prefix="WHOOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    client_id: str
    client_secret: SecretStr
    redirect_uri: str
    auth_url: str = Field(default=DEFAULT_AUTH_URL)
    token_url: str = Field(default=DEFAULT_TOKEN_URL)

    @field_validator("client_id", "redirect_uri")
    @classmethod
    def validate_non_empty(cls, v: str, info) -> str:  # noqa: ANN001
        if not v or not v.strip():
            msg = f"{info.field_name} must be a non-empty string"
            raise ValueError(msg)
        return v.strip()

    @field_validator("client_secret")
    @classmethod
    def validate_secret_non_empty(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            msg = "client_secret must be a non-empty string"
            raise ValueError(msg)
        return v


class ClientSettings(BaseSettings):
    """API client settings.

    Environment variables are prefixed with WHOOP_.
    Example: WHOOP_ACCESS_TOKEN=... WHOOP_BASE_URL=https://api.prod.whoop.com/developer
    """

    model_config = SettingsConfigDict(
        env_prefix="WHOOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL)
    access_token: SecretStr | None = Field(default=None)
