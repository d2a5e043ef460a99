"""Client settings loaded from explicit options and environment variables."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.scrapebadger.com"
DEFAULT_TIMEOUT = 30.0  # seconds
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0  # seconds

API_KEY_ENV_VAR = "SCRAPEBADGER_API_KEY"


class Settings(BaseSettings):
    """Environment-backed settings (``SCRAPEBADGER_*`` variables)."""

    model_config = SettingsConfigDict(
        env_prefix="SCRAPEBADGER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Credential fallback
    api_key: str | None = None

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None


class ResolvedConfig(BaseModel):
    """
    Immutable configuration used by the HTTP client.

    Durations are expressed in seconds.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, description="API key sent with every request")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Per-attempt timeout")
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0, description="Retries after the first attempt")
    retry_delay: float = Field(default=DEFAULT_RETRY_DELAY, ge=0, description="Base backoff delay")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v:
            raise ValueError("Base URL cannot be empty")
        return v.rstrip("/")


def get_api_key_from_env(settings: Settings | None = None) -> str | None:
    """Read the API key from ``SCRAPEBADGER_API_KEY``."""
    settings = settings or Settings()
    return settings.api_key or None


def resolve_config(
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    max_retries: int | None = None,
    retry_delay: float | None = None,
    *,
    settings: Settings | None = None,
) -> ResolvedConfig:
    """
    Merge explicit options with defaults and the environment credential.

    Args:
        api_key: Explicit API key (wins over the environment)
        base_url: API base URL
        timeout: Per-attempt timeout in seconds
        max_retries: Number of retries after the first attempt
        retry_delay: Base delay in seconds for exponential backoff
        settings: Settings used as the environment source (built from
            the process environment when omitted)

    Returns:
        ResolvedConfig

    Raises:
        ValueError: If no API key is available or an option is invalid
    """
    key = api_key if api_key is not None else get_api_key_from_env(settings)
    if not key:
        raise ValueError(
            f"API key is required. Pass api_key or set the {API_KEY_ENV_VAR} environment variable."
        )

    return ResolvedConfig(
        api_key=key,
        base_url=base_url if base_url is not None else DEFAULT_BASE_URL,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        max_retries=max_retries if max_retries is not None else DEFAULT_MAX_RETRIES,
        retry_delay=retry_delay if retry_delay is not None else DEFAULT_RETRY_DELAY,
    )
