"""Record API configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

RECORD_API_BASE_URL_VAR: Final[str] = "STAYLEDGER_API_BASE_URL"
RECORD_API_TOKEN_VAR: Final[str] = "STAYLEDGER_API_TOKEN"  # noqa: S105
RECORD_API_PAGE_SIZE_VAR: Final[str] = "STAYLEDGER_API_PAGE_SIZE"
RECORD_API_TIMEOUT_SECONDS = 15.0
RECORD_API_MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class RecordApiConfig:
    """Holds record API configuration values."""

    base_url: str
    resilience: ResilienceConfig
    token: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not 1 <= self.page_size <= RECORD_API_MAX_PAGE_SIZE:
            raise ConfigurationError(
                f"Page size must be between 1 and {RECORD_API_MAX_PAGE_SIZE}, "
                f"got {self.page_size}"
            )

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


def get_record_api_config(*, resilience: ResilienceConfig | None = None) -> RecordApiConfig:
    values = require_env_vars((RECORD_API_BASE_URL_VAR,))
    base_url = values[RECORD_API_BASE_URL_VAR].strip().rstrip("/")
    token = optional_env_var(RECORD_API_TOKEN_VAR)
    page_size = _parse_page_size(optional_env_var(RECORD_API_PAGE_SIZE_VAR))
    return RecordApiConfig(
        base_url=base_url,
        token=token,
        page_size=page_size,
        resilience=resilience
        or ResilienceConfig(
            name="records",
            base_url=base_url,
            timeout_seconds=RECORD_API_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        ),
    )


def _parse_page_size(value: str | None) -> int:
    if value is None:
        return DEFAULT_PAGE_SIZE
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {RECORD_API_PAGE_SIZE_VAR}: {value}") from exc
