from __future__ import annotations

import pytest

from stayledger.config import RecordApiConfig, ResilienceConfig, RetryPolicy


@pytest.fixture
def api_config() -> RecordApiConfig:
    return RecordApiConfig(
        base_url="https://console.test/api",
        token="secret-token",  # noqa: S106
        page_size=2,
        resilience=ResilienceConfig(
            name="records-test",
            retry=RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0),
        ),
    )
