from datetime import datetime, timezone

import pytest

from basic_token import TokenConfig, TokenEngine


@pytest.fixture
def config() -> TokenConfig:
    return TokenConfig(secret_key="unit-secret")


@pytest.fixture
def engine(config: TokenConfig) -> TokenEngine:
    return TokenEngine(config)


@pytest.fixture
def t0() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
