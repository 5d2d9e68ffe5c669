import os
from typing import Generator

import pytest

from routekit import NetworkRouter, RouterConfig
from routekit._utils.constants import (
    ENV_DISABLE_SSL_VERIFY,
    ENV_FOLLOW_REDIRECTS,
    ENV_TIMEOUT,
)

_ROUTEKIT_ENV = (ENV_TIMEOUT, ENV_FOLLOW_REDIRECTS, ENV_DISABLE_SSL_VERIFY)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clean routekit environment variables around each test."""
    for name in _ROUTEKIT_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
    # .env files loaded during a test write straight into os.environ
    for name in _ROUTEKIT_ENV:
        os.environ.pop(name, None)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config() -> RouterConfig:
    return RouterConfig()


@pytest.fixture
def router(config: RouterConfig) -> Generator[NetworkRouter, None, None]:
    with NetworkRouter(config) as router:
        yield router
