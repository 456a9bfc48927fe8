"""Shared test fixtures for mcp-gitee."""

from __future__ import annotations

import pytest
import respx

from mcp_gitee.client import GiteeClient
from mcp_gitee.config import GiteeConfig

API_URL = "https://gitee.com/api"
OAUTH_URL = "https://gitee.com"
TEST_TOKEN = "test-token"


@pytest.fixture
def config() -> GiteeConfig:
    return GiteeConfig(url=API_URL, oauth_url=OAUTH_URL, token=TEST_TOKEN)


@pytest.fixture
async def client(config: GiteeConfig):
    c = GiteeClient(config)
    try:
        yield c
    finally:
        await c.close()


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(base_url=API_URL) as router:
        yield router
