"""Gitee client and MCP server configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://gitee.com/api"
DEFAULT_OAUTH_URL = "https://gitee.com"


@dataclass
class GiteeConfig:
    """Configuration for the Gitee client, loaded from environment variables.

    ``url`` is the API host every repository call goes to; ``oauth_url`` is the
    OAuth authority used only for token refresh. They are kept apart because
    Gitee serves them from different roots.
    """

    url: str = DEFAULT_API_URL
    oauth_url: str = DEFAULT_OAUTH_URL
    token: str = ""
    read_only: bool = False
    timeout: int = 30
    ssl_verify: bool = True

    @classmethod
    def from_env(cls) -> GiteeConfig:
        url = (os.getenv("GITEE_URL") or DEFAULT_API_URL).rstrip("/")
        oauth_url = (os.getenv("GITEE_OAUTH_URL") or DEFAULT_OAUTH_URL).rstrip("/")
        token = os.getenv("GITEE_TOKEN") or os.getenv("GITEE_ACCESS_TOKEN", "")
        read_only = os.getenv("GITEE_READ_ONLY", "false").lower() in (
            "true",
            "1",
            "yes",
        )
        timeout = int(os.getenv("GITEE_TIMEOUT", "30"))
        ssl_verify = os.getenv("GITEE_SSL_VERIFY", "true").lower() not in (
            "false",
            "0",
            "no",
        )

        return cls(
            url=url,
            oauth_url=oauth_url,
            token=token,
            read_only=read_only,
            timeout=timeout,
            ssl_verify=ssl_verify,
        )

    @property
    def api_url(self) -> str:
        return self.url.rstrip("/")

    @property
    def oauth_base_url(self) -> str:
        return self.oauth_url.rstrip("/")

    def validate(self, *, require_token: bool = True) -> None:
        if not self.url:
            msg = "GITEE_URL must not be empty"
            raise ValueError(msg)
        if not self.oauth_url:
            msg = "GITEE_OAUTH_URL must not be empty"
            raise ValueError(msg)
        if require_token and not self.token:
            msg = "Gitee token is required. Set one of: GITEE_TOKEN or GITEE_ACCESS_TOKEN"
            raise ValueError(msg)
