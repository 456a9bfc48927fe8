"""OAuth token models."""

from __future__ import annotations

from .base import GiteeModel


class AccessToken(GiteeModel):
    access_token: str = ""
    token_type: str = ""
    expires_in: int = 0
    refresh_token: str = ""
    scope: str = ""
    created_at: int = 0
