"""Identity blocks shared by commit and compare payloads."""

from __future__ import annotations

from datetime import datetime

from .base import GiteeModel


class CommitIdentity(GiteeModel):
    name: str = ""
    email: str = ""
    date: datetime | None = None


class UserBasic(GiteeModel):
    id: int = 0
    login: str = ""
    name: str = ""
    avatar_url: str = ""
    url: str = ""
    html_url: str = ""
    remark: str = ""
    followers_url: str = ""
    following_url: str = ""
    gists_url: str = ""
    starred_url: str = ""
    subscriptions_url: str = ""
    organizations_url: str = ""
    repos_url: str = ""
    events_url: str = ""
    received_events_url: str = ""
    type: str = ""
