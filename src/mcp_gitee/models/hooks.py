"""Webhook models."""

from __future__ import annotations

from datetime import datetime

from .base import GiteeModel


class Hook(GiteeModel):
    """A webhook registered on a repository.

    ``password`` is the shared secret Gitee sends with every delivery.
    """

    id: int
    url: str = ""
    created_at: datetime | None = None
    password: str = ""
    project_id: int = 0
    result: str = ""
    result_code: int = 0
    push_events: bool = False
    tag_push_events: bool = False
    issues_events: bool = False
    note_events: bool = False
    merge_requests_events: bool = False


class HookSpec(GiteeModel):
    """Caller-supplied webhook target; event subscriptions are fixed by the client."""

    url: str
    secret: str = ""
