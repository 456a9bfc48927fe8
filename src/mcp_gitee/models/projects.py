"""Repository listing models."""

from __future__ import annotations

from .base import GiteeModel


class Project(GiteeModel):
    id: int
    name: str = ""
    default_branch: str | None = None
    full_name: str = ""
    path: str = ""
    html_url: str = ""
    private: bool = False
