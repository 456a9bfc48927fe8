"""Git data models: blobs and trees."""

from __future__ import annotations

from .base import GiteeModel


class Blob(GiteeModel):
    sha: str = ""
    size: int = 0
    url: str = ""
    content: str = ""
    encoding: str = ""


class TreeEntry(GiteeModel):
    path: str = ""
    mode: str = ""
    type: str = ""
    sha: str = ""
    size: int | None = None
    url: str = ""


class Tree(GiteeModel):
    sha: str = ""
    url: str = ""
    tree: list[TreeEntry] = []
    truncated: bool = False
