"""Commit and compare models."""

from __future__ import annotations

from .base import GiteeModel
from .common import CommitIdentity, UserBasic


class CommitDetail(GiteeModel):
    author: CommitIdentity | None = None
    committer: CommitIdentity | None = None
    message: str = ""


class RepoCommit(GiteeModel):
    url: str = ""
    sha: str = ""
    commit: CommitDetail | None = None


class TreeRef(GiteeModel):
    sha: str = ""
    url: str = ""


class CompareCommitDetail(CommitDetail):
    tree: TreeRef | None = None


class CommitParent(GiteeModel):
    sha: str = ""
    url: str = ""


class CompareCommit(GiteeModel):
    url: str = ""
    sha: str = ""
    html_url: str = ""
    comments_url: str = ""
    commit: CompareCommitDetail | None = None
    author: UserBasic | None = None
    committer: UserBasic | None = None
    parents: list[CommitParent] = []


class CompareFile(GiteeModel):
    sha: str = ""
    filename: str = ""
    status: str = ""
    additions: int = 0
    deletions: int = 0
    changes: int = 0
    blob_url: str = ""
    raw_url: str = ""
    content_url: str = ""
    patch: str = ""


class Compare(GiteeModel):
    commits: list[CompareCommit] = []
    files: list[CompareFile] = []
