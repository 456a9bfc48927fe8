"""Gitee API exceptions."""

from __future__ import annotations


class GiteeError(Exception):
    """Base exception for Gitee operations."""


class GiteeApiError(GiteeError):
    """Raised when a Gitee request fails.

    Covers non-success responses, network failures and bodies that cannot be
    decoded into the expected record. ``status_code`` is ``None`` when no HTTP
    status applies (the request never completed, or the body was malformed).
    """

    def __init__(self, status_code: int | None, status_text: str, body: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        prefix = f"Gitee API Error {status_code}" if status_code is not None else "Gitee API Error"
        super().__init__(f"{prefix} {status_text}: {body}")


class GiteeWriteDisabledError(GiteeError):
    """Raised when a write operation is attempted in read-only mode."""

    def __init__(self) -> None:
        super().__init__("Write operations are disabled (GITEE_READ_ONLY=true)")
