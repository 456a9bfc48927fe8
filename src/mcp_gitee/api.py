"""Webhook and git-data endpoints of the Gitee v5 API.

:class:`GiteeClient` only depends on the two protocols below, so tests and
callers can swap in any object providing the same coroutines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote

from .models.base import decode
from .models.git_data import Blob, Tree
from .models.hooks import Hook

if TYPE_CHECKING:
    from .client import GiteeClient


class WebhooksApi(Protocol):
    async def list_hooks(
        self, owner: str, repo: str, *, page: int | None = None, per_page: int | None = None
    ) -> list[Hook]: ...

    async def delete_hook(self, owner: str, repo: str, hook_id: int) -> None: ...

    async def update_hook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        url: str,
        *,
        password: str | None = None,
        push_events: bool | None = None,
        tag_push_events: bool | None = None,
        merge_requests_events: bool | None = None,
    ) -> Hook: ...


class GitDataApi(Protocol):
    async def get_blob(self, owner: str, repo: str, sha: str) -> Blob: ...

    async def get_tree(
        self, owner: str, repo: str, sha: str, *, recursive: int | None = None
    ) -> Tree: ...


class HttpGiteeApi:
    """Default implementation of :class:`WebhooksApi` and :class:`GitDataApi`.

    Requests share the owning client's API transport. The configured token,
    when set, is attached as ``access_token``; optional parameters left as
    ``None`` are not sent.
    """

    def __init__(self, client: GiteeClient, token: str = "") -> None:
        self._client = client
        self._token = token

    @staticmethod
    def _repo_path(owner: str, repo: str) -> str:
        return f"/v5/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    def _with_token(self, values: dict[str, Any]) -> dict[str, Any]:
        out = {k: v for k, v in values.items() if v is not None}
        if self._token:
            out["access_token"] = self._token
        return out

    # ── Webhooks ──────────────────────────────────────────────────

    async def list_hooks(
        self, owner: str, repo: str, *, page: int | None = None, per_page: int | None = None
    ) -> list[Hook]:
        params = self._with_token({"page": page, "per_page": per_page})
        data = await self._client.get(f"{self._repo_path(owner, repo)}/hooks", params=params)
        return decode(list[Hook], data)

    async def delete_hook(self, owner: str, repo: str, hook_id: int) -> None:
        await self._client.delete(
            f"{self._repo_path(owner, repo)}/hooks/{hook_id}",
            params=self._with_token({}),
        )

    async def update_hook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        url: str,
        *,
        password: str | None = None,
        push_events: bool | None = None,
        tag_push_events: bool | None = None,
        merge_requests_events: bool | None = None,
    ) -> Hook:
        body = self._with_token(
            {
                "url": url,
                "password": password,
                "push_events": push_events,
                "tag_push_events": tag_push_events,
                "merge_requests_events": merge_requests_events,
            }
        )
        data = await self._client.patch(f"{self._repo_path(owner, repo)}/hooks/{hook_id}", body)
        return decode(Hook, data)

    # ── Git data ──────────────────────────────────────────────────

    async def get_blob(self, owner: str, repo: str, sha: str) -> Blob:
        data = await self._client.get(
            f"{self._repo_path(owner, repo)}/git/blobs/{quote(sha, safe='/')}",
            params=self._with_token({}),
        )
        return decode(Blob, data)

    async def get_tree(
        self, owner: str, repo: str, sha: str, *, recursive: int | None = None
    ) -> Tree:
        # Gitee encodes the recursive flag as an integer; pass it through untouched.
        params = self._with_token({"recursive": recursive})
        data = await self._client.get(
            f"{self._repo_path(owner, repo)}/git/trees/{quote(sha, safe='/')}",
            params=params,
        )
        return decode(Tree, data)
