"""Gitee API client using httpx."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from .api import GitDataApi, HttpGiteeApi, WebhooksApi
from .config import GiteeConfig
from .exceptions import GiteeApiError
from .models.base import decode
from .models.git_data import Blob, Tree
from .models.hooks import Hook, HookSpec
from .models.oauth import AccessToken
from .models.projects import Project
from .models.repositories import Compare, RepoCommit

logger = logging.getLogger(__name__)


class GiteeClient:
    """Async HTTP client for the Gitee REST API v5.

    Repository, commit and compare calls are built here against the API host.
    Webhook and git-data calls go through the ``webhooks`` and ``git_data``
    sub-APIs, which default to :class:`HttpGiteeApi` and can be replaced with
    anything implementing the same protocols. Token refresh uses a separate
    transport bound to the OAuth host.
    """

    def __init__(
        self,
        config: GiteeConfig | None = None,
        *,
        webhooks: WebhooksApi | None = None,
        git_data: GitDataApi | None = None,
    ) -> None:
        self.config = config or GiteeConfig.from_env()
        self.config.validate(require_token=False)
        self._client = self._make_transport(self.config.api_url)
        self._oauth_client = self._make_transport(self.config.oauth_base_url)

        generated = HttpGiteeApi(self, token=self.config.token)
        self.webhooks: WebhooksApi = webhooks or generated
        self.git_data: GitDataApi = git_data or generated

    def _make_transport(self, base_url: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.config.timeout,
            verify=self.config.ssl_verify,
        )

    async def close(self) -> None:
        await self._client.aclose()
        await self._oauth_client.aclose()

    async def __aenter__(self) -> GiteeClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ── HTTP helpers ──────────────────────────────────────────────

    @staticmethod
    def _encode(segment: str | int) -> str:
        """Encode a single path segment (owner, repo, org)."""
        return quote(str(segment), safe="")

    @staticmethod
    def _encode_ref(ref: str) -> str:
        """Encode a SHA or ref; slashes in branch names like ``feature/x`` stay as-is."""
        return quote(ref, safe="/")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
        oauth: bool = False,
    ) -> Any:
        """Make an API request and return the parsed JSON body (``None`` if empty)."""
        transport = self._oauth_client if oauth else self._client
        kwargs: dict[str, Any] = {"params": params}
        if json_data is not None:
            kwargs["json"] = json_data

        logger.debug("%s %s (%s)", method, path, "oauth" if oauth else "api")
        try:
            resp = await transport.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise GiteeApiError(None, type(e).__name__, str(e)) from e

        if not resp.is_success:
            logger.warning("%s %s returned %s", method, path, resp.status_code)
            raise GiteeApiError(resp.status_code, resp.reason_phrase or "", resp.text)

        if resp.status_code == 204 or not resp.content:
            return None

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response — check URL and access token"
            raise GiteeApiError(resp.status_code, msg, resp.text[:500])

        try:
            return resp.json()
        except json.JSONDecodeError as e:
            raise GiteeApiError(
                resp.status_code,
                f"JSON parse error: {e}",
                resp.text[:500],
            ) from e

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self._request("POST", path, json_data=json_data, **kwargs)

    async def patch(self, path: str, json_data: Any = None, **kwargs: Any) -> Any:
        return await self._request("PATCH", path, json_data=json_data, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self._request("DELETE", path, **kwargs)

    # ── Repositories ──────────────────────────────────────────────

    async def list_repositories_for_authenticated_user(
        self, access_token: str, keyword: str, page: int, per_page: int
    ) -> list[Project]:
        params = {
            "access_token": access_token,
            "visibility": "all",
            "affiliation": "owner",
            "q": keyword,
            "page": str(page),
            "per_page": str(per_page),
        }
        data = await self.get("/v5/user/repos", params=params)
        return decode(list[Project], data)

    async def list_repositories_for_org(
        self, access_token: str, org: str, page: int, per_page: int
    ) -> list[Project]:
        params = {
            "access_token": access_token,
            "type": "all",
            "page": str(page),
            "per_page": str(per_page),
        }
        data = await self.get(f"/v5/orgs/{self._encode(org)}/repos", params=params)
        return decode(list[Project], data)

    # ── Webhooks ──────────────────────────────────────────────────

    async def list_hooks(
        self,
        owner: str,
        repo: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Hook]:
        return await self.webhooks.list_hooks(owner, repo, page=page, per_page=per_page)

    async def delete_hook(self, owner: str, repo: str, hook_id: int) -> None:
        await self.webhooks.delete_hook(owner, repo, hook_id)

    async def create_hook(self, access_token: str, owner: str, repo: str, hook: HookSpec) -> Hook:
        # Gitee's create endpoint takes the event flags as strings.
        body = {
            "access_token": access_token,
            "url": hook.url,
            "password": hook.secret,
            "push_events": "true",
            "tag_push_events": "true",
            "merge_requests_events": "true",
        }
        data = await self.post(f"/v5/repos/{self._encode(owner)}/{self._encode(repo)}/hooks", body)
        return decode(Hook, data)

    async def update_hook(self, owner: str, repo: str, hook_id: int, hook: HookSpec) -> Hook:
        return await self.webhooks.update_hook(
            owner,
            repo,
            hook_id,
            hook.url,
            password=hook.secret,
            push_events=True,
            tag_push_events=True,
            merge_requests_events=True,
        )

    # ── Git data ──────────────────────────────────────────────────

    async def get_contents(self, owner: str, repo: str, sha: str) -> Blob:
        return await self.git_data.get_blob(owner, repo, sha)

    async def get_trees(self, owner: str, repo: str, sha: str, level: int) -> Tree:
        """Get a tree; any nonzero *level* asks Gitee for a recursive listing.

        *sha* may be a branch name, a commit SHA or a tree SHA.
        """
        return await self.git_data.get_tree(owner, repo, sha, recursive=level)

    # ── Commits ───────────────────────────────────────────────────

    async def get_single_commit_of_project(
        self, access_token: str, owner: str, repo: str, sha: str
    ) -> RepoCommit:
        path = (
            f"/v5/repos/{self._encode(owner)}/{self._encode(repo)}"
            f"/commits/{self._encode_ref(sha)}"
        )
        data = await self.get(path, params={"access_token": access_token})
        return decode(RepoCommit, data)

    async def compare(
        self, access_token: str, owner: str, repo: str, base: str, head: str
    ) -> Compare:
        path = (
            f"/v5/repos/{self._encode(owner)}/{self._encode(repo)}"
            f"/compare/{self._encode_ref(base)}...{self._encode_ref(head)}"
        )
        data = await self.get(path, params={"access_token": access_token})
        return decode(Compare, data)

    # ── OAuth ─────────────────────────────────────────────────────

    async def refresh_access_token(self, refresh_token: str) -> AccessToken:
        params = {"grant_type": "refresh_token", "refresh_token": refresh_token}
        data = await self.post("/oauth/token", params=params, oauth=True)
        return decode(AccessToken, data)
