"""Gitee MCP server — all tool registrations."""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from ..client import GiteeClient
from ..config import GiteeConfig
from ..exceptions import GiteeApiError, GiteeWriteDisabledError
from ..models.base import GiteeModel
from ..models.hooks import HookSpec
from ._helpers import _parse_gitee_repo


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    config = GiteeConfig.from_env()
    config.validate()
    client = GiteeClient(config)
    try:
        yield {"client": client, "config": config}
    finally:
        await client.close()


mcp = FastMCP(
    name="Gitee MCP Server",
    instructions=(
        "Provides tools for interacting with the Gitee API"
        " — repositories, webhooks, commits, trees, blobs, and comparisons."
    ),
    lifespan=lifespan,
)


def _get_client(ctx: Context) -> GiteeClient:
    return ctx.request_context.lifespan_context["client"]


def _get_config(ctx: Context) -> GiteeConfig:
    return ctx.request_context.lifespan_context["config"]


def _check_write(ctx: Context) -> None:
    if _get_config(ctx).read_only:
        raise GiteeWriteDisabledError


def _jsonable(data: Any) -> Any:
    if isinstance(data, GiteeModel):
        return data.to_dict()
    if isinstance(data, list):
        return [_jsonable(item) for item in data]
    return data


def _ok(data: Any) -> str:
    return json.dumps(_jsonable(data), indent=2, ensure_ascii=False)


def _err(error: Exception) -> str:
    detail: dict[str, Any] = {"error": str(error)}
    if isinstance(error, GiteeWriteDisabledError):
        detail["hint"] = "Server is in read-only mode. Set GITEE_READ_ONLY=false to enable writes."
    elif isinstance(error, GiteeApiError):
        detail["status_code"] = error.status_code
        detail["body"] = error.body
        if error.status_code in (401, 403):
            detail["hint"] = "Check GITEE_TOKEN scopes (projects, hook)."
        elif error.status_code == 404:
            detail["hint"] = "Verify the owner/repo and ref. Use gitee_list_user_repos to confirm."
        elif error.status_code == 422:
            detail["hint"] = "Validation failed — check required fields and formats."
        elif error.status_code == 429:
            detail["hint"] = "Rate limited. Wait before retrying."
        elif error.status_code is None:
            detail["hint"] = "Request did not complete or returned an unexpected body."
    elif isinstance(error, ValueError):
        detail["hint"] = "Check the tool arguments."
    return json.dumps(detail, indent=2, ensure_ascii=False)


_Repo = Annotated[
    str,
    Field(description="Repository as 'owner/repo' or a Gitee URL", min_length=1),
]


# ════════════════════════════════════════════════════════════════════
# Repositories
# ════════════════════════════════════════════════════════════════════


@mcp.tool(
    tags={"gitee", "repositories", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_list_user_repos(
    ctx: Context,
    keyword: Annotated[str, Field(description="Search keyword")] = "",
    page: Annotated[int, Field(description="Page number", ge=1)] = 1,
    per_page: Annotated[int, Field(description="Results per page (1-100)", ge=1, le=100)] = 20,
) -> str:
    """List repositories owned by the authenticated user."""
    try:
        token = _get_config(ctx).token
        data = await _get_client(ctx).list_repositories_for_authenticated_user(
            token, keyword, page, per_page
        )
        return _ok(data)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitee", "repositories", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_list_org_repos(
    ctx: Context,
    org: Annotated[str, Field(description="Organization path", min_length=1)],
    page: Annotated[int, Field(description="Page number", ge=1)] = 1,
    per_page: Annotated[int, Field(description="Results per page (1-100)", ge=1, le=100)] = 20,
) -> str:
    """List all repositories of an organization."""
    try:
        token = _get_config(ctx).token
        data = await _get_client(ctx).list_repositories_for_org(token, org, page, per_page)
        return _ok(data)
    except Exception as e:
        return _err(e)


# ════════════════════════════════════════════════════════════════════
# Webhooks
# ════════════════════════════════════════════════════════════════════


@mcp.tool(
    tags={"gitee", "webhooks", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_list_hooks(
    ctx: Context,
    repo: _Repo,
    page: Annotated[int | None, Field(description="Page number", ge=1)] = None,
    per_page: Annotated[
        int | None, Field(description="Results per page (1-100)", ge=1, le=100)
    ] = None,
) -> str:
    """List webhooks configured on a repository."""
    try:
        owner, name = _parse_gitee_repo(repo)
        data = await _get_client(ctx).list_hooks(owner, name, page=page, per_page=per_page)
        return _ok(data)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitee", "webhooks", "write"},
    annotations={"readOnlyHint": False, "openWorldHint": True},
)
async def gitee_create_hook(
    ctx: Context,
    repo: _Repo,
    url: Annotated[str, Field(description="Callback URL", min_length=1)],
    secret: Annotated[str, Field(description="Shared secret sent with each delivery")] = "",
) -> str:
    """Create a webhook subscribed to push, tag push, and pull request events."""
    try:
        _check_write(ctx)
        owner, name = _parse_gitee_repo(repo)
        token = _get_config(ctx).token
        data = await _get_client(ctx).create_hook(
            token, owner, name, HookSpec(url=url, secret=secret)
        )
        return _ok(data)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitee", "webhooks", "write"},
    annotations={"readOnlyHint": False, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_update_hook(
    ctx: Context,
    repo: _Repo,
    hook_id: Annotated[int, Field(description="Webhook ID")],
    url: Annotated[str, Field(description="Callback URL", min_length=1)],
    secret: Annotated[str, Field(description="Shared secret sent with each delivery")] = "",
) -> str:
    """Update a webhook's URL and secret, re-enabling push, tag push, and PR events."""
    try:
        _check_write(ctx)
        owner, name = _parse_gitee_repo(repo)
        data = await _get_client(ctx).update_hook(
            owner, name, hook_id, HookSpec(url=url, secret=secret)
        )
        return _ok(data)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitee", "webhooks", "write"},
    annotations={"destructiveHint": True, "readOnlyHint": False, "openWorldHint": True},
)
async def gitee_delete_hook(
    ctx: Context,
    repo: _Repo,
    hook_id: Annotated[int, Field(description="Webhook ID")],
) -> str:
    """Delete a webhook from a repository."""
    try:
        _check_write(ctx)
        owner, name = _parse_gitee_repo(repo)
        await _get_client(ctx).delete_hook(owner, name, hook_id)
        return _ok({"status": "deleted", "hook_id": hook_id})
    except Exception as e:
        return _err(e)


# ════════════════════════════════════════════════════════════════════
# Git data
# ════════════════════════════════════════════════════════════════════


@mcp.tool(
    tags={"gitee", "git", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_get_blob(
    ctx: Context,
    repo: _Repo,
    sha: Annotated[str, Field(description="Blob SHA", min_length=1)],
    decode_content: Annotated[
        bool, Field(description="Decode base64 content to text")
    ] = False,
) -> str:
    """Get a file blob by SHA, optionally decoding its content."""
    try:
        owner, name = _parse_gitee_repo(repo)
        blob = await _get_client(ctx).get_contents(owner, name, sha)
        data = blob.to_dict()
        if decode_content and blob.encoding == "base64":
            try:
                raw = base64.b64decode(blob.content)
            except binascii.Error as e:
                msg = f"Blob content is not valid base64: {e}"
                raise ValueError(msg) from e
            data["content"] = raw.decode("utf-8", errors="replace")
            data["encoding"] = "utf-8"
        return _ok(data)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitee", "git", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_get_tree(
    ctx: Context,
    repo: _Repo,
    sha: Annotated[str, Field(description="Branch name, commit SHA, or tree SHA", min_length=1)],
    recursive: Annotated[bool, Field(description="List subdirectories recursively")] = False,
) -> str:
    """Get a directory tree."""
    try:
        owner, name = _parse_gitee_repo(repo)
        data = await _get_client(ctx).get_trees(owner, name, sha, 1 if recursive else 0)
        return _ok(data)
    except Exception as e:
        return _err(e)


# ════════════════════════════════════════════════════════════════════
# Commits
# ════════════════════════════════════════════════════════════════════


@mcp.tool(
    tags={"gitee", "commits", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_get_commit(
    ctx: Context,
    repo: _Repo,
    sha: Annotated[str, Field(description="Commit SHA", min_length=1)],
) -> str:
    """Get a single commit."""
    try:
        owner, name = _parse_gitee_repo(repo)
        token = _get_config(ctx).token
        data = await _get_client(ctx).get_single_commit_of_project(token, owner, name, sha)
        return _ok(data)
    except Exception as e:
        return _err(e)


@mcp.tool(
    tags={"gitee", "commits", "read"},
    annotations={"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True},
)
async def gitee_compare(
    ctx: Context,
    repo: _Repo,
    base: Annotated[str, Field(description="Base branch/tag/SHA", min_length=1)],
    head: Annotated[str, Field(description="Head branch/tag/SHA", min_length=1)],
) -> str:
    """Compare two branches, tags, or commits."""
    try:
        owner, name = _parse_gitee_repo(repo)
        token = _get_config(ctx).token
        data = await _get_client(ctx).compare(token, owner, name, base, head)
        return _ok(data)
    except Exception as e:
        return _err(e)


# ════════════════════════════════════════════════════════════════════
# OAuth
# ════════════════════════════════════════════════════════════════════


@mcp.tool(
    tags={"gitee", "oauth", "write"},
    annotations={"readOnlyHint": False, "openWorldHint": True},
)
async def gitee_refresh_token(
    ctx: Context,
    refresh_token: Annotated[str, Field(description="OAuth refresh token", min_length=1)],
) -> str:
    """Exchange a refresh token for a new OAuth access token."""
    try:
        _check_write(ctx)
        data = await _get_client(ctx).refresh_access_token(refresh_token)
        return _ok(data)
    except Exception as e:
        return _err(e)
