"""Shared helper functions for server modules."""

from __future__ import annotations

import re
from urllib.parse import unquote

# Matches:  <host>/<owner>/<repo>[.git][/anything]
_REPO_URL_RE = re.compile(r"https?://[^/]+/([^/]+)/([^/?#]+?)(?:\.git)?(?:[/?#].*)?$")


def _parse_gitee_repo(value: str) -> tuple[str, str]:
    """Split a repository reference into (owner, repo).

    Accepts ``owner/repo`` or a Gitee web/clone URL such as
    ``https://gitee.com/owner/repo/tree/master``.
    """
    value = value.strip()
    if value.startswith(("http://", "https://")):
        m = _REPO_URL_RE.match(value)
        if m:
            return unquote(m.group(1)), unquote(m.group(2))
    else:
        owner, sep, repo = value.partition("/")
        if sep and owner and repo and "/" not in repo:
            return owner, repo
    msg = f"Invalid repository reference: {value!r} (expected 'owner/repo' or a Gitee URL)"
    raise ValueError(msg)
