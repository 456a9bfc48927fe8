"""Tests for the command-line entry point."""

from __future__ import annotations

import os

from click.testing import CliRunner

from mcp_gitee import main
from mcp_gitee.servers import gitee


def test_main_maps_options_to_env(monkeypatch):
    calls: dict = {}

    async def fake_run_async(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(gitee.mcp, "run_async", fake_run_async)
    monkeypatch.setenv("GITEE_TOKEN", "")
    monkeypatch.setenv("GITEE_READ_ONLY", "false")

    result = CliRunner().invoke(main, ["--gitee-token", "abc", "--read-only"])

    assert result.exit_code == 0, result.output
    assert os.environ["GITEE_TOKEN"] == "abc"
    assert os.environ["GITEE_READ_ONLY"] == "true"
    assert calls == {"transport": "stdio", "show_banner": False}


def test_main_http_transport_passes_host_and_port(monkeypatch):
    calls: dict = {}

    async def fake_run_async(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(gitee.mcp, "run_async", fake_run_async)
    monkeypatch.setenv("GITEE_READ_ONLY", "false")

    result = CliRunner().invoke(
        main, ["--transport", "sse", "--host", "0.0.0.0", "--port", "9000"]
    )

    assert result.exit_code == 0, result.output
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 9000
