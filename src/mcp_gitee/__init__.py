"""MCP server and client for the Gitee API."""

import asyncio
import logging
import os

import click
from dotenv import load_dotenv


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="MCP transport type",
)
@click.option("--port", default=8000, help="Port for HTTP transports")
@click.option("--host", default="127.0.0.1", help="Host for HTTP transports")
@click.option("--gitee-url", envvar="GITEE_URL", help="Gitee API base URL")
@click.option("--gitee-token", envvar="GITEE_TOKEN", help="Gitee personal access token")
@click.option("--read-only", is_flag=True, help="Disable write operations")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
def main(
    transport: str,
    port: int,
    host: str,
    gitee_url: str | None,
    gitee_token: str | None,
    read_only: bool,
    log_level: str,
) -> None:
    """Run the Gitee MCP server."""
    load_dotenv()
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if gitee_url:
        os.environ["GITEE_URL"] = gitee_url
    if gitee_token:
        os.environ["GITEE_TOKEN"] = gitee_token
    if read_only:
        os.environ["GITEE_READ_ONLY"] = "true"

    from .servers.gitee import mcp

    run_kwargs: dict = {"transport": transport}
    if transport != "stdio":
        run_kwargs["host"] = host
        run_kwargs["port"] = port

    asyncio.run(mcp.run_async(show_banner=False, **run_kwargs))


if __name__ == "__main__":
    main()
