"""Client construction and call running for CLI commands."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from darkcoin.client import DarkcoinClient
from darkcoin.config.schema import Config
from darkcoin.rpc.envelope import CallResult
from darkcoin.utils.exceptions import DarkcoinError, ErrorCategory, RpcApplicationError, classify_exception

EXIT_APPLICATION_ERROR = 1
EXIT_CLIENT_ERROR = 2


def load_cli_config(console: Console) -> Config:
    """Load config for a command; a broken config file exits with code 2."""
    from darkcoin.config.loader import load_config

    try:
        return load_config()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(EXIT_CLIENT_ERROR)


def make_client() -> DarkcoinClient:
    """Build a client from ~/.darkcoin/config.json and DASHD_* env vars."""
    from darkcoin.config.loader import load_config

    config = load_config()
    return DarkcoinClient(config.dashd)


def parse_cli_param(raw: str) -> Any:
    """JSON literal when it parses (numbers, booleans, arrays, objects), otherwise the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def run_rpc(
    console: Console,
    action: Callable[[DarkcoinClient], Awaitable[CallResult[Any]]],
) -> Any:
    """
    Run one call and return its result.

    Application errors exit with code 1; argument, config and transport
    errors with 2.
    """

    async def _run() -> CallResult[Any]:
        async with make_client() as client:
            return await action(client)

    try:
        return asyncio.run(_run()).unwrap()
    except (DarkcoinError, ValueError) as e:
        code, category = classify_exception(e)
        logger.debug(f"cli call failed: {code} ({category.value})")
        if isinstance(e, RpcApplicationError):
            label = "dashd error" if e.rpc_code is None else f"dashd error {e.rpc_code}"
            console.print(f"[red]{label}: {escape(e.rpc_message)}[/red]")
        else:
            console.print(f"[red]{escape(str(e))}[/red]")
        if category is ErrorCategory.APPLICATION:
            raise typer.Exit(EXIT_APPLICATION_ERROR)
        raise typer.Exit(EXIT_CLIENT_ERROR)
