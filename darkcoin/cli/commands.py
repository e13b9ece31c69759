"""CLI commands for darkcoin.

Top-level commands (call, status) plus the wallet and gov command groups.
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from darkcoin import __logo__, __version__
from darkcoin.cli.command_groups.governance_command import register_governance_commands
from darkcoin.cli.command_groups.wallet_command import register_wallet_commands
from darkcoin.cli.shared.logging_utils import configure_stderr, ensure_rotating_log_file
from darkcoin.cli.shared.rpc_utils import load_cli_config, parse_cli_param, run_rpc

app = typer.Typer(
    name="darkcoin",
    help=f"{__logo__} darkcoin - dashd JSON-RPC client",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} darkcoin v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log requests and responses to stderr"),
    log_file: bool = typer.Option(False, "--log-file", help="Also log to ~/.darkcoin/logs/cli.log"),
):
    """darkcoin - dashd JSON-RPC client."""
    configure_stderr("DEBUG" if verbose else "WARNING")
    if log_file:
        ensure_rotating_log_file("cli", level=load_cli_config(console).log_level)


@app.command()
def call(
    method: str = typer.Argument(..., help="dashd method, e.g. getblockhash"),
    params: Optional[list[str]] = typer.Argument(None, help="Positional params; JSON literals are decoded"),
    call_id: Optional[int] = typer.Option(None, "--id", help="Correlation id for the request"),
):
    """Call any dashd method and print its result."""
    values = [parse_cli_param(p) for p in params or []]
    result = run_rpc(console, lambda client: client.call_rpc_method(method, values, call_id))
    if isinstance(result, str):
        console.print(result, markup=False)
    else:
        console.print_json(json.dumps(result))


@app.command()
def status():
    """Show configured endpoint and current block height."""
    from darkcoin.config.loader import get_config_path

    config_path = get_config_path()
    config = load_cli_config(console)
    console.print(f"{__logo__} darkcoin Status\n")
    console.print(f"Config: {config_path} {'[green]✓[/green]' if config_path.exists() else '[dim]not found[/dim]'}")
    console.print(f"Endpoint: {escape(config.dashd.url)}")
    console.print(f"User: {escape(config.dashd.user) or '[dim]not set[/dim]'}")
    height = run_rpc(console, lambda client: client.get_block_count())
    console.print(f"Blocks: [cyan]{height}[/cyan]")


register_wallet_commands(app=app, console=console)
register_governance_commands(app=app, console=console)


if __name__ == "__main__":
    app()
